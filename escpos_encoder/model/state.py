"""
Print state (PrintState): the formatting the printer currently has active.

Owned by exactly one PrintStateTracker; passed by reference, never global.
Only the tracker mutates it. ``snapshot()`` gives callers and tests an
independent copy to compare before/after an operation.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from escpos_encoder.model.enums import (
    DEFAULT_ALIGNMENT,
    DEFAULT_BOLD,
    DEFAULT_SIZE,
    DEFAULT_UNDERLINE,
    Alignment,
    Bold,
    Codepage,
    TextSize,
    Underline,
)

__all__ = ["PrintState"]


@dataclass(slots=True)
class PrintState:
    """
    Tracked printer state.

    Attributes:
        codepage: Selected codepage, ``None`` until one is selected.
        bold: Emphasis mode.
        italic: Italic on/off.
        underline: Underline mode.
        align: Justification.
        size: Character size.
    """

    codepage: Optional[Codepage] = None
    bold: Bold = DEFAULT_BOLD
    italic: bool = False
    underline: Underline = DEFAULT_UNDERLINE
    align: Alignment = DEFAULT_ALIGNMENT
    size: TextSize = DEFAULT_SIZE

    def snapshot(self) -> "PrintState":
        return replace(self)

    def reset_formatting(self) -> None:
        """Restore every field except the codepage to its default."""
        self.bold = DEFAULT_BOLD
        self.italic = False
        self.underline = DEFAULT_UNDERLINE
        self.align = DEFAULT_ALIGNMENT
        self.size = DEFAULT_SIZE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "codepage": self.codepage.value if self.codepage else None,
            "bold": self.bold.value,
            "italic": self.italic,
            "underline": self.underline.value,
            "align": self.align.value,
            "size": self.size.value,
        }
