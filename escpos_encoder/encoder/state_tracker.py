"""
encoder/state_tracker.py

(Краткое RU: Отслеживание состояния принтера и генерация команд форматирования.)

EN: Print state tracker. Owns the PrintState of one encoder and the active
codepage table, and turns every formatting request into its command bytes.

Commands are emitted unconditionally: setting a mode that is already active
still produces the command, so the output never depends on what the printer
may or may not remember.

Toggles: passing ``None`` to bold, italic or underline flips the mode
(bold OFF <-> ON, DOUBLE -> OFF; underline OFF <-> SINGLE, DOUBLE -> OFF).
"""

from __future__ import annotations

import logging
from typing import Final, Optional, Union

from escpos_encoder.escpos.commands.charset import (
    select_character_mode,
    select_character_table,
)
from escpos_encoder.escpos.commands.hardware import ESC_INIT_PRINTER
from escpos_encoder.escpos.commands.positioning import select_justification
from escpos_encoder.escpos.commands.sizing import text_size_command
from escpos_encoder.escpos.commands.text_formatting import (
    ESC_BOLD_OFF,
    ESC_BOLD_ON,
    ESC_DOUBLE_STRIKE_OFF,
    ESC_DOUBLE_STRIKE_ON,
    set_italic,
    set_underline,
)
from escpos_encoder.exceptions import ConfigError
from escpos_encoder.model.enums import (
    Alignment,
    Bold,
    Codepage,
    TextSize,
    Underline,
    coerce_enum,
)
from escpos_encoder.model.state import PrintState
from escpos_encoder.text.codepages import CodepageTable, get_codepage_table

logger: Final = logging.getLogger(__name__)

__all__ = ["PrintStateTracker"]

BoldValue = Union[Bold, str, bool, None]
UnderlineValue = Union[Underline, str, bool, None]

_UNDERLINE_THICKNESS: Final[dict[Underline, int]] = {
    Underline.OFF: 0,
    Underline.SINGLE: 1,
    Underline.DOUBLE: 2,
}


class PrintStateTracker:
    """
    Tracks the formatting state the printer is in.

    Attributes:
        state: The live PrintState (mutated only here).
        table: Active codepage table, ``None`` until ``set_codepage``.
    """

    def __init__(self) -> None:
        self.state = PrintState()
        self.table: Optional[CodepageTable] = None

    def snapshot(self) -> PrintState:
        return self.state.snapshot()

    def reset(self) -> None:
        """Forget everything, codepage included."""
        self.state = PrintState()
        self.table = None

    def initialize(self) -> bytes:
        """
        ESC @, then re-select the active table.

        ESC @ puts the printer back on table 0 in single-byte mode; the tracked
        codepage is kept and sent again so text keeps matching the printer.
        """
        self.state.reset_formatting()
        if self.table is None:
            return ESC_INIT_PRINTER
        return ESC_INIT_PRINTER + self._select_table(self.table)

    @staticmethod
    def _select_table(table: CodepageTable) -> bytes:
        return select_character_table(table.printer_index) + select_character_mode(
            table.multibyte
        )

    def set_codepage(self, name: Union[Codepage, str]) -> bytes:
        table = get_codepage_table(name)
        self.table = table
        self.state.codepage = table.name
        logger.debug("Codepage %s (ESC t %d)", table.name.value, table.printer_index)
        return self._select_table(table)

    def set_bold(self, value: BoldValue = None) -> bytes:
        previous = self.state.bold
        if value is None:
            target = Bold.ON if previous is Bold.OFF else Bold.OFF
        elif isinstance(value, bool):
            target = Bold.ON if value else Bold.OFF
        else:
            target = coerce_enum(Bold, value, "bold mode")

        if target is Bold.DOUBLE:
            out = ESC_BOLD_ON + ESC_DOUBLE_STRIKE_ON
        else:
            out = ESC_BOLD_ON if target is Bold.ON else ESC_BOLD_OFF
            if previous is Bold.DOUBLE:
                out += ESC_DOUBLE_STRIKE_OFF

        self.state.bold = target
        return out

    def set_italic(self, value: Optional[bool] = None) -> bytes:
        if value is None:
            value = not self.state.italic
        elif not isinstance(value, bool):
            logger.error("Italic expects a bool, got %r", value)
            raise ConfigError(f"Unknown italic mode {value!r}; expected True, False or None")
        self.state.italic = value
        return set_italic(value)

    def set_underline(self, value: UnderlineValue = None) -> bytes:
        if value is None:
            target = Underline.SINGLE if self.state.underline is Underline.OFF else Underline.OFF
        elif isinstance(value, bool):
            target = Underline.SINGLE if value else Underline.OFF
        else:
            target = coerce_enum(Underline, value, "underline mode")
        self.state.underline = target
        return set_underline(_UNDERLINE_THICKNESS[target])

    def set_align(self, value: Union[Alignment, str]) -> bytes:
        align = coerce_enum(Alignment, value, "alignment")
        self.state.align = align
        return select_justification(align)

    def set_size(self, value: Union[TextSize, str]) -> bytes:
        size = coerce_enum(TextSize, value, "text size")
        self.state.size = size
        return text_size_command(size)

    def __repr__(self) -> str:
        return f"PrintStateTracker({self.state!r})"
