"""
Line feed and justification commands for ESC/POS printers.

Reference: ESC/POS Application Programming Guide, LF, CR and ESC a
"""

from typing import Final

from escpos_encoder.model.enums import Alignment

__all__ = [
    "LF",
    "CR",
    "NEWLINE",
    "select_justification",
]

# =============================================================================
# CONTROL CHARACTERS
# =============================================================================

LF: Final[bytes] = b"\x0a"
"""Print and line feed (0A). Also flushes the print buffer."""

CR: Final[bytes] = b"\x0d"
"""Carriage return (0D). Ignored by most thermal printers in serial mode."""

NEWLINE: Final[bytes] = LF + CR
"""
Newline as emitted by ``newline()`` and by text wrapping.

Hex: 0A 0D
"""

# =============================================================================
# JUSTIFICATION
# =============================================================================

_JUSTIFICATION: Final[dict[Alignment, int]] = {
    Alignment.LEFT: 0,
    Alignment.CENTER: 1,
    Alignment.RIGHT: 2,
}


def select_justification(align: Alignment) -> bytes:
    """
    Align all data in one line.

    Command: ESC a n
    Hex: 1B 61 n
    n: 0 = left, 1 = center, 2 = right
    Note: Only takes effect at the beginning of a line.
    """
    return b"\x1ba" + bytes([_JUSTIFICATION[align]])
