"""
Character table (code page) selection for ESC/POS printers.

The printer-side table number is not standardised across vendors; the
numbers used by this package live in ``escpos_encoder.text.codepages`` next to
the lookup tables they select.

Reference: ESC/POS Application Programming Guide, ESC t
"""

from typing import Final

__all__ = [
    "FS_KANJI_ON",
    "FS_KANJI_OFF",
    "select_character_table",
    "select_character_mode",
]


def select_character_table(index: int) -> bytes:
    """
    Select character code table.

    Command: ESC t n
    Hex: 1B 74 n

    Args:
        index: Printer-side table number (0-255).

    Returns:
        ESC/POS command bytes.

    Raises:
        ValueError: If index is out of range.

    Note:
        Codes 0x20-0x7F stay ASCII in every table; the table only changes
        how 0x80-0xFF (or multi-byte sequences) are rendered.

    Example:
        >>> # Switch to PC866 (Cyrillic) before printing Russian text
        >>> select_character_table(0x11)
        b'\\x1bt\\x11'
    """
    if not (0 <= index <= 255):
        raise ValueError(f"Character table must be 0-255, got {index}")
    return b"\x1bt" + bytes([index])


# =============================================================================
# TWO-BYTE CHARACTER MODE
# =============================================================================

FS_KANJI_ON: Final[bytes] = b"\x1c&"
"""
Select two-byte (Kanji / Chinese) character mode.

Command: FS &
Hex: 1C 26
Note: Byte pairs of GBK, Big5, KS C 5601 or Shift_JIS text are then printed
as one glyph each.
"""

FS_KANJI_OFF: Final[bytes] = b"\x1c."
"""
Cancel two-byte character mode.

Command: FS .
Hex: 1C 2E
"""


def select_character_mode(multibyte: bool) -> bytes:
    """Two-byte mode for multi-byte tables, single-byte mode otherwise."""
    return FS_KANJI_ON if multibyte else FS_KANJI_OFF
