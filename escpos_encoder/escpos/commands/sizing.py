"""
Character sizing commands for ESC/POS printers.

Contains font selection (Font A / Font B) and the character size command
used for wide, tall and double-size text.

Reference: ESC/POS Application Programming Guide, ESC M and GS !
"""

from typing import Final

from escpos_encoder.model.enums import TextSize

__all__ = [
    "ESC_FONT_A",
    "ESC_FONT_B",
    "select_font",
    "select_character_size",
    "text_size_command",
]

# =============================================================================
# FONT SELECTION
# =============================================================================


def select_font(font: int) -> bytes:
    """
    Select character font.

    Command: ESC M n
    Hex: 1B 4D n
    n: 0 = Font A (12×24), 1 = Font B (9×17, the "small" font)
    """
    if font not in (0, 1):
        raise ValueError(f"Font must be 0 or 1, got {font}")
    return b"\x1bM" + bytes([font])


ESC_FONT_A: Final[bytes] = select_font(0)
ESC_FONT_B: Final[bytes] = select_font(1)

# =============================================================================
# CHARACTER SIZE
# =============================================================================


def select_character_size(width: int, height: int) -> bytes:
    """
    Select character magnification.

    Command: GS ! n
    Hex: 1D 21 n
    n: bits 4-6 = width multiplier - 1, bits 0-2 = height multiplier - 1

    Args:
        width: Horizontal magnification (1-8).
        height: Vertical magnification (1-8).

    Raises:
        ValueError: If either multiplier is out of range.
    """
    if not (1 <= width <= 8):
        raise ValueError(f"Width multiplier must be 1-8, got {width}")
    if not (1 <= height <= 8):
        raise ValueError(f"Height multiplier must be 1-8, got {height}")
    return b"\x1d!" + bytes([((width - 1) << 4) | (height - 1)])


# font, width multiplier, height multiplier
_SIZE_TABLE: Final[dict[TextSize, tuple[int, int, int]]] = {
    TextSize.SMALL: (1, 1, 1),
    TextSize.NORMAL: (0, 1, 1),
    TextSize.WIDE: (0, 2, 1),
    TextSize.TALL: (0, 1, 2),
    TextSize.DOUBLE: (0, 2, 2),
}


def text_size_command(size: TextSize) -> bytes:
    """
    Full command sequence for a named text size: font selection, then GS !.

    Example:
        >>> text_size_command(TextSize.DOUBLE)
        b'\\x1bM\\x00\\x1d!\\x11'
    """
    font, width, height = _SIZE_TABLE[size]
    return select_font(font) + select_character_size(width, height)
