"""
Text formatting ESC/POS commands.

Contains commands for emphasized (bold), double-strike, italic and underline
modes. Each mode takes an explicit parameter byte, so a command is always
emitted even when the mode is already active.

Reference: ESC/POS Application Programming Guide, "Print character" commands
"""

from typing import Final

__all__ = [
    "ESC_BOLD_ON",
    "ESC_BOLD_OFF",
    "ESC_DOUBLE_STRIKE_ON",
    "ESC_DOUBLE_STRIKE_OFF",
    "ESC_ITALIC_ON",
    "ESC_ITALIC_OFF",
    "ESC_UNDERLINE_OFF",
    "ESC_UNDERLINE_ON",
    "ESC_UNDERLINE_DOUBLE",
    "set_emphasized",
    "set_double_strike",
    "set_italic",
    "set_underline",
]

# =============================================================================
# BOLD (EMPHASIZED) MODE
# =============================================================================


def set_emphasized(enabled: bool) -> bytes:
    """
    Turn emphasized mode on or off.

    Command: ESC E n
    Hex: 1B 45 n
    Note: Only the LSB of n is evaluated by the printer.
    """
    return b"\x1bE" + bytes([1 if enabled else 0])


def set_double_strike(enabled: bool) -> bytes:
    """
    Turn double-strike mode on or off.

    Command: ESC G n
    Hex: 1B 47 n
    Effect: Combined with ESC E 1 gives the heaviest ("double") bold.
    """
    return b"\x1bG" + bytes([1 if enabled else 0])


ESC_BOLD_ON: Final[bytes] = set_emphasized(True)
ESC_BOLD_OFF: Final[bytes] = set_emphasized(False)
ESC_DOUBLE_STRIKE_ON: Final[bytes] = set_double_strike(True)
ESC_DOUBLE_STRIKE_OFF: Final[bytes] = set_double_strike(False)

# =============================================================================
# ITALIC MODE
# =============================================================================


def set_italic(enabled: bool) -> bytes:
    """
    Turn italic printing on or off.

    Command: ESC 4 n
    Hex: 1B 34 n
    """
    return b"\x1b4" + bytes([1 if enabled else 0])


ESC_ITALIC_ON: Final[bytes] = set_italic(True)
ESC_ITALIC_OFF: Final[bytes] = set_italic(False)

# =============================================================================
# UNDERLINE
# =============================================================================


def set_underline(thickness: int) -> bytes:
    """
    Select underline mode.

    Command: ESC - n
    Hex: 1B 2D n

    Args:
        thickness: 0 = off, 1 = one-dot underline, 2 = two-dot underline.

    Raises:
        ValueError: If thickness is not 0, 1 or 2.
    """
    if thickness not in (0, 1, 2):
        raise ValueError(f"Underline thickness must be 0, 1 or 2, got {thickness}")
    return b"\x1b-" + bytes([thickness])


ESC_UNDERLINE_OFF: Final[bytes] = set_underline(0)
ESC_UNDERLINE_ON: Final[bytes] = set_underline(1)
ESC_UNDERLINE_DOUBLE: Final[bytes] = set_underline(2)

# =============================================================================
# USAGE EXAMPLES
# =============================================================================

"""
COMBINING MULTIPLE FORMATS:
    >>> cmd = ESC_BOLD_ON + ESC_UNDERLINE_ON + b"Total" + ESC_UNDERLINE_OFF + ESC_BOLD_OFF

DOUBLE BOLD:
    Emphasized plus double-strike. Cancel both when leaving it:

    >>> cmd = ESC_BOLD_ON + ESC_DOUBLE_STRIKE_ON + b"HEAVY"
    >>> cmd += ESC_DOUBLE_STRIKE_OFF + ESC_BOLD_OFF

RESETTING ALL FORMATTING:
    >>> from escpos_encoder.escpos.commands.hardware import ESC_INIT_PRINTER
    >>> printer_bytes = ESC_INIT_PRINTER  # Resets ALL modes
"""
