"""
Barcode commands for ESC/POS printers.

Contains the height, module width and print commands for the 1D symbologies
the printer renders natively. All symbologies are sent with ``GS k``
function B (type code 65-79 followed by an explicit length byte), so every
payload is length-prefixed.

Reference: ESC/POS Application Programming Guide, GS h / GS w / GS k
Payload validation lives in escpos_encoder.barcodes.barcode_framer.
"""

from typing import Final

from escpos_encoder.model.enums import Symbology

__all__ = [
    "BARCODE_TYPE_CODES",
    "MAX_BARCODE_DATA",
    "set_barcode_height",
    "set_barcode_width",
    "print_barcode",
]

# =============================================================================
# BARCODE TYPE CONSTANTS (GS k function B)
# =============================================================================

BARCODE_TYPE_CODES: Final[dict[Symbology, int]] = {
    Symbology.UPCA: 65,  # 'A'
    Symbology.UPCE: 66,  # 'B'
    Symbology.EAN13: 67,  # 'C'
    Symbology.EAN8: 68,  # 'D'
    Symbology.CODE39: 69,  # 'E'
    Symbology.CODA39: 69,
    Symbology.ITF: 70,  # 'F'
    Symbology.CODABAR: 71,  # 'G' (NW-7)
    Symbology.CODE93: 72,  # 'H'
    Symbology.CODE128: 73,  # 'I'
    Symbology.GS1_128: 74,  # 'J'
    Symbology.GS1_DATABAR_OMNI: 75,
    Symbology.GS1_DATABAR_TRUNCATED: 76,
    Symbology.GS1_DATABAR_LIMITED: 77,
    Symbology.GS1_DATABAR_EXPANDED: 78,
    Symbology.CODE128_AUTO: 79,
}
"""Type code ``m`` of ``GS k m n d1...dn`` per symbology."""

MAX_BARCODE_DATA: Final[int] = 255
"""The length prefix ``n`` is a single byte."""

# =============================================================================
# BARCODE SETTINGS
# =============================================================================


def set_barcode_height(height: int) -> bytes:
    """
    Set bar code height in dots.

    Command: GS h n
    Hex: 1D 68 n
    Range: 1-255

    Raises:
        ValueError: If height is out of range.
    """
    if not (1 <= height <= 255):
        raise ValueError(f"Barcode height must be 1-255, got {height}")
    return b"\x1dh" + bytes([height])


def set_barcode_width(module: int) -> bytes:
    """
    Set bar code module width.

    Command: GS w n
    Hex: 1D 77 n
    Range: 2-6 (1 is accepted by some models, not all)

    Raises:
        ValueError: If module is out of range.
    """
    if not (2 <= module <= 6):
        raise ValueError(f"Barcode module width must be 2-6, got {module}")
    return b"\x1dw" + bytes([module])


# =============================================================================
# BARCODE PRINTING
# =============================================================================


def print_barcode(symbology: Symbology, data: bytes) -> bytes:
    """
    Generate the ESC/POS command that prints a barcode.

    Command: GS k m n d1...dn
    Hex: 1D 6B m n d1...dn

    Args:
        symbology: Symbology; selects type code ``m``.
        data: Already validated payload bytes.

    Returns:
        ESC/POS command bytes.

    Raises:
        ValueError: If data is empty or longer than 255 bytes.

    Example:
        >>> print_barcode(Symbology.EAN8, b"12345670")
        b'\\x1dkD\\x0812345670'
    """
    if not data:
        raise ValueError("Barcode data must not be empty")
    if len(data) > MAX_BARCODE_DATA:
        raise ValueError(
            f"Barcode data length ({len(data)} bytes) exceeds {MAX_BARCODE_DATA}"
        )
    return b"\x1dk" + bytes([BARCODE_TYPE_CODES[symbology], len(data)]) + data
