"""
Raster bit-image printing command for ESC/POS printers.

Only normal density (m = 0) raster output is produced. Image preparation
(resampling, luminance, dithering) lives in escpos_encoder.imaging; this module
frames an already packed 1-bit bitmap.

Reference: ESC/POS Application Programming Guide, GS v 0
"""

from typing import Final

__all__ = [
    "RASTER_MODE_NORMAL",
    "MAX_RASTER_DIMENSION",
    "print_raster_image",
]

RASTER_MODE_NORMAL: Final[int] = 0
"""m = 0: normal width, normal height (180 x 180 dpi on 80 mm printers)."""

MAX_RASTER_DIMENSION: Final[int] = 0xFFFF
"""xL xH and yL yH are 16-bit little-endian values."""


def print_raster_image(data: bytes, bytes_per_row: int, height: int) -> bytes:
    """
    Print raster bit image.

    Command: GS v 0 m xL xH yL yH d1...dk
    Hex: 1D 76 30 m xL xH yL yH d1...dk

    Args:
        data: Packed rows, MSB first, 1 = printed dot.
        bytes_per_row: Horizontal size in bytes (x = xL + xH * 256).
        height: Vertical size in dots (y = yL + yH * 256).

    Returns:
        ESC/POS command bytes.

    Raises:
        ValueError: If a dimension is outside 1-65535 or data does not hold
            exactly ``bytes_per_row * height`` bytes.

    Example:
        >>> print_raster_image(b"\\xff", bytes_per_row=1, height=1)
        b'\\x1dv0\\x00\\x01\\x00\\x01\\x00\\xff'
    """
    if not (1 <= bytes_per_row <= MAX_RASTER_DIMENSION):
        raise ValueError(
            f"Raster width must be 1-{MAX_RASTER_DIMENSION} bytes, got {bytes_per_row}"
        )
    if not (1 <= height <= MAX_RASTER_DIMENSION):
        raise ValueError(
            f"Raster height must be 1-{MAX_RASTER_DIMENSION} dots, got {height}"
        )
    if len(data) != bytes_per_row * height:
        raise ValueError(
            f"Raster data holds {len(data)} bytes, "
            f"expected {bytes_per_row * height} ({bytes_per_row} x {height})"
        )
    header = bytes(
        [
            RASTER_MODE_NORMAL,
            bytes_per_row & 0xFF,
            (bytes_per_row >> 8) & 0xFF,
            height & 0xFF,
            (height >> 8) & 0xFF,
        ]
    )
    return b"\x1dv0" + header + data
