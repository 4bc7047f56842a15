"""
Pixel containers for the image pipeline.

LuminanceImage holds 8-bit grey values (0 = black, 255 = white) after
resampling. Bitmap is the 1-bit printer representation: rows are padded to a
whole byte, bits are packed MSB first and a set bit is a printed (dark) dot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

__all__ = ["LuminanceImage", "Bitmap"]


@dataclass(frozen=True, slots=True)
class LuminanceImage:
    """Row-major grey pixels."""

    width: int
    height: int
    pixels: Sequence[int]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Image dimensions must be positive, got {self.width}x{self.height}"
            )
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"Expected {self.width * self.height} pixels, got {len(self.pixels)}"
            )

    @classmethod
    def filled(cls, width: int, height: int, value: int) -> LuminanceImage:
        return cls(width, height, [value] * (width * height))

    def row(self, y: int) -> list[int]:
        start = y * self.width
        return list(self.pixels[start : start + self.width])


@dataclass(frozen=True, slots=True)
class Bitmap:
    """
    Packed 1 bit per pixel image.

    Attributes:
        width: Width in dots (before padding).
        height: Height in dots.
        data: ``bytes_per_row * height`` bytes.
    """

    width: int
    height: int
    data: bytes

    @property
    def bytes_per_row(self) -> int:
        return (self.width + 7) // 8

    @classmethod
    def from_mask(cls, width: int, height: int, mask: Sequence[int]) -> Bitmap:
        """
        Pack a row-major 0/1 mask. Padding bits on the right are white (0).

        Example:
            >>> Bitmap.from_mask(3, 1, [1, 0, 1]).data
            b'\\xa0'
        """
        if len(mask) != width * height:
            raise ValueError(f"Expected {width * height} mask values, got {len(mask)}")
        bytes_per_row = (width + 7) // 8
        out = bytearray(bytes_per_row * height)
        for y in range(height):
            base = y * width
            row_offset = y * bytes_per_row
            for x in range(width):
                if mask[base + x]:
                    out[row_offset + (x >> 3)] |= 0x80 >> (x & 7)
        return cls(width=width, height=height, data=bytes(out))

    def is_dark(self, x: int, y: int) -> bool:
        byte = self.data[y * self.bytes_per_row + (x >> 3)]
        return bool(byte & (0x80 >> (x & 7)))
