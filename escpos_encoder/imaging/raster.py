"""
imaging/raster.py

(Краткое RU: Масштабирование, яркость, дизеринг и кадрирование изображения в
команду GS v 0.)

EN: Image framer. Turns any pixel source into a ``GS v 0`` raster command:

1. resample to the requested size (nearest neighbour, pixel-centre sampling)
2. convert to luminance, compositing transparency over white paper
3. dither to 1 bit per pixel, padding each row to a whole byte with white
4. frame as GS v 0 m xL xH yL yH d...

Pillow images take a fast path (``convert("RGBA").resize(..., NEAREST)``).
Anything else only needs ``width``, ``height`` and ``getpixel((x, y))``.

Requirements: Pillow
"""

from __future__ import annotations

import logging
from typing import Any, Final, Protocol, runtime_checkable

from PIL import Image
from PIL.Image import Resampling

from escpos_encoder.escpos.commands.graphics import (
    MAX_RASTER_DIMENSION,
    print_raster_image,
)
from escpos_encoder.exceptions import ValidationError
from escpos_encoder.imaging.bitmap import LuminanceImage
from escpos_encoder.imaging.dither import dither, validate_threshold
from escpos_encoder.model.enums import (
    DEFAULT_THRESHOLD,
    DitherAlgorithm,
    coerce_enum,
)

logger: Final = logging.getLogger(__name__)

__all__ = [
    "RasterImage",
    "luminance",
    "resample_luminance",
    "frame_image",
]

_OPAQUE: Final[int] = 255


@runtime_checkable
class RasterImage(Protocol):
    """Minimal pixel source. ``PIL.Image.Image`` satisfies it."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def getpixel(self, xy: tuple[int, int]) -> Any: ...


def _over_white(channel: int, alpha: int) -> int:
    return (channel * alpha + 255 * (255 - alpha) + 127) // 255


def luminance(r: int, g: int, b: int, a: int = _OPAQUE) -> int:
    """
    ITU-R BT.601 luma in integer arithmetic, transparency over white.

    Example:
        >>> luminance(255, 0, 0)
        76
        >>> luminance(0, 0, 0, 0)
        255
    """
    if a != _OPAQUE:
        r, g, b = _over_white(r, a), _over_white(g, a), _over_white(b, a)
    return (299 * r + 587 * g + 114 * b + 500) // 1000


def _pixel_luminance(pixel: Any) -> int:
    """Luminance of one ``getpixel`` result (L, LA, RGB or RGBA)."""
    if isinstance(pixel, int):
        return pixel
    size = len(pixel)
    if size == 1:
        return int(pixel[0])
    if size == 2:
        grey, alpha = int(pixel[0]), int(pixel[1])
        return _over_white(grey, alpha)
    if size == 3:
        return luminance(int(pixel[0]), int(pixel[1]), int(pixel[2]))
    if size == 4:
        return luminance(int(pixel[0]), int(pixel[1]), int(pixel[2]), int(pixel[3]))
    raise ValidationError(f"Unsupported pixel value {pixel!r}")


def _validate_dimensions(width: int, height: int) -> None:
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            logger.error("Invalid image %s: %r", name, value)
            raise ValidationError(f"Image {name} must be a positive integer, got {value!r}")
    if (width + 7) // 8 > MAX_RASTER_DIMENSION or height > MAX_RASTER_DIMENSION:
        logger.error("Image too large: %dx%d", width, height)
        raise ValidationError(
            f"Image {width}x{height} exceeds the raster limit of "
            f"{MAX_RASTER_DIMENSION} bytes per row / {MAX_RASTER_DIMENSION} rows"
        )


def _is_16bit_grey(image: Image.Image) -> bool:
    if image.mode.startswith("I;16"):
        return True
    # mode "I" also holds 8-bit data converted from "L"
    return image.mode == "I" and image.getextrema()[1] > 255


def _to_8bit(image: Image.Image) -> Image.Image:
    """Scale 16-bit grey (0-65535) down to 0-255; convert("L") would clip instead."""
    return image.convert("I").point(lambda v: v * (1 / 257)).convert("L")


def resample_luminance(source: RasterImage, width: int, height: int) -> LuminanceImage:
    """
    Resample ``source`` to ``width`` x ``height`` grey pixels.

    Raises:
        ValidationError: Invalid target or source dimensions.
    """
    _validate_dimensions(width, height)
    src_w, src_h = int(source.width), int(source.height)
    if src_w <= 0 or src_h <= 0:
        raise ValidationError(f"Source image is empty ({src_w}x{src_h})")

    if isinstance(source, Image.Image):
        if _is_16bit_grey(source):
            source = _to_8bit(source)
        rgba = source.convert("RGBA").resize((width, height), Resampling.NEAREST)
        raw = rgba.tobytes()
        pixels = [
            luminance(raw[i], raw[i + 1], raw[i + 2], raw[i + 3])
            for i in range(0, len(raw), 4)
        ]
        return LuminanceImage(width, height, pixels)

    x_map = [((2 * x + 1) * src_w) // (2 * width) for x in range(width)]
    pixels = []
    for y in range(height):
        sy = ((2 * y + 1) * src_h) // (2 * height)
        for sx in x_map:
            pixels.append(_pixel_luminance(source.getpixel((sx, sy))))
    return LuminanceImage(width, height, pixels)


def frame_image(
    source: RasterImage,
    width: int,
    height: int,
    algorithm: DitherAlgorithm | str = DitherAlgorithm.THRESHOLD,
    threshold: int = DEFAULT_THRESHOLD,
) -> bytes:
    """
    Build the complete ``GS v 0`` command for ``source``.

    Args:
        source: Pillow image or any RasterImage.
        width: Target width in dots; padded to a multiple of 8 with white.
        height: Target height in dots.
        algorithm: Dithering algorithm.
        threshold: Binarisation threshold 0-255.

    Returns:
        ESC/POS command bytes.

    Raises:
        ConfigError: Unknown algorithm.
        ValidationError: Invalid dimensions or threshold.
    """
    algo = coerce_enum(DitherAlgorithm, algorithm, "dither algorithm")
    validate_threshold(threshold)
    grey = resample_luminance(source, width, height)
    bitmap = dither(grey, algo, threshold)
    logger.debug(
        "Framing %dx%d raster image (%d bytes per row)",
        width,
        height,
        bitmap.bytes_per_row,
    )
    return print_raster_image(bitmap.data, bitmap.bytes_per_row, bitmap.height)
