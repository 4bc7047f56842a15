"""
imaging/dither.py

(Краткое RU: Преобразование оттенков серого в 1-битное изображение: порог,
Байер, Флойд-Стейнберг, Аткинсон.)

EN: Dither engine. ``dither()`` is the single entry point; it dispatches on
the closed DitherAlgorithm enum to one pure function per algorithm. Each
function returns a row-major 0/1 mask (1 = dark dot) that ``dither()`` packs
into a Bitmap.

All algorithms are deterministic integer arithmetic:

- threshold: dark iff luminance < threshold
- bayer: 4x4 ordered matrix, dark iff (luminance + M[x % 4][y % 4]) // 2 < threshold
- floydsteinberg: error // 16 spread 7 / 3 / 5 / 1 (right, below-left, below,
  below-right)
- atkinson: error // 8 to six neighbours, 2/8 discarded

Diffused values are clamped to 0..255; neighbours outside the image are
dropped, so the edges never wrap.

See Also:
    - escpos_encoder/imaging/raster.py (resampling and GS v 0 framing)
"""

from __future__ import annotations

import logging
from typing import Callable, Final

from escpos_encoder.exceptions import ValidationError
from escpos_encoder.imaging.bitmap import Bitmap, LuminanceImage
from escpos_encoder.model.enums import (
    DEFAULT_THRESHOLD,
    MAX_THRESHOLD,
    MIN_THRESHOLD,
    DitherAlgorithm,
    coerce_enum,
)

logger: Final = logging.getLogger(__name__)

__all__ = [
    "BAYER_MATRIX",
    "dither",
    "validate_threshold",
    "threshold_mask",
    "bayer_mask",
    "floyd_steinberg_mask",
    "atkinson_mask",
]

BAYER_MATRIX: Final[tuple[tuple[int, ...], ...]] = (
    (15, 135, 45, 165),
    (195, 75, 225, 105),
    (60, 180, 30, 150),
    (240, 120, 210, 90),
)

_WHITE: Final[int] = 255
_BLACK: Final[int] = 0


def _clamp(value: int) -> int:
    if value < _BLACK:
        return _BLACK
    if value > _WHITE:
        return _WHITE
    return value


# =============================================================================
# ALGORITHMS
# =============================================================================


def threshold_mask(image: LuminanceImage, threshold: int) -> list[int]:
    return [1 if value < threshold else 0 for value in image.pixels]


def bayer_mask(image: LuminanceImage, threshold: int) -> list[int]:
    mask: list[int] = []
    for y in range(image.height):
        base = y * image.width
        for x in range(image.width):
            value = (image.pixels[base + x] + BAYER_MATRIX[x % 4][y % 4]) // 2
            mask.append(1 if value < threshold else 0)
    return mask


def floyd_steinberg_mask(image: LuminanceImage, threshold: int) -> list[int]:
    """Floyd-Steinberg error diffusion with a two-row buffer."""
    width, height = image.width, image.height
    mask: list[int] = []
    current = image.row(0)

    for y in range(height):
        has_next = y + 1 < height
        below = image.row(y + 1) if has_next else []

        for x in range(width):
            value = current[x]
            dark = value < threshold
            mask.append(1 if dark else 0)
            err = (value - (_BLACK if dark else _WHITE)) // 16
            if not err:
                continue

            if x + 1 < width:
                current[x + 1] = _clamp(current[x + 1] + err * 7)
            if has_next:
                if x > 0:
                    below[x - 1] = _clamp(below[x - 1] + err * 3)
                below[x] = _clamp(below[x] + err * 5)
                if x + 1 < width:
                    below[x + 1] = _clamp(below[x + 1] + err)

        current = below

    return mask


def atkinson_mask(image: LuminanceImage, threshold: int) -> list[int]:
    """Atkinson error diffusion with a three-row buffer."""
    width, height = image.width, image.height
    mask: list[int] = []
    rows = [image.row(y) for y in range(min(3, height))]

    for y in range(height):
        current = rows[0]
        below = rows[1] if len(rows) > 1 else None
        below2 = rows[2] if len(rows) > 2 else None

        for x in range(width):
            value = current[x]
            dark = value < threshold
            mask.append(1 if dark else 0)
            err = (value - (_BLACK if dark else _WHITE)) // 8
            if not err:
                continue

            for dx in (1, 2):
                if x + dx < width:
                    current[x + dx] = _clamp(current[x + dx] + err)
            if below is not None:
                for dx in (-1, 0, 1):
                    if 0 <= x + dx < width:
                        below[x + dx] = _clamp(below[x + dx] + err)
            if below2 is not None:
                below2[x] = _clamp(below2[x] + err)

        rows.pop(0)
        if y + 3 < height:
            rows.append(image.row(y + 3))

    return mask


_ALGORITHMS: Final[dict[DitherAlgorithm, Callable[[LuminanceImage, int], list[int]]]] = {
    DitherAlgorithm.THRESHOLD: threshold_mask,
    DitherAlgorithm.BAYER: bayer_mask,
    DitherAlgorithm.FLOYD_STEINBERG: floyd_steinberg_mask,
    DitherAlgorithm.ATKINSON: atkinson_mask,
}


# =============================================================================
# ENTRY POINT
# =============================================================================


def validate_threshold(threshold: int) -> int:
    """
    Raises:
        ValidationError: If threshold is not an int in 0..255.
    """
    if (
        isinstance(threshold, bool)
        or not isinstance(threshold, int)
        or not (MIN_THRESHOLD <= threshold <= MAX_THRESHOLD)
    ):
        logger.error("Invalid dither threshold: %r", threshold)
        raise ValidationError(
            f"threshold must be an integer {MIN_THRESHOLD}-{MAX_THRESHOLD}, "
            f"got {threshold!r}"
        )
    return threshold


def dither(
    image: LuminanceImage,
    algorithm: DitherAlgorithm | str = DitherAlgorithm.THRESHOLD,
    threshold: int = DEFAULT_THRESHOLD,
) -> Bitmap:
    """
    Convert a grey image into a 1-bit printer bitmap.

    Args:
        image: Source luminance (0 = black, 255 = white).
        algorithm: Dithering algorithm (member or string value).
        threshold: Binarisation threshold 0-255.

    Returns:
        Bitmap whose rows are padded to a byte boundary with white.

    Raises:
        ConfigError: Unknown algorithm.
        ValidationError: Threshold out of range.
    """
    algo = coerce_enum(DitherAlgorithm, algorithm, "dither algorithm")
    validate_threshold(threshold)

    logger.debug(
        "Dithering %dx%d image with %s (threshold=%d)",
        image.width,
        image.height,
        algo.value,
        threshold,
    )
    mask = _ALGORITHMS[algo](image, threshold)
    return Bitmap.from_mask(image.width, image.height, mask)
