"""
Unit tests for the dither engine and the 1-bit bitmap container.
"""

from typing import List

import pytest

from escpos_encoder.exceptions import ConfigError, ValidationError
from escpos_encoder.imaging.bitmap import Bitmap, LuminanceImage
from escpos_encoder.imaging.dither import (
    BAYER_MATRIX,
    atkinson_mask,
    dither,
    floyd_steinberg_mask,
)
from escpos_encoder.model.enums import DitherAlgorithm

ALL_ALGORITHMS = list(DitherAlgorithm)


def _gradient(width: int, height: int) -> LuminanceImage:
    pixels: List[int] = [
        (x * 255 // max(width - 1, 1) + y * 7) % 256
        for y in range(height)
        for x in range(width)
    ]
    return LuminanceImage(width, height, pixels)


class TestBitmap:
    def test_from_mask_packs_msb_first(self) -> None:
        assert Bitmap.from_mask(3, 1, [1, 0, 1]).data == b"\xa0"

    def test_rows_are_padded(self) -> None:
        bitmap = Bitmap.from_mask(10, 2, [1] * 20)
        assert bitmap.bytes_per_row == 2
        assert bitmap.data == b"\xff\xc0\xff\xc0"

    def test_is_dark(self) -> None:
        bitmap = Bitmap.from_mask(9, 1, [0] * 8 + [1])
        assert bitmap.is_dark(8, 0)
        assert not bitmap.is_dark(0, 0)

    def test_mask_length_mismatch(self) -> None:
        with pytest.raises(ValueError):
            Bitmap.from_mask(2, 2, [1, 0, 1])


class TestLuminanceImage:
    def test_pixel_count_is_checked(self) -> None:
        with pytest.raises(ValueError):
            LuminanceImage(2, 2, [0, 0, 0])

    def test_empty_image_rejected(self) -> None:
        with pytest.raises(ValueError):
            LuminanceImage(0, 1, [])

    def test_row_is_a_copy(self) -> None:
        image = LuminanceImage.filled(3, 2, 9)
        row = image.row(1)
        row[0] = 0
        assert image.pixels[3] == 9


class TestDitherExtremes:
    @pytest.mark.parametrize("algorithm", ALL_ALGORITHMS)
    @pytest.mark.parametrize("width,height", [(1, 1), (8, 3), (10, 5), (17, 4)])
    def test_all_white_is_all_zero(
        self, algorithm: DitherAlgorithm, width: int, height: int
    ) -> None:
        bitmap = dither(LuminanceImage.filled(width, height, 255), algorithm)
        assert bitmap.data == bytes(bitmap.bytes_per_row * height)

    @pytest.mark.parametrize("algorithm", ALL_ALGORITHMS)
    def test_all_black_is_all_one(self, algorithm: DitherAlgorithm) -> None:
        bitmap = dither(LuminanceImage.filled(16, 4, 0), algorithm)
        assert bitmap.data == b"\xff" * (2 * 4)

    @pytest.mark.parametrize("algorithm", ALL_ALGORITHMS)
    def test_all_black_padding_stays_white(self, algorithm: DitherAlgorithm) -> None:
        bitmap = dither(LuminanceImage.filled(10, 1, 0), algorithm)
        assert bitmap.data == b"\xff\xc0"


class TestThresholdAndBayer:
    def test_threshold_is_strict(self) -> None:
        image = LuminanceImage(3, 1, [127, 128, 129])
        assert dither(image, "threshold", 128).data == b"\x80"

    def test_threshold_extremes(self) -> None:
        image = LuminanceImage(2, 1, [0, 255])
        assert dither(image, DitherAlgorithm.THRESHOLD, 0).data == b"\x00"
        assert dither(image, DitherAlgorithm.THRESHOLD, 255).data == b"\x80"

    def test_bayer_mid_grey_is_half_dark(self) -> None:
        bitmap = dither(LuminanceImage.filled(4, 4, 128), DitherAlgorithm.BAYER)
        dark = sum(bitmap.is_dark(x, y) for y in range(4) for x in range(4))
        expected = sum(1 for row in BAYER_MATRIX for m in row if m < 128)
        assert dark == expected == 8

    def test_bayer_indexes_matrix_by_x_then_y(self) -> None:
        # M[1][0] = 195 pushes x=1 of row 0 over the threshold, M[0][1] = 135 does not
        image = LuminanceImage(2, 2, [110, 110, 110, 110])
        bitmap = dither(image, DitherAlgorithm.BAYER)
        assert bitmap.is_dark(0, 0)  # (110 + 15) // 2 = 62
        assert not bitmap.is_dark(1, 0)  # (110 + 195) // 2 = 152
        assert bitmap.is_dark(0, 1)  # (110 + 135) // 2 = 122
        assert bitmap.is_dark(1, 1)  # (110 + 75) // 2 = 92


class TestErrorDiffusion:
    def test_floyd_steinberg_small_row(self) -> None:
        # 100 -> dark, err 6, next = 142 -> white, err (142 - 255) // 16 = -8,
        # next = 100 - 56 = 44 -> dark
        assert floyd_steinberg_mask(LuminanceImage(3, 1, [100, 100, 100]), 128) == [1, 0, 1]

    def test_floyd_steinberg_spreads_to_next_row(self) -> None:
        # 120 -> dark, err 7 -> the pixel below gets +35
        image = LuminanceImage(1, 2, [120, 90])
        assert floyd_steinberg_mask(image, 128) == [1, 1]
        image = LuminanceImage(1, 2, [120, 100])
        assert floyd_steinberg_mask(image, 128) == [1, 0]

    def test_atkinson_small_row(self) -> None:
        # 100 -> dark, err 12 -> 112, 112; 112 -> dark, err 14 -> 126 -> dark
        assert atkinson_mask(LuminanceImage(3, 1, [100, 100, 100]), 128) == [1, 1, 1]

    def test_atkinson_reaches_two_rows_below(self) -> None:
        # 120 -> dark, err 15 -> rows 1 and 2 each get +15
        image = LuminanceImage(1, 3, [120, 240, 120])
        assert atkinson_mask(image, 128) == [1, 0, 0]

    @pytest.mark.parametrize(
        "algorithm", [DitherAlgorithm.FLOYD_STEINBERG, DitherAlgorithm.ATKINSON]
    )
    def test_deterministic(self, algorithm: DitherAlgorithm) -> None:
        image = _gradient(37, 23)
        first = dither(image, algorithm, 128)
        second = dither(image, algorithm, 128)
        assert first == second

    @pytest.mark.parametrize("algorithm", ALL_ALGORITHMS)
    def test_source_image_is_not_modified(self, algorithm: DitherAlgorithm) -> None:
        image = _gradient(9, 6)
        before = list(image.pixels)
        dither(image, algorithm)
        assert list(image.pixels) == before

    def test_mid_grey_is_roughly_half_dark(self) -> None:
        image = LuminanceImage.filled(32, 32, 128)
        bitmap = dither(image, DitherAlgorithm.FLOYD_STEINBERG)
        dark = sum(bitmap.is_dark(x, y) for y in range(32) for x in range(32))
        assert 350 <= dark <= 674


class TestDitherValidation:
    @pytest.mark.parametrize("threshold", [-1, 256, 1.5, True, "128"])
    def test_invalid_threshold(self, threshold: object) -> None:
        with pytest.raises(ValidationError, match="threshold"):
            dither(LuminanceImage.filled(1, 1, 0), DitherAlgorithm.THRESHOLD, threshold)  # type: ignore[arg-type]

    def test_unknown_algorithm(self) -> None:
        with pytest.raises(ConfigError, match="dither algorithm"):
            dither(LuminanceImage.filled(1, 1, 0), "sierra")

    def test_string_algorithm(self) -> None:
        bitmap = dither(LuminanceImage.filled(8, 1, 0), "floydsteinberg")
        assert bitmap.data == b"\xff"
