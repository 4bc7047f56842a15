from typing import Any, List, Sequence, Tuple

import pytest
from PIL import Image

from escpos_encoder.exceptions import ConfigError, ValidationError
from escpos_encoder.imaging.raster import (
    RasterImage,
    frame_image,
    luminance,
    resample_luminance,
)
from escpos_encoder.model.enums import DitherAlgorithm

GS_V_0 = b"\x1dv0\x00"


class FakeImage:
    """Minimal non-Pillow pixel source."""

    def __init__(self, width: int, height: int, pixels: Sequence[Any]) -> None:
        self.width = width
        self.height = height
        self._pixels = list(pixels)
        self.requests: List[Tuple[int, int]] = []

    def getpixel(self, xy: Tuple[int, int]) -> Any:
        self.requests.append(xy)
        x, y = xy
        return self._pixels[y * self.width + x]


class TestLuminance:
    @pytest.mark.parametrize(
        "rgba,expected",
        [
            ((0, 0, 0, 255), 0),
            ((255, 255, 255, 255), 255),
            ((255, 0, 0, 255), 76),
            ((0, 255, 0, 255), 150),
            ((0, 0, 255, 255), 29),
            ((0, 0, 0, 0), 255),
            ((0, 0, 0, 128), 127),
        ],
    )
    def test_values(self, rgba: Tuple[int, int, int, int], expected: int) -> None:
        assert luminance(*rgba) == expected


class TestResample:
    def test_pillow_image_is_a_raster_image(self) -> None:
        assert isinstance(Image.new("L", (1, 1)), RasterImage)
        assert isinstance(FakeImage(1, 1, [0]), RasterImage)

    def test_pillow_upscale_uses_nearest_neighbour(self) -> None:
        img = Image.new("RGB", (2, 1))
        img.putpixel((0, 0), (0, 0, 0))
        img.putpixel((1, 0), (255, 255, 255))
        grey = resample_luminance(img, 4, 1)
        assert list(grey.pixels) == [0, 0, 255, 255]

    def test_pillow_transparency_is_white(self) -> None:
        img = Image.new("RGBA", (2, 2), (0, 0, 0, 0))
        assert set(resample_luminance(img, 2, 2).pixels) == {255}

    def test_pillow_bilevel_mode(self) -> None:
        assert set(resample_luminance(Image.new("1", (3, 3), 0), 3, 3).pixels) == {0}

    def test_pillow_16bit_grey_is_rescaled(self) -> None:
        # 20000 / 257 = 77.8
        img = Image.new("I;16", (2, 1), 20000)
        pixels = resample_luminance(img, 2, 1).pixels
        assert all(77 <= p <= 78 for p in pixels)

    def test_pillow_32bit_grey_is_rescaled(self) -> None:
        img = Image.new("I", (1, 1), 60000)
        assert list(resample_luminance(img, 1, 1).pixels) == [233]

    def test_pillow_mode_i_with_8bit_values_is_kept(self) -> None:
        img = Image.new("L", (1, 1), 200).convert("I")
        assert list(resample_luminance(img, 1, 1).pixels) == [200]

    def test_generic_source_identity(self) -> None:
        src = FakeImage(2, 2, [(0, 0, 0), (255, 255, 255), (255, 255, 255), (0, 0, 0)])
        assert list(resample_luminance(src, 2, 2).pixels) == [0, 255, 255, 0]

    def test_generic_source_samples_pixel_centres(self) -> None:
        src = FakeImage(4, 1, [10, 20, 30, 40])
        grey = resample_luminance(src, 2, 1)
        assert list(grey.pixels) == [20, 40]
        assert src.requests == [(1, 0), (3, 0)]

    @pytest.mark.parametrize(
        "pixel,expected",
        [
            (7, 7),
            ((7,), 7),
            ((0, 0), 255),
            ((0, 255), 0),
            ((255, 0, 0), 76),
            ((255, 0, 0, 0), 255),
        ],
    )
    def test_generic_pixel_formats(self, pixel: Any, expected: int) -> None:
        assert list(resample_luminance(FakeImage(1, 1, [pixel]), 1, 1).pixels) == [expected]

    def test_unsupported_pixel(self) -> None:
        with pytest.raises(ValidationError, match="Unsupported pixel"):
            resample_luminance(FakeImage(1, 1, [(1, 2, 3, 4, 5)]), 1, 1)

    def test_empty_source(self) -> None:
        with pytest.raises(ValidationError, match="empty"):
            resample_luminance(FakeImage(0, 0, []), 1, 1)


class TestFrameImage:
    def test_white_image(self) -> None:
        img = Image.new("L", (8, 2), 255)
        assert frame_image(img, 8, 2) == GS_V_0 + b"\x01\x00\x02\x00" + b"\x00\x00"

    def test_black_image_width_padding(self) -> None:
        img = Image.new("L", (10, 1), 0)
        assert frame_image(img, 10, 1) == GS_V_0 + b"\x02\x00\x01\x00" + b"\xff\xc0"

    def test_16bit_grey_prints_dark(self) -> None:
        img = Image.new("I;16", (8, 1), 20000)
        assert frame_image(img, 8, 1) == GS_V_0 + b"\x01\x00\x01\x00" + b"\xff"

    def test_scaling_changes_dimensions(self) -> None:
        img = Image.new("RGB", (100, 50), (0, 0, 0))
        command = frame_image(img, 16, 8)
        assert command[:8] == GS_V_0 + b"\x02\x00\x08\x00"
        assert command[8:] == b"\xff" * 16

    @pytest.mark.parametrize("algorithm", list(DitherAlgorithm))
    def test_every_algorithm_frames(self, algorithm: DitherAlgorithm) -> None:
        img = Image.new("L", (8, 8), 255)
        assert frame_image(img, 8, 8, algorithm) == GS_V_0 + b"\x01\x00\x08\x00" + bytes(8)

    def test_threshold_is_applied(self) -> None:
        img = Image.new("L", (8, 1), 200)
        assert frame_image(img, 8, 1, "threshold", 201)[-1:] == b"\xff"
        assert frame_image(img, 8, 1, "threshold", 200)[-1:] == b"\x00"

    @pytest.mark.parametrize(
        "width,height", [(0, 1), (1, 0), (-8, 8), (8, -1), (True, 1), (8.0, 1)]
    )
    def test_invalid_dimensions(self, width: Any, height: Any) -> None:
        with pytest.raises(ValidationError, match="Image"):
            frame_image(Image.new("L", (1, 1)), width, height)

    @pytest.mark.parametrize("width,height", [(8 * 0x10000, 1), (8, 0x10000)])
    def test_dimensions_over_sixteen_bits(self, width: int, height: int) -> None:
        with pytest.raises(ValidationError, match="raster limit"):
            frame_image(Image.new("L", (1, 1)), width, height)

    def test_invalid_threshold(self) -> None:
        with pytest.raises(ValidationError, match="threshold"):
            frame_image(Image.new("L", (1, 1)), 8, 1, "threshold", 300)

    def test_unknown_algorithm(self) -> None:
        with pytest.raises(ConfigError):
            frame_image(Image.new("L", (1, 1)), 8, 1, "sierra")
