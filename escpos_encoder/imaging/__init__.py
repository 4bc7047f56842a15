"""Image pipeline: resampling, dithering and raster framing."""

from escpos_encoder.imaging.bitmap import Bitmap, LuminanceImage
from escpos_encoder.imaging.dither import dither
from escpos_encoder.imaging.raster import RasterImage, frame_image, resample_luminance

__all__ = [
    "Bitmap",
    "LuminanceImage",
    "dither",
    "RasterImage",
    "frame_image",
    "resample_luminance",
]
