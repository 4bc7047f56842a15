"""Barcode and QR code validation and framing."""

from escpos_encoder.barcodes.barcode_framer import BarcodeFramer, frame_barcode
from escpos_encoder.barcodes.qr_framer import (
    check_qr_capacity,
    encode_qr_payload,
    frame_qrcode,
)

__all__ = [
    "BarcodeFramer",
    "frame_barcode",
    "check_qr_capacity",
    "encode_qr_payload",
    "frame_qrcode",
]
