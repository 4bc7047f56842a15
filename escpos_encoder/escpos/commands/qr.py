"""
QR code commands for ESC/POS printers (GS ( k, cn = 49).

A QR code is printed with a sequence of independently framed sub-commands:
select model, set module size, set error correction level, store data, print
the stored symbol. Every sub-command carries its own 16-bit little-endian
parameter length (pL pH).

Reference: ESC/POS Application Programming Guide, GS ( k <Function 165-181>
"""

from typing import Final

from escpos_encoder.model.enums import QRErrorLevel, QRModel

__all__ = [
    "QR_MAX_DATA",
    "QR_ERROR_LEVEL_CODES",
    "select_qr_model",
    "set_qr_module_size",
    "set_qr_error_level",
    "store_qr_data",
    "print_qr_symbol",
]

_GS_K: Final[bytes] = b"\x1d(k"
_CN: Final[int] = 0x31

QR_MAX_DATA: Final[int] = 7089
"""Largest payload the store command accepts: (pL + pH * 256) - 3 <= 7089."""

QR_ERROR_LEVEL_CODES: Final[dict[QRErrorLevel, int]] = {
    QRErrorLevel.L: 0x30,  # ~7% recovery
    QRErrorLevel.M: 0x31,  # ~15%
    QRErrorLevel.Q: 0x32,  # ~25%
    QRErrorLevel.H: 0x33,  # ~30%
}

_MODEL_CODES: Final[dict[QRModel, int]] = {
    QRModel.MODEL_1: 0x31,
    QRModel.MODEL_2: 0x32,
}


def _frame(fn: int, params: bytes) -> bytes:
    """Frame one GS ( k sub-command: pL pH cn fn params."""
    length = len(params) + 2
    return _GS_K + bytes([length & 0xFF, (length >> 8) & 0xFF, _CN, fn]) + params


def select_qr_model(model: QRModel) -> bytes:
    """
    Select the QR code model.

    Command: GS ( k pL pH cn fn n1 n2  (fn = 65)
    Hex: 1D 28 6B 04 00 31 41 n1 00
    """
    return _frame(0x41, bytes([_MODEL_CODES[model], 0x00]))


def set_qr_module_size(size: int) -> bytes:
    """
    Set the QR module (dot) size.

    Command: GS ( k pL pH cn fn n  (fn = 67)
    Hex: 1D 28 6B 03 00 31 43 n
    Range: 1-8 (printers accept up to 16, 8 is the portable limit)

    Raises:
        ValueError: If size is out of range.
    """
    if not (1 <= size <= 8):
        raise ValueError(f"QR module size must be 1-8, got {size}")
    return _frame(0x43, bytes([size]))


def set_qr_error_level(level: QRErrorLevel) -> bytes:
    """
    Select the error correction level.

    Command: GS ( k pL pH cn fn n  (fn = 69)
    Hex: 1D 28 6B 03 00 31 45 n   (n: L=0x30 M=0x31 Q=0x32 H=0x33)
    """
    return _frame(0x45, bytes([QR_ERROR_LEVEL_CODES[level]]))


def store_qr_data(data: bytes) -> bytes:
    """
    Store symbol data in the symbol storage area.

    Command: GS ( k pL pH cn fn m d1...dk  (fn = 80, m = 48)
    Hex: 1D 28 6B pL pH 31 50 30 d1...dk
    Length: pL + pH * 256 = k + 3

    Raises:
        ValueError: If data is empty or longer than QR_MAX_DATA.

    Example:
        >>> store_qr_data(b"x" * 1000)[:8]
        b'\\x1d(k\\xeb\\x031P0'
    """
    if not data:
        raise ValueError("QR data must not be empty")
    if len(data) > QR_MAX_DATA:
        raise ValueError(f"QR data length ({len(data)}) exceeds {QR_MAX_DATA}")
    return _frame(0x50, b"\x30" + data)


def print_qr_symbol() -> bytes:
    """
    Print the symbol data in the symbol storage area.

    Command: GS ( k pL pH cn fn m  (fn = 81, m = 48)
    Hex: 1D 28 6B 03 00 31 51 30
    """
    return _frame(0x51, b"\x30")
