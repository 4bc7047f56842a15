"""
RU: Формирование последовательности команд QR-кода (GS ( k).
EN: QR code framing into the GS ( k command sequence.

The sequence is: LF (flush the line buffer so the symbol starts on a fresh
line), select model, module size, error correction level, store data, print.

For model 2 symbols the payload is checked against the symbol capacity of the
requested error correction level with the ``qrcode`` library, so an oversized
payload fails here instead of printing nothing.

Requirements: qrcode
"""

from __future__ import annotations

import logging
from typing import Final, Union

import qrcode
from qrcode.constants import (
    ERROR_CORRECT_H,
    ERROR_CORRECT_L,
    ERROR_CORRECT_M,
    ERROR_CORRECT_Q,
)
from qrcode.exceptions import DataOverflowError

from escpos_encoder.escpos.commands.positioning import LF
from escpos_encoder.escpos.commands.qr import (
    QR_MAX_DATA,
    print_qr_symbol,
    select_qr_model,
    set_qr_error_level,
    set_qr_module_size,
    store_qr_data,
)
from escpos_encoder.exceptions import ValidationError
from escpos_encoder.model.enums import (
    DEFAULT_QR_ERROR_LEVEL,
    DEFAULT_QR_MODEL,
    DEFAULT_QR_SIZE,
    QRErrorLevel,
    QRModel,
    coerce_enum,
)

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_QR_ENCODING",
    "QR_MIN_SIZE",
    "QR_MAX_SIZE",
    "encode_qr_payload",
    "check_qr_capacity",
    "frame_qrcode",
]

DEFAULT_QR_ENCODING: Final[str] = "iso-8859-1"
QR_MIN_SIZE: Final[int] = 1
QR_MAX_SIZE: Final[int] = 8

_QRCODE_LEVELS: Final[dict[QRErrorLevel, int]] = {
    QRErrorLevel.L: ERROR_CORRECT_L,
    QRErrorLevel.M: ERROR_CORRECT_M,
    QRErrorLevel.Q: ERROR_CORRECT_Q,
    QRErrorLevel.H: ERROR_CORRECT_H,
}


def encode_qr_payload(
    value: Union[str, bytes, bytearray], encoding: str = DEFAULT_QR_ENCODING
) -> bytes:
    """
    Turn the caller's payload into the bytes stored in the symbol.

    Raises:
        ValidationError: Empty, unencodable or longer than 7089 bytes.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        data = bytes(value)
    elif isinstance(value, str):
        try:
            data = value.encode(encoding)
        except UnicodeEncodeError as e:
            logger.warning("QR payload not representable in %s", encoding)
            raise ValidationError(
                f"QR payload contains characters not representable in {encoding}",
                cause=e,
            ) from e
    else:
        raise ValidationError(
            f"QR payload must be str or bytes, got {type(value).__name__}"
        )

    if not data:
        raise ValidationError("QR payload must not be empty")
    if len(data) > QR_MAX_DATA:
        logger.error("QR payload too long: %d bytes", len(data))
        raise ValidationError(
            f"QR payload is {len(data)} bytes long, maximum is {QR_MAX_DATA}"
        )
    return data


def check_qr_capacity(data: bytes, error_level: QRErrorLevel) -> int:
    """
    Check that ``data`` fits a model 2 symbol at ``error_level``.

    Returns:
        The smallest symbol version (1-40) that holds the payload.

    Raises:
        ValidationError: If no version is large enough.
    """
    qr = qrcode.QRCode(error_correction=_QRCODE_LEVELS[error_level])
    qr.add_data(data)
    try:
        version = qr.best_fit()
    except DataOverflowError as e:
        logger.error(
            "QR payload of %d bytes exceeds capacity at level %s",
            len(data),
            error_level.name,
        )
        raise ValidationError(
            f"QR payload of {len(data)} bytes does not fit a model 2 symbol "
            f"at error correction level {error_level.name}",
            cause=e,
        ) from e
    return version


def frame_qrcode(
    value: Union[str, bytes, bytearray],
    model: QRModel | int = DEFAULT_QR_MODEL,
    size: int = DEFAULT_QR_SIZE,
    error_level: QRErrorLevel | str = DEFAULT_QR_ERROR_LEVEL,
    encoding: str = DEFAULT_QR_ENCODING,
) -> bytes:
    """
    Build the complete QR command sequence.

    Args:
        value: Payload; str is encoded with ``encoding``, bytes pass through.
        model: 1 or 2.
        size: Module size in dots, 1-8.
        error_level: "l", "m", "q" or "h".
        encoding: Text encoding for str payloads.

    Raises:
        ConfigError: Unknown model or error level.
        ValidationError: Size out of range, payload empty, oversized or unencodable.

    Example:
        >>> frame_qrcode("x" * 1000)[26:31]
        b'\\x1d(k\\xeb\\x03'
    """
    qr_model = coerce_enum(QRModel, model, "QR model")
    level = coerce_enum(QRErrorLevel, error_level, "QR error level")
    if isinstance(size, bool) or not isinstance(size, int) or not (
        QR_MIN_SIZE <= size <= QR_MAX_SIZE
    ):
        logger.error("Invalid QR module size: %r", size)
        raise ValidationError(
            f"QR module size must be an integer {QR_MIN_SIZE}-{QR_MAX_SIZE}, got {size!r}"
        )

    data = encode_qr_payload(value, encoding)
    if qr_model is QRModel.MODEL_2:
        version = check_qr_capacity(data, level)
        logger.debug("QR payload of %d bytes fits version %d", len(data), version)

    return (
        LF
        + select_qr_model(qr_model)
        + set_qr_module_size(size)
        + set_qr_error_level(level)
        + store_qr_data(data)
        + print_qr_symbol()
    )
