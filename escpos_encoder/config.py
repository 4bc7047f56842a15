# -*- coding: utf-8 -*-
"""
RU: Настройки кодировщика ESC/POS (символ замены, кодировка QR, значения по умолчанию).
EN: Encoder configuration: fallback character, QR text encoding and the
defaults used when a facade call omits an argument.
"""
from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass, fields
from typing import Any, Final, Mapping

from escpos_encoder.exceptions import ConfigError
from escpos_encoder.model.enums import (
    DEFAULT_DITHER_ALGORITHM,
    DEFAULT_QR_ERROR_LEVEL,
    DEFAULT_QR_MODEL,
    DEFAULT_QR_SIZE,
    DEFAULT_THRESHOLD,
    MAX_THRESHOLD,
    MIN_THRESHOLD,
    DitherAlgorithm,
    QRErrorLevel,
    QRModel,
    coerce_enum,
)

logger: Final = logging.getLogger(__name__)


@dataclass(frozen=True)
class EncoderConfig:
    """
    Encoder configuration.

    Attributes:
        fallback_char: Printed in place of characters the codepage lacks.
        qr_encoding: Codec for str QR payloads.
        default_qr_model: Model used when ``qrcode()`` gets none.
        default_qr_size: Module size used when ``qrcode()`` gets none.
        default_qr_error_level: Error level used when ``qrcode()`` gets none.
        default_dither_algorithm: Algorithm used when ``image()`` gets none.
        default_threshold: Threshold used when ``image()`` gets none.

    Examples:
        >>> EncoderConfig().fallback_bytes
        b'?'

        >>> EncoderConfig(default_qr_error_level="h").default_qr_error_level
        <QRErrorLevel.H: 'h'>
    """

    fallback_char: str = "?"
    qr_encoding: str = "iso-8859-1"
    default_qr_model: QRModel = DEFAULT_QR_MODEL
    default_qr_size: int = DEFAULT_QR_SIZE
    default_qr_error_level: QRErrorLevel = DEFAULT_QR_ERROR_LEVEL
    default_dither_algorithm: DitherAlgorithm = DEFAULT_DITHER_ALGORITHM
    default_threshold: int = DEFAULT_THRESHOLD

    def __post_init__(self) -> None:
        """Validate parameters and normalise enum-valued fields."""
        if (
            not isinstance(self.fallback_char, str)
            or len(self.fallback_char) != 1
            or not 0x20 <= ord(self.fallback_char) <= 0x7E
        ):
            raise ConfigError(
                f"fallback_char must be one printable ASCII character, "
                f"got {self.fallback_char!r}"
            )
        try:
            codecs.lookup(self.qr_encoding)
        except (LookupError, TypeError) as e:
            raise ConfigError(f"Unknown qr_encoding {self.qr_encoding!r}", cause=e) from e

        object.__setattr__(
            self, "default_qr_model", coerce_enum(QRModel, self.default_qr_model, "QR model")
        )
        object.__setattr__(
            self,
            "default_qr_error_level",
            coerce_enum(QRErrorLevel, self.default_qr_error_level, "QR error level"),
        )
        object.__setattr__(
            self,
            "default_dither_algorithm",
            coerce_enum(
                DitherAlgorithm, self.default_dither_algorithm, "dither algorithm"
            ),
        )

        if not _is_int_in(self.default_qr_size, 1, 8):
            raise ConfigError(
                f"default_qr_size must be 1-8, got {self.default_qr_size!r}"
            )
        if not _is_int_in(self.default_threshold, MIN_THRESHOLD, MAX_THRESHOLD):
            raise ConfigError(
                f"default_threshold must be {MIN_THRESHOLD}-{MAX_THRESHOLD}, "
                f"got {self.default_threshold!r}"
            )

    @property
    def fallback_bytes(self) -> bytes:
        return self.fallback_char.encode("ascii")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "EncoderConfig":
        """
        Build a configuration from a mapping (e.g. parsed JSON).

        Unknown keys are ignored with a warning.

        Raises:
            ConfigError: If a known key holds an invalid value.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
        return cls(**{key: value for key, value in data.items() if key in known})

    def to_dict(self) -> dict[str, Any]:
        return {
            "fallback_char": self.fallback_char,
            "qr_encoding": self.qr_encoding,
            "default_qr_model": self.default_qr_model.value,
            "default_qr_size": self.default_qr_size,
            "default_qr_error_level": self.default_qr_error_level.value,
            "default_dither_algorithm": self.default_dither_algorithm.value,
            "default_threshold": self.default_threshold,
        }


def _is_int_in(value: Any, low: int, high: int) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and low <= value <= high


DEFAULT_CONFIG: Final[EncoderConfig] = EncoderConfig()


__all__ = [
    "EncoderConfig",
    "DEFAULT_CONFIG",
]
