"""
RU: Проверка данных 1D-штрихкода и формирование команд GS h / GS w / GS k.
EN: 1D barcode validation and framing into GS h / GS w / GS k commands.

Provides:
- Per-symbology payload rules (digits, lengths, character sets)
- Check digit completion and verification for UPC-A, EAN-13 and EAN-8
  (computed with python-barcode)
- Code set prefix handling for Code 128

Requirements: python-barcode
"""

from __future__ import annotations

import logging
from typing import Dict, Final, Set

import barcode as pybarcode
from barcode.errors import BarcodeError

from escpos_encoder.escpos.commands.barcode import (
    MAX_BARCODE_DATA,
    print_barcode,
    set_barcode_height,
    set_barcode_width,
)
from escpos_encoder.exceptions import ValidationError
from escpos_encoder.model.enums import Symbology, coerce_enum

logger = logging.getLogger(__name__)

__all__ = [
    "BarcodeFramer",
    "frame_barcode",
]

_DIGITS: Final[frozenset[str]] = frozenset("0123456789")
_CODE39_CHARS: Final[frozenset[str]] = frozenset(
    "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./"
)
_CODABAR_START_STOP: Final[frozenset[str]] = frozenset("ABCD")
_CODABAR_BODY: Final[frozenset[str]] = frozenset("0123456789$+-./:")
_CODE128_SETS: Final[tuple[str, ...]] = ("{A", "{B", "{C")

_MIN_HEIGHT: Final[int] = 1
_MAX_HEIGHT: Final[int] = 255

_NARROW_MODULE: Final[int] = 2
_DEFAULT_MODULE: Final[int] = 3


def _is_ascii(value: str) -> bool:
    return all(ord(c) < 0x80 for c in value)


def _is_printable_ascii(value: str) -> bool:
    return all(0x20 <= ord(c) <= 0x7E for c in value)


class BarcodeFramer:
    """
    Validates a 1D barcode payload and builds its ESC/POS command sequence.

    Args:
        symbology: Symbology member or its string value ("ean13", "code128", ...).
        data: Payload string.
        height: Bar height in dots (1-255).

    Raises:
        ConfigError: Unknown symbology.
    """

    _pybarcode_support: Dict[Symbology, str] = {
        Symbology.UPCA: "upca",
        Symbology.EAN13: "ean13",
        Symbology.EAN8: "ean8",
    }

    # payload length without / with the check digit
    _check_digit_lengths: Dict[Symbology, tuple[int, int]] = {
        Symbology.UPCA: (11, 12),
        Symbology.EAN13: (12, 13),
        Symbology.EAN8: (7, 8),
    }

    def __init__(self, symbology: Symbology | str, data: str, height: int) -> None:
        self.symbology = coerce_enum(Symbology, symbology, "barcode symbology")
        self.data = data
        self.height = height

    @property
    def name(self) -> str:
        return self.symbology.localized_name()

    @property
    def module_width(self) -> int:
        if self.symbology in (Symbology.CODE39, Symbology.CODA39):
            return _NARROW_MODULE
        return _DEFAULT_MODULE

    def _reject(self, rule: str) -> ValidationError:
        logger.warning("Rejected %s payload %r: %s", self.name, self.data, rule)
        return ValidationError(f"{self.name} {rule}")

    def validate(self) -> bytes:
        """
        Validate data against the symbology rules.
        Returns the payload exactly as it will be sent to the printer.

        Raises:
            ValidationError: on malformed data, with the violated rule in the message.
        """
        if isinstance(self.height, bool) or not isinstance(self.height, int):
            raise self._reject(f"height must be an integer, got {self.height!r}")
        if not (_MIN_HEIGHT <= self.height <= _MAX_HEIGHT):
            raise self._reject(
                f"height must be {_MIN_HEIGHT}-{_MAX_HEIGHT} dots, got {self.height}"
            )
        if not isinstance(self.data, str) or not self.data:
            raise self._reject("data must be a non-empty string")

        data = self.data
        sym = self.symbology

        if sym.has_check_digit:
            data = self._complete_check_digit(data)

        elif sym == Symbology.UPCE:
            if not set(data) <= _DIGITS or len(data) not in (6, 7, 8, 11, 12):
                raise self._reject("requires 6, 7, 8, 11 or 12 digits")
            if len(data) >= 7 and data[0] != "0":
                raise self._reject("with 7 or more digits must start with 0")

        elif sym in (Symbology.CODE39, Symbology.CODA39):
            if not set(data) <= _CODE39_CHARS:
                raise self._reject("supports only 0-9, A-Z, space and $%*+-./")

        elif sym == Symbology.ITF:
            if not set(data) <= _DIGITS or len(data) < 2 or len(data) % 2:
                raise self._reject("requires an even number of digits (at least 2)")

        elif sym == Symbology.CODABAR:
            if len(data) < 2:
                raise self._reject("requires a start and a stop character")
            if data[0] not in _CODABAR_START_STOP or data[-1] not in _CODABAR_START_STOP:
                raise self._reject("must start and end with one of A, B, C, D")
            if not set(data[1:-1]) <= _CODABAR_BODY:
                raise self._reject("body supports only 0-9 and $+-./:")

        elif sym == Symbology.CODE93:
            if not _is_ascii(data):
                raise self._reject("supports only ASCII characters (0x00-0x7F)")

        elif sym == Symbology.CODE128:
            if not _is_ascii(data):
                raise self._reject("supports only ASCII characters (0x00-0x7F)")
            if not data.startswith("{"):
                data = "{B" + data
            elif not data.startswith(_CODE128_SETS):
                raise self._reject("code set prefix must be {A, {B or {C")
            if len(data) <= 2:
                raise self._reject("requires data after the code set prefix")

        elif sym == Symbology.GS1_128:
            if len(data) < 2 or not _is_ascii(data):
                raise self._reject("requires 2-255 ASCII characters")

        elif sym in (Symbology.GS1_DATABAR_OMNI, Symbology.GS1_DATABAR_TRUNCATED):
            if not set(data) <= _DIGITS or len(data) != 13:
                raise self._reject("requires exactly 13 digits")

        elif sym == Symbology.GS1_DATABAR_LIMITED:
            if not set(data) <= _DIGITS or len(data) != 13:
                raise self._reject("requires exactly 13 digits")
            if data[0] not in "01":
                raise self._reject("must start with 0 or 1")

        elif sym == Symbology.GS1_DATABAR_EXPANDED:
            if len(data) < 2 or not _is_printable_ascii(data):
                raise self._reject("requires 2-255 printable ASCII characters")

        if sym == Symbology.CODE128_AUTO:
            try:
                payload = data.encode("latin-1")
            except UnicodeEncodeError as e:
                logger.warning("Rejected %s payload %r: not Latin-1", self.name, data)
                raise ValidationError(
                    f"{self.name} supports only Latin-1 characters", cause=e
                ) from e
        else:
            payload = data.encode("ascii")

        if len(payload) > MAX_BARCODE_DATA:
            raise self._reject(
                f"data is {len(payload)} bytes long, maximum is {MAX_BARCODE_DATA}"
            )
        return payload

    def _complete_check_digit(self, data: str) -> str:
        """Append the check digit, or verify the one supplied."""
        without, with_check = self._check_digit_lengths[self.symbology]
        if not set(data) <= _DIGITS or len(data) not in (without, with_check):
            raise self._reject(f"requires {without} or {with_check} digits")

        try:
            bclass = pybarcode.get_barcode_class(self._pybarcode_support[self.symbology])
            full = bclass(data[:without]).get_fullcode()
        except BarcodeError as e:
            logger.error("python-barcode rejected %s payload %r", self.name, data)
            raise ValidationError(f"{self.name} payload {data!r} is invalid", cause=e) from e

        if len(data) == with_check and data != full:
            raise self._reject(
                f"check digit mismatch: got {data[-1]}, expected {full[-1]}"
            )
        return full

    def frame(self) -> bytes:
        """
        Build GS h, GS w and GS k (function B) for the validated payload.

        Raises:
            ValidationError: see validate().
        """
        payload = self.validate()
        logger.debug(
            "Framing barcode [%s] data=%r height=%d", self.symbology.value, payload, self.height
        )
        return (
            set_barcode_height(self.height)
            + set_barcode_width(self.module_width)
            + print_barcode(self.symbology, payload)
        )

    @classmethod
    def supported_types(cls) -> Set[Symbology]:
        return set(Symbology)

    @classmethod
    def check_digit_types(cls) -> Set[Symbology]:
        return {s for s in Symbology if s.has_check_digit}


def frame_barcode(value: str, symbology: Symbology | str, height: int) -> bytes:
    """Validate ``value`` and return the complete barcode command sequence."""
    return BarcodeFramer(symbology, value, height).frame()
