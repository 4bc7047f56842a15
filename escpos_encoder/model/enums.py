"""
model/enums.py

(Краткое RU: Перечисления для кодировщика ESC/POS: кодовые страницы, форматирование, штрихкоды, QR, дизеринг.)

EN: Closed domain enums for the ESC/POS encoder. Every facade parameter that
takes one of these accepts either the member or its string value; anything
else is rejected with ``ConfigError`` via ``coerce_enum``.
NO protocol/ESC/POS byte logic here!

See Also:
    - escpos_encoder/escpos/commands (for protocol bytes)
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Final, Literal, Type, TypeVar

from escpos_encoder.exceptions import ConfigError

_logger: Final[logging.Logger] = logging.getLogger(__name__)

_E = TypeVar("_E", bound=Enum)

# === LIMITS ===
MIN_THRESHOLD: Final[int] = 0
MAX_THRESHOLD: Final[int] = 255


# === TEXT ===


class Codepage(str, Enum):
    CP437 = "cp437"
    CP737 = "cp737"
    CP850 = "cp850"
    CP775 = "cp775"
    CP852 = "cp852"
    CP855 = "cp855"
    CP857 = "cp857"
    CP858 = "cp858"
    CP860 = "cp860"
    CP861 = "cp861"
    CP862 = "cp862"
    CP863 = "cp863"
    CP864 = "cp864"
    CP865 = "cp865"
    CP866 = "cp866"
    CP869 = "cp869"
    CP936 = "cp936"
    CP949 = "cp949"
    CP950 = "cp950"
    CP1252 = "cp1252"
    ISO88596 = "iso88596"
    SHIFTJIS = "shiftjis"
    WINDOWS874 = "windows874"
    WINDOWS1250 = "windows1250"
    WINDOWS1251 = "windows1251"
    WINDOWS1252 = "windows1252"
    WINDOWS1253 = "windows1253"
    WINDOWS1254 = "windows1254"
    WINDOWS1255 = "windows1255"
    WINDOWS1256 = "windows1256"
    WINDOWS1257 = "windows1257"
    WINDOWS1258 = "windows1258"

    @property
    def is_multibyte(self) -> bool:
        return self in {
            Codepage.CP936,
            Codepage.CP949,
            Codepage.CP950,
            Codepage.SHIFTJIS,
        }


class Alignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class TextSize(str, Enum):
    SMALL = "small"
    NORMAL = "normal"
    WIDE = "wide"
    TALL = "tall"
    DOUBLE = "double"


class Bold(str, Enum):
    OFF = "off"
    ON = "on"
    DOUBLE = "double"


class Underline(str, Enum):
    OFF = "off"
    SINGLE = "single"
    DOUBLE = "double"

    @classmethod
    def _missing_(cls, value: object) -> "Underline | None":
        # "on" is the facade spelling of a single underline
        if value == "on":
            return cls.SINGLE
        return None


# === PAPER ===


class CutType(str, Enum):
    FULL = "full"
    PARTIAL = "partial"


# === BARCODES ===


class Symbology(str, Enum):
    UPCA = "upca"
    UPCE = "upce"
    EAN13 = "ean13"
    EAN8 = "ean8"
    CODE39 = "code39"
    CODA39 = "coda39"  # legacy spelling of code39
    ITF = "itf"
    CODABAR = "codabar"
    CODE93 = "code93"
    CODE128 = "code128"
    GS1_128 = "gs1-128"
    GS1_DATABAR_OMNI = "gs1-databar-omni"
    GS1_DATABAR_TRUNCATED = "gs1-databar-truncated"
    GS1_DATABAR_LIMITED = "gs1-databar-limited"
    GS1_DATABAR_EXPANDED = "gs1-databar-expanded"
    CODE128_AUTO = "code128-auto"

    @property
    def has_check_digit(self) -> bool:
        return self in {Symbology.UPCA, Symbology.EAN13, Symbology.EAN8}

    def localized_name(self, lang: Literal["ru", "en"] = "en") -> str:
        names_en = {
            Symbology.UPCA: "UPC-A",
            Symbology.UPCE: "UPC-E",
            Symbology.EAN13: "EAN-13",
            Symbology.EAN8: "EAN-8",
            Symbology.CODE39: "Code 39",
            Symbology.CODA39: "Code 39",
            Symbology.ITF: "Interleaved 2 of 5",
            Symbology.CODABAR: "Codabar",
            Symbology.CODE93: "Code 93",
            Symbology.CODE128: "Code 128",
            Symbology.GS1_128: "GS1-128",
            Symbology.GS1_DATABAR_OMNI: "GS1 DataBar Omnidirectional",
            Symbology.GS1_DATABAR_TRUNCATED: "GS1 DataBar Truncated",
            Symbology.GS1_DATABAR_LIMITED: "GS1 DataBar Limited",
            Symbology.GS1_DATABAR_EXPANDED: "GS1 DataBar Expanded",
            Symbology.CODE128_AUTO: "Code 128 (auto)",
        }
        names_ru = {
            Symbology.ITF: "Чередующийся 2 из 5",
            Symbology.CODE128_AUTO: "Code 128 (авто)",
        }
        if lang == "ru":
            return names_ru.get(self, names_en[self])
        return names_en[self]


class QRModel(int, Enum):
    MODEL_1 = 1
    MODEL_2 = 2


class QRErrorLevel(str, Enum):
    L = "l"
    M = "m"
    Q = "q"
    H = "h"

    @classmethod
    def _missing_(cls, value: object) -> "QRErrorLevel | None":
        if isinstance(value, str) and value.lower() != value:
            return cls._value2member_map_.get(value.lower())  # type: ignore[return-value]
        return None


# === IMAGES ===


class DitherAlgorithm(str, Enum):
    THRESHOLD = "threshold"
    BAYER = "bayer"
    FLOYD_STEINBERG = "floydsteinberg"
    ATKINSON = "atkinson"


# === DEFAULTS ===
DEFAULT_ALIGNMENT: Final[Alignment] = Alignment.LEFT
DEFAULT_SIZE: Final[TextSize] = TextSize.NORMAL
DEFAULT_BOLD: Final[Bold] = Bold.OFF
DEFAULT_UNDERLINE: Final[Underline] = Underline.OFF
DEFAULT_CUT: Final[CutType] = CutType.FULL
DEFAULT_QR_MODEL: Final[QRModel] = QRModel.MODEL_2
DEFAULT_QR_SIZE: Final[int] = 6
DEFAULT_QR_ERROR_LEVEL: Final[QRErrorLevel] = QRErrorLevel.M
DEFAULT_DITHER_ALGORITHM: Final[DitherAlgorithm] = DitherAlgorithm.THRESHOLD
DEFAULT_THRESHOLD: Final[int] = 128


def coerce_enum(enum_cls: Type[_E], value: Any, what: str) -> _E:
    """
    Resolve ``value`` into a member of ``enum_cls``.

    Accepts a member or its raw value. Booleans are never accepted as
    enumeration values (``True == 1`` would silently pick a QR model).

    Raises:
        ConfigError: If ``value`` is not a member or a member's value.
    """
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, bool):
        try:
            return enum_cls(value)
        except (ValueError, TypeError):
            pass
    allowed = ", ".join(repr(m.value) for m in enum_cls)
    _logger.error("Unknown %s %r", what, value)
    raise ConfigError(f"Unknown {what} {value!r}; expected one of: {allowed}")


__all__ = [
    "Codepage",
    "Alignment",
    "TextSize",
    "Bold",
    "Underline",
    "CutType",
    "Symbology",
    "QRModel",
    "QRErrorLevel",
    "DitherAlgorithm",
    "MIN_THRESHOLD",
    "MAX_THRESHOLD",
    "DEFAULT_ALIGNMENT",
    "DEFAULT_SIZE",
    "DEFAULT_BOLD",
    "DEFAULT_UNDERLINE",
    "DEFAULT_CUT",
    "DEFAULT_QR_MODEL",
    "DEFAULT_QR_SIZE",
    "DEFAULT_QR_ERROR_LEVEL",
    "DEFAULT_DITHER_ALGORITHM",
    "DEFAULT_THRESHOLD",
    "coerce_enum",
]
