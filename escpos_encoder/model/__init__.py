"""Domain model: enums and the tracked print state."""

from escpos_encoder.model.enums import (
    Alignment,
    Bold,
    Codepage,
    CutType,
    DitherAlgorithm,
    QRErrorLevel,
    QRModel,
    Symbology,
    TextSize,
    Underline,
    coerce_enum,
)
from escpos_encoder.model.state import PrintState

__all__ = [
    "Alignment",
    "Bold",
    "Codepage",
    "CutType",
    "DitherAlgorithm",
    "QRErrorLevel",
    "QRModel",
    "Symbology",
    "TextSize",
    "Underline",
    "coerce_enum",
    "PrintState",
]
