"""Codepage tables and text transcoding."""

from escpos_encoder.text.codepages import (
    CODEPAGE_TABLES,
    CodepageTable,
    get_codepage_table,
)
from escpos_encoder.text.transcoder import DEFAULT_FALLBACK, transcode

__all__ = [
    "CODEPAGE_TABLES",
    "CodepageTable",
    "get_codepage_table",
    "DEFAULT_FALLBACK",
    "transcode",
]
