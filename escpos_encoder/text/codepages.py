"""
text/codepages.py

(Краткое RU: Таблицы кодовых страниц принтера: номер для ESC t и кодек Python.)

EN: Static codepage tables. Each table pairs the printer-side table number
(the ``n`` of ``ESC t n``) with a Python codec that serves as the character
lookup data. Tables are immutable and shared by every encoder instance.

Printable ASCII (0x20-0x7E) maps to itself in every table. A few DOS tables
(cp864 for one) remap ASCII punctuation in their Python codec; the printer
firmware does not, so the ASCII range never consults the codec.

Multi-byte tables (cp936, cp949, cp950, shiftjis) return two-byte sequences
for ideographs.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Mapping, Optional

from escpos_encoder.model.enums import Codepage, coerce_enum

__all__ = [
    "CodepageTable",
    "CODEPAGE_TABLES",
    "get_codepage_table",
]

_ASCII_FIRST: Final[int] = 0x20
_ASCII_LAST: Final[int] = 0x7E


@dataclass(frozen=True, slots=True)
class CodepageTable:
    """One printer character table."""

    name: Codepage
    printer_index: int
    codec: str
    multibyte: bool = False

    def lookup(self, char: str) -> Optional[bytes]:
        """
        Return the printer bytes for one character.

        Returns:
            Encoded bytes, or None when the table has no glyph for ``char``.
        """
        code = ord(char)
        if _ASCII_FIRST <= code <= _ASCII_LAST:
            return bytes([code])
        try:
            return char.encode(self.codec)
        except UnicodeEncodeError:
            return None

    def can_encode(self, char: str) -> bool:
        return self.lookup(char) is not None


def _table(name: Codepage, printer_index: int, codec: str) -> CodepageTable:
    return CodepageTable(
        name=name,
        printer_index=printer_index,
        codec=codec,
        multibyte=name.is_multibyte,
    )


# fmt: off
_TABLES: Final[tuple[CodepageTable, ...]] = (
    _table(Codepage.CP437, 0x00, "cp437"),
    _table(Codepage.CP737, 0x40, "cp737"),
    _table(Codepage.CP850, 0x02, "cp850"),
    _table(Codepage.CP775, 0x5F, "cp775"),
    _table(Codepage.CP852, 0x12, "cp852"),
    _table(Codepage.CP855, 0x3C, "cp855"),
    _table(Codepage.CP857, 0x3D, "cp857"),
    _table(Codepage.CP858, 0x13, "cp858"),
    _table(Codepage.CP860, 0x03, "cp860"),
    _table(Codepage.CP861, 0x38, "cp861"),
    _table(Codepage.CP862, 0x3E, "cp862"),
    _table(Codepage.CP863, 0x04, "cp863"),
    _table(Codepage.CP864, 0x1C, "cp864"),
    _table(Codepage.CP865, 0x05, "cp865"),
    _table(Codepage.CP866, 0x11, "cp866"),
    _table(Codepage.CP869, 0x42, "cp869"),
    _table(Codepage.CP936, 0xFF, "gbk"),
    _table(Codepage.CP949, 0xFD, "cp949"),
    _table(Codepage.CP950, 0xFE, "cp950"),
    _table(Codepage.CP1252, 0x10, "cp1252"),
    _table(Codepage.ISO88596, 0x16, "iso8859_6"),
    _table(Codepage.SHIFTJIS, 0xFC, "shift_jis"),
    _table(Codepage.WINDOWS874, 0x1E, "cp874"),
    _table(Codepage.WINDOWS1250, 0x48, "cp1250"),
    _table(Codepage.WINDOWS1251, 0x49, "cp1251"),
    _table(Codepage.WINDOWS1252, 0x47, "cp1252"),
    _table(Codepage.WINDOWS1253, 0x5A, "cp1253"),
    _table(Codepage.WINDOWS1254, 0x5B, "cp1254"),
    _table(Codepage.WINDOWS1255, 0x20, "cp1255"),
    _table(Codepage.WINDOWS1256, 0x5C, "cp1256"),
    _table(Codepage.WINDOWS1257, 0x19, "cp1257"),
    _table(Codepage.WINDOWS1258, 0x5E, "cp1258"),
)
# fmt: on

CODEPAGE_TABLES: Final[Mapping[Codepage, CodepageTable]] = MappingProxyType(
    {table.name: table for table in _TABLES}
)
"""Read-only registry of every supported table, keyed by identifier."""


def get_codepage_table(name: Codepage | str) -> CodepageTable:
    """
    Resolve a codepage identifier to its table.

    Raises:
        ConfigError: If ``name`` is not a supported codepage identifier.
    """
    return CODEPAGE_TABLES[coerce_enum(Codepage, name, "codepage")]
