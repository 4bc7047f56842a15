"""
Unicode to printer byte transcoding with optional fixed-width wrapping.

Text never fails for content reasons: a character the active table cannot
represent is replaced with the fallback byte(s) and the substitution is
logged at DEBUG level.
"""

from __future__ import annotations

import logging
from typing import Final, Optional

from escpos_encoder.escpos.commands.positioning import NEWLINE
from escpos_encoder.exceptions import ValidationError
from escpos_encoder.text.codepages import CodepageTable

logger: Final = logging.getLogger(__name__)

__all__ = ["DEFAULT_FALLBACK", "transcode"]

DEFAULT_FALLBACK: Final[bytes] = b"?"


def transcode(
    value: str,
    table: CodepageTable,
    wrap: Optional[int] = None,
    fallback: bytes = DEFAULT_FALLBACK,
) -> bytes:
    """
    Encode ``value`` with ``table``, inserting newlines every ``wrap`` chars.

    Args:
        value: Text to encode.
        table: Active codepage table.
        wrap: Column width. When set, a newline command is inserted before a
            character that would start column ``wrap + 1``. A literal "\\n"
            in ``value`` is emitted as the same LF CR and starts a new column
            count. No trailing newline.
        fallback: Bytes emitted for unmappable characters.

    Returns:
        Encoded bytes.

    Raises:
        ValidationError: If ``wrap`` is less than 1.

    Example:
        >>> transcode("abcdefgh", table, wrap=3)
        b'abc\\n\\rdef\\n\\rgh'
    """
    if wrap is not None and wrap < 1:
        logger.error("Invalid wrap width: %r", wrap)
        raise ValidationError(f"wrap must be at least 1, got {wrap}")

    out = bytearray()
    column = 0
    unmapped = 0

    for char in value:
        if char == "\n":
            out += NEWLINE
            column = 0
            continue

        if wrap is not None and column == wrap:
            out += NEWLINE
            column = 0

        encoded = table.lookup(char)
        if encoded is None:
            unmapped += 1
            encoded = fallback
        out += encoded
        column += 1

    if unmapped:
        logger.debug(
            "Replaced %d unmappable character(s) for %s", unmapped, table.name.value
        )
    return bytes(out)
