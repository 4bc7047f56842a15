"""
encoder/escpos_encoder.py

(Краткое RU: Фасад кодировщика ESC/POS с цепочечным API.)

EN: Public encoder facade. Every operation validates its arguments, appends
one command segment to the buffer and returns ``self`` so calls chain:

    >>> data = (
    ...     EscPosEncoder()
    ...     .initialize()
    ...     .codepage("cp437")
    ...     .bold(True)
    ...     .line("Total")
    ...     .bold(False)
    ...     .cut()
    ...     .encode()
    ... )

Errors are raised by the call that triggers them; ``encode()`` never fails.
One encoder is one print job: it is not thread-safe, use one instance per job.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Final, Optional, Union

from escpos_encoder.barcodes.barcode_framer import frame_barcode
from escpos_encoder.barcodes.qr_framer import frame_qrcode
from escpos_encoder.config import DEFAULT_CONFIG, EncoderConfig
from escpos_encoder.encoder.buffer import CommandBuffer
from escpos_encoder.encoder.state_tracker import (
    BoldValue,
    PrintStateTracker,
    UnderlineValue,
)
from escpos_encoder.escpos.commands.hardware import cut_paper
from escpos_encoder.escpos.commands.positioning import NEWLINE
from escpos_encoder.exceptions import StateError, ValidationError
from escpos_encoder.imaging.raster import RasterImage, frame_image
from escpos_encoder.model.enums import (
    DEFAULT_CUT,
    Alignment,
    Codepage,
    CutType,
    DitherAlgorithm,
    QRErrorLevel,
    QRModel,
    Symbology,
    TextSize,
    coerce_enum,
)
from escpos_encoder.model.state import PrintState
from escpos_encoder.text.transcoder import transcode

logger: Final = logging.getLogger(__name__)

__all__ = ["EscPosEncoder", "DEFAULT_BARCODE_HEIGHT"]

DEFAULT_BARCODE_HEIGHT: Final[int] = 60

_BYTES_LIKE: Final = (bytes, bytearray, memoryview)


class EscPosEncoder:
    """
    Builds an ESC/POS command stream.

    Args:
        config: Encoder configuration; package defaults when omitted.
    """

    def __init__(self, config: Optional[EncoderConfig] = None) -> None:
        self.config = config if config is not None else DEFAULT_CONFIG
        self._tracker = PrintStateTracker()
        self._buffer = CommandBuffer()

    # === STATE ===

    @property
    def state(self) -> PrintState:
        """Independent copy of the tracked print state."""
        return self._tracker.snapshot()

    def __len__(self) -> int:
        return len(self._buffer)

    def __repr__(self) -> str:
        return f"EscPosEncoder(bytes={len(self._buffer)}, state={self._tracker.state!r})"

    def _emit(self, segment: bytes) -> "EscPosEncoder":
        self._buffer.append(segment)
        return self

    # === PRINTER CONTROL ===

    def initialize(self) -> "EscPosEncoder":
        """ESC @. Resets tracked formatting; an active codepage is selected again."""
        return self._emit(self._tracker.initialize())

    def codepage(self, value: Union[Codepage, str]) -> "EscPosEncoder":
        """
        Select the character table for subsequent text.

        Raises:
            ConfigError: Unknown codepage identifier.
        """
        return self._emit(self._tracker.set_codepage(value))

    def cut(self, value: Union[CutType, str] = DEFAULT_CUT) -> "EscPosEncoder":
        """GS V 0 (full) or GS V 1 (partial)."""
        return self._emit(cut_paper(coerce_enum(CutType, value, "cut type")))

    # === TEXT ===

    def text(self, value: str, wrap: Optional[int] = None) -> "EscPosEncoder":
        """
        Append text encoded with the active codepage.

        Args:
            value: Text to print.
            wrap: Insert a newline after every ``wrap`` characters.

        Raises:
            StateError: No codepage selected yet.
            ValidationError: ``wrap`` below 1.
        """
        table = self._tracker.table
        if table is None:
            logger.error("text() called before a codepage was selected")
            raise StateError("Select a codepage with codepage() before adding text")
        if not isinstance(value, str):
            raise ValidationError(f"text value must be str, got {type(value).__name__}")
        return self._emit(
            transcode(value, table, wrap=wrap, fallback=self.config.fallback_bytes)
        )

    def newline(self) -> "EscPosEncoder":
        """LF CR."""
        return self._emit(NEWLINE)

    def line(self, value: str = "", wrap: Optional[int] = None) -> "EscPosEncoder":
        """Text followed by a newline. An empty value emits only the newline."""
        if value:
            self.text(value, wrap)
        return self.newline()

    # === FORMATTING ===

    def bold(self, value: BoldValue = None) -> "EscPosEncoder":
        """Set bold ("off", "on", "double", bool) or toggle it with None."""
        return self._emit(self._tracker.set_bold(value))

    def italic(self, value: Optional[bool] = None) -> "EscPosEncoder":
        return self._emit(self._tracker.set_italic(value))

    def underline(self, value: UnderlineValue = None) -> "EscPosEncoder":
        """Set underline ("off", "single", "double", bool) or toggle it with None."""
        return self._emit(self._tracker.set_underline(value))

    def align(self, value: Union[Alignment, str]) -> "EscPosEncoder":
        return self._emit(self._tracker.set_align(value))

    def size(self, value: Union[TextSize, str]) -> "EscPosEncoder":
        """Select "small", "normal", "wide", "tall" or "double" characters."""
        return self._emit(self._tracker.set_size(value))

    # === SYMBOLS AND IMAGES ===

    def barcode(
        self,
        value: str,
        symbology: Union[Symbology, str],
        height: int = DEFAULT_BARCODE_HEIGHT,
    ) -> "EscPosEncoder":
        """
        Append a 1D barcode.

        Raises:
            ConfigError: Unknown symbology.
            ValidationError: Payload breaks the symbology rules or height is not 1-255.
        """
        return self._emit(frame_barcode(value, symbology, height))

    def qrcode(
        self,
        value: Union[str, bytes, bytearray],
        model: Union[QRModel, int, None] = None,
        size: Optional[int] = None,
        errorlevel: Union[QRErrorLevel, str, None] = None,
    ) -> "EscPosEncoder":
        """
        Append a QR code. Omitted arguments come from the configuration.

        Raises:
            ConfigError: Unknown model or error level.
            ValidationError: Size out of range; payload empty, too long or unencodable.
        """
        cfg = self.config
        return self._emit(
            frame_qrcode(
                value,
                model=cfg.default_qr_model if model is None else model,
                size=cfg.default_qr_size if size is None else size,
                error_level=cfg.default_qr_error_level if errorlevel is None else errorlevel,
                encoding=cfg.qr_encoding,
            )
        )

    def image(
        self,
        source: RasterImage,
        width: int,
        height: int,
        algorithm: Union[DitherAlgorithm, str, None] = None,
        threshold: Optional[int] = None,
    ) -> "EscPosEncoder":
        """
        Append a raster image scaled to ``width`` x ``height`` dots.

        Raises:
            ConfigError: Unknown algorithm.
            ValidationError: Invalid dimensions or threshold.
        """
        cfg = self.config
        return self._emit(
            frame_image(
                source,
                width,
                height,
                algorithm=cfg.default_dither_algorithm if algorithm is None else algorithm,
                threshold=cfg.default_threshold if threshold is None else threshold,
            )
        )

    # === RAW ===

    def raw(self, data: Any) -> "EscPosEncoder":
        """
        Append bytes verbatim.

        Args:
            data: bytes-like object, or an iterable of ints (0-255) and/or
                bytes-like chunks.

        Raises:
            ValidationError: Unsupported type or an int outside 0-255.
        """
        if isinstance(data, _BYTES_LIKE):
            return self._emit(bytes(data))
        if isinstance(data, str) or not isinstance(data, Iterable):
            raise ValidationError(
                f"raw() expects bytes or an iterable of ints, got {type(data).__name__}"
            )

        out = bytearray()
        for item in data:
            if isinstance(item, _BYTES_LIKE):
                out += item
            elif isinstance(item, int) and not isinstance(item, bool):
                if not 0 <= item <= 255:
                    raise ValidationError(f"raw() byte value out of range 0-255: {item}")
                out.append(item)
            else:
                raise ValidationError(f"raw() cannot append {type(item).__name__} item")
        return self._emit(bytes(out))

    # === OUTPUT ===

    def encode(self) -> bytes:
        """Concatenate everything appended so far. The buffer is kept."""
        result = self._buffer.encode()
        logger.debug("Encoded %d byte(s)", len(result))
        return result

    def reset(self) -> "EscPosEncoder":
        """Clear the buffer and the tracked state for reuse."""
        self._buffer.clear()
        self._tracker.reset()
        return self
