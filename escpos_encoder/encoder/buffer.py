"""
Ordered command buffer owned by one encoder.

Each facade call appends one immutable segment. The buffer only grows until
``clear()``; ``encode()`` concatenates without consuming.
"""

from __future__ import annotations

import logging
from typing import Final, Iterator

logger: Final = logging.getLogger(__name__)

__all__ = ["CommandBuffer"]


class CommandBuffer:
    """Append-only list of byte segments with a running byte count."""

    __slots__ = ("_segments", "_size")

    def __init__(self) -> None:
        self._segments: list[bytes] = []
        self._size = 0

    def append(self, segment: bytes) -> None:
        if not segment:
            return
        self._segments.append(bytes(segment))
        self._size += len(segment)

    @property
    def segments(self) -> tuple[bytes, ...]:
        return tuple(self._segments)

    def encode(self) -> bytes:
        return b"".join(self._segments)

    def clear(self) -> None:
        logger.debug("Clearing %d segment(s), %d byte(s)", len(self._segments), self._size)
        self._segments.clear()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[bytes]:
        return iter(self._segments)

    def __repr__(self) -> str:
        return f"CommandBuffer(segments={len(self._segments)}, bytes={self._size})"
