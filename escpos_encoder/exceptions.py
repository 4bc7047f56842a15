# -*- coding: utf-8 -*-
"""
RU: Иерархия исключений кодировщика ESC/POS.
EN: Exception hierarchy for the ESC/POS encoder.

All errors are raised synchronously at the call that triggers them; nothing is
deferred to ``encode()``.

Guidelines:
- Use the narrowest subclass at call sites.
- Messages name the offending value and the violated rule.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "EncoderError",
    "ConfigError",
    "ValidationError",
    "StateError",
]


class EncoderError(Exception):
    """Base exception for all encoder failures."""

    def __init__(
        self, message: str = "", *, cause: Optional[BaseException] = None
    ) -> None:
        super().__init__(message)
        self.__cause__ = cause


class ConfigError(EncoderError):
    """Raised for an unknown codepage or enumeration value, or bad configuration."""


class ValidationError(EncoderError, ValueError):
    """Raised when arguments are malformed (barcode payloads, dimensions, sizes)."""


class StateError(EncoderError):
    """Raised when an operation needs printer state that was never established."""
