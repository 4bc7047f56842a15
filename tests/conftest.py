"""Shared pytest fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def _propagate_package_logs(monkeypatch: pytest.MonkeyPatch) -> None:
    """The package logger does not propagate; caplog listens on the root logger."""
    monkeypatch.setattr(logging.getLogger("escpos_encoder"), "propagate", True)
