"""Shared pytest fixtures for create-bl-theme tests."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _isolate_bltheme_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer BLTHEME_* settings out of every test."""
    for key in list(os.environ):
        if key.startswith("BLTHEME_"):
            monkeypatch.delenv(key, raising=False)
