"""Shared pytest fixtures for test modules."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all OXI_RESULT__ env vars so tests are isolated from the shell."""
    for key in list(os.environ):
        if key.startswith("OXI_RESULT__"):
            monkeypatch.delenv(key)
