"""Shared fixtures: silent logging and a clean settings environment per test."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from fallible.config import clear_settings_cache
from fallible.logging import configure_logging


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for key in list(os.environ):
        if key.startswith("FALLIBLE_"):
            monkeypatch.delenv(key)
    clear_settings_cache()
    configure_logging("none")
    yield
    clear_settings_cache()
    configure_logging("none")
