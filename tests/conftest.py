"""Shared fixtures: isolate planet table caching and environment configuration."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from astro_algos.planets import load_tables


@pytest.fixture(autouse=True)
def _fresh_tables(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Every test starts with the PyMeeus tables and an empty table cache."""
    monkeypatch.delenv('VSOP87_PATH', raising=False)
    load_tables.cache_clear()
    yield
    load_tables.cache_clear()
