"""Shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from sneakerspider import ReleaseExtractor, SneakerStore

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def releases_html() -> str:
    return (FIXTURE_DIR / "releases.html").read_text(encoding="utf-8")


@pytest.fixture
def store(releases_html: str) -> SneakerStore:
    store = SneakerStore()
    ReleaseExtractor().populate(releases_html, store)
    store.seal()
    return store
