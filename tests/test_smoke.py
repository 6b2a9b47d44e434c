"""Smoke test for the startup sequence."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from sneakerspider import Fetcher, FetchResult, create_app, load_store, server


class DummyFetcher(Fetcher):
    def __init__(self, html: str) -> None:
        super().__init__()
        self.html = html

    def fetch(self, url: str) -> FetchResult:
        return FetchResult(url=url, html=self.html)


class BrokenFetcher(Fetcher):
    def fetch(self, url: str) -> FetchResult:
        raise ConnectionError("no route to host")


def test_load_store_then_query(releases_html):
    store = load_store(url="http://example.com", fetcher=DummyFetcher(releases_html))

    assert store.sealed
    assert len(store) == 4

    client = TestClient(create_app(store))
    response = client.get("/graphql", params={"query": "{sneaker(id:1){title,date}}"})
    assert response.json() == {"data": {"sneaker": {"title": "Air Model X", "date": "12/Jan/2019"}}}


def test_load_store_fails_on_fetch_error():
    with pytest.raises(ConnectionError):
        load_store(url="http://example.com", fetcher=BrokenFetcher())


def test_serve_checks_static_dir_before_scraping(tmp_path, monkeypatch):
    scraped = []
    monkeypatch.setattr(server, "load_store", lambda **kwargs: scraped.append(kwargs))

    with pytest.raises(FileNotFoundError):
        server.serve(static_dir=str(tmp_path / "missing"))
    assert scraped == []
