"""Tests for the command line entry point."""

from __future__ import annotations

import json

from sneakerspider import cli


def test_scrape_from_saved_page(tmp_path, releases_html):
    html_file = tmp_path / "page.html"
    html_file.write_text(releases_html, encoding="utf-8")
    output = tmp_path / "out.json"

    cli.main(["scrape", "--html-file", str(html_file), "--output-mode", "json", "--output-path", str(output)])

    data = json.loads(output.read_text(encoding="utf-8"))
    assert [item["title"] for item in data] == ["Air Model X", "Runner 2", "Court Low", "Trail 9"]


def test_serve_passes_overrides(monkeypatch):
    calls = {}

    def fake_serve(**kwargs):
        calls.update(kwargs)

    monkeypatch.setattr(cli, "serve", fake_serve)
    cli.main(["serve", "--port", "9090", "--host", "127.0.0.1", "--url", "http://example.com/releases"])

    assert calls["port"] == 9090
    assert calls["host"] == "127.0.0.1"
    assert calls["url"] == "http://example.com/releases"


def test_bare_invocation_serves_with_defaults(monkeypatch):
    calls = []
    monkeypatch.setattr(cli, "serve", lambda **kwargs: calls.append(kwargs))
    cli.main([])
    assert calls == [{}]
