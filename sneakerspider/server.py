"""Startup sequence: scrape once, then serve."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import uvicorn

from .config import settings
from .extractor import ReleaseExtractor
from .fetcher import Fetcher
from .store import SneakerStore
from .web import create_app


def load_store(
    url: Optional[str] = None,
    fetcher: Optional[Fetcher] = None,
    extractor: Optional[ReleaseExtractor] = None,
) -> SneakerStore:
    """Fetch the release page, fill a fresh store and seal it.

    Fetch and parse failures are not caught: without data there is nothing
    to serve.
    """
    fetcher = fetcher or Fetcher()
    extractor = extractor or ReleaseExtractor()
    store = SneakerStore()

    document = fetcher.fetch_document(url or settings.source_url)
    extractor.populate(document, store)
    store.seal()
    return store


def serve(
    host: Optional[str] = None,
    port: Optional[int] = None,
    static_dir: Optional[str] = None,
    url: Optional[str] = None,
) -> None:
    static_dir = static_dir or settings.static_dir
    if not Path(static_dir).is_dir():
        raise FileNotFoundError(f"Static directory does not exist: {static_dir}")

    store = load_store(url=url)
    app = create_app(store, static_dir=static_dir)

    port = port or settings.port
    print(f"[Server] Now server is running on port {port}")
    print(
        "[Server] Get single sneaker: "
        f"curl -g 'http://localhost:{port}/graphql?query={{sneaker(id:1){{id,title,price,date}}}}'"
    )
    print(
        "[Server] Load sneaker list: "
        f"curl -g 'http://localhost:{port}/graphql?query={{sneakerList{{id,title,price,date}}}}'"
    )
    print(f"[Server] Access the web app via browser at 'http://localhost:{port}'")

    uvicorn.run(app, host=host or settings.host, port=port, log_level="info")
