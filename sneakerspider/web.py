"""FastAPI application serving the GraphQL endpoint and static files."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import FastAPI, Query, Request
from fastapi.staticfiles import StaticFiles
from graphql import GraphQLSchema

from .config import settings
from .schema import build_schema, execute_query
from .store import SneakerStore


def create_app(
    store: SneakerStore,
    static_dir: Optional[str] = None,
    schema: Optional[GraphQLSchema] = None,
) -> FastAPI:
    """Build the app around an already populated store."""
    app = FastAPI(title="SneakerSpider", version="0.1.0")
    app.state.store = store
    app.state.schema = schema or build_schema()

    @app.get("/graphql")
    def graphql_endpoint(request: Request, query: str = Query(default="")) -> Dict[str, Any]:
        # Errors stay inside the document; the status is always 200.
        return execute_query(request.app.state.schema, query, request.app.state.store)

    # Mounted last so /graphql wins over the catch-all static route.
    app.mount("/", StaticFiles(directory=static_dir or settings.static_dir, html=True), name="static")
    return app
