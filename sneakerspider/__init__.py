"""SneakerSpider package exports."""

from .models import Sneaker, ReleaseSelectors
from .fetcher import Fetcher, FetchResult
from .extractor import ReleaseExtractor
from .store import SneakerStore
from .schema import build_schema, decode_sneaker_id, execute_query
from .web import create_app
from .server import load_store, serve
from .output import ResultWriter, PrintWriter, JsonWriter, CsvWriter

__all__ = [
    "Sneaker",
    "ReleaseSelectors",
    "Fetcher",
    "FetchResult",
    "ReleaseExtractor",
    "SneakerStore",
    "build_schema",
    "decode_sneaker_id",
    "execute_query",
    "create_app",
    "load_store",
    "serve",
    "ResultWriter",
    "PrintWriter",
    "JsonWriter",
    "CsvWriter",
]
