"""Command line entry point for SneakerSpider."""

from __future__ import annotations

import argparse
from pathlib import Path

from .config import settings
from .extractor import ReleaseExtractor
from .fetcher import Fetcher
from .output import build_writer
from .server import serve


def _scrape(args: argparse.Namespace) -> None:
    extractor = ReleaseExtractor()
    if args.html_file:
        document = Fetcher.parse(Path(args.html_file).read_text(encoding="utf-8"))
    else:
        document = Fetcher().fetch_document(args.url)
    records = extractor.extract(document)
    build_writer(args.output_mode, args.output_path).write(records)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser("SneakerSpider CLI")
    subparsers = parser.add_subparsers(dest="command")

    serve_parser = subparsers.add_parser("serve", help="Scrape once, then serve the GraphQL API.")
    serve_parser.add_argument("--host", default=settings.host, help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on.")
    serve_parser.add_argument("--static-dir", default=settings.static_dir, help="Directory served at '/'.")
    serve_parser.add_argument("--url", default=settings.source_url, help="Release calendar URL.")

    scrape_parser = subparsers.add_parser("scrape", help="Scrape once and write the records.")
    scrape_parser.add_argument("--url", default=settings.source_url, help="Release calendar URL.")
    scrape_parser.add_argument("--html-file", default=None, help="Parse a saved page instead of fetching.")
    scrape_parser.add_argument(
        "--output-mode",
        default="print",
        choices=["print", "json", "csv"],
        help="Output backend.",
    )
    scrape_parser.add_argument("--output-path", default=None, help="File path for json/csv outputs.")

    args = parser.parse_args(argv)

    if args.command == "scrape":
        _scrape(args)
        return
    if args.command == "serve":
        serve(host=args.host, port=args.port, static_dir=args.static_dir, url=args.url)
        return
    # Bare invocation keeps the fixed defaults.
    serve()


if __name__ == "__main__":
    main()
