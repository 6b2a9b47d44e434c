"""HTTP fetching of the release calendar page."""

from __future__ import annotations

import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from bs4 import BeautifulSoup
from curl_cffi import requests

from .config import settings

try:
    import certifi
except ImportError:  # pragma: no cover - certifi is always installed in our env
    certifi = None


def _ensure_ascii_cert_path() -> Optional[str]:
    """Ensure CA bundle lives on an ASCII path (curl can't open non-ASCII)."""
    if certifi is None:
        return None

    original = Path(certifi.where())
    try:
        str(original).encode("ascii")
        return str(original)
    except UnicodeEncodeError:
        temp_dir = Path(tempfile.gettempdir())
        ascii_copy = temp_dir / "certifi_cacert.pem"
        try:
            if not ascii_copy.exists() or original.stat().st_mtime > ascii_copy.stat().st_mtime:
                shutil.copy2(original, ascii_copy)
            return str(ascii_copy)
        except OSError as exc:
            print(f"[Fetcher] Failed to copy certifi bundle to ASCII path: {exc}")
            return None


CERT_BUNDLE_PATH = _ensure_ascii_cert_path()


@dataclass
class FetchResult:
    """Represents a fetched page."""

    url: str
    html: str


class Fetcher:
    """Fetch a page with a single blocking GET and parse it with lxml."""

    def __init__(self, timeout: Optional[int] = None, user_agent: Optional[str] = None) -> None:
        self.timeout = timeout if timeout is not None else settings.timeout
        self.user_agent = user_agent or settings.user_agent
        self._cert_bundle = CERT_BUNDLE_PATH

    def fetch(self, url: str) -> FetchResult:
        """Fetch page source. Transport errors and non-2xx statuses propagate."""
        print(f"[Fetcher] request: {url}")
        html, final_url = self._fetch_static(url)
        return FetchResult(url=final_url, html=html)

    def fetch_document(self, url: str) -> BeautifulSoup:
        """Fetch ``url`` and return its parse tree."""
        page = self.fetch(url)
        return self.parse(page.html)

    @staticmethod
    def parse(html: str) -> BeautifulSoup:
        if not html or not html.strip():
            raise ValueError("Empty response body, nothing to parse")
        if "<html" not in html.lower():
            print("[Fetcher] Warning: unusual response, missing <html> tag")
        return BeautifulSoup(html, "lxml")

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #
    def _fetch_static(self, url: str) -> Tuple[str, str]:
        headers = {
            "Upgrade-Insecure-Requests": "1",
            "User-Agent": self.user_agent,
        }
        verify_arg: bool | str = self._cert_bundle or True

        response = requests.get(
            url,
            headers=headers,
            timeout=self.timeout,
            impersonate="chrome120",
            allow_redirects=True,
            verify=verify_arg,
        )
        response.raise_for_status()
        return response.text, response.url or url
