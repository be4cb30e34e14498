"""Shared HTTP GET with browser-like headers and a fixed timeout."""

import time

import requests

from .base import TransportError

DEFAULT_TIMEOUT = 12.0
SNIPPET_BYTES = 512

DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/125 Safari/537.36"
    ),
    "Accept": "application/rss+xml, application/xml;q=0.9, text/xml;q=0.8, */*;q=0.5",
    "Accept-Language": "ja,en;q=0.8",
}


class Fetcher:
    """Thin GET wrapper around an injected requests.Session.

    Never retries; fallback between endpoints belongs to the sources.
    """

    def __init__(self, session: requests.Session | None = None, timeout: float = DEFAULT_TIMEOUT):
        self.session = session or requests.Session()
        self.timeout = timeout

    def get(self, url: str, deadline: float | None = None) -> requests.Response:
        """GET `url`, returning a streamed response.

        `deadline` is a time.monotonic() instant; the request timeout is
        capped to whatever is left of it.
        """
        timeout = self.timeout
        if deadline is not None:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise TransportError(f"deadline exceeded before GET {url}")
            timeout = min(timeout, remaining)

        try:
            return self.session.get(url, headers=DEFAULT_HEADERS, timeout=timeout, stream=True)
        except requests.RequestException as e:
            raise TransportError(f"GET {url}: {e}") from e


def read_snippet(resp, limit: int = SNIPPET_BYTES) -> str:
    """Read at most `limit` body bytes for diagnostics."""
    try:
        chunk = next(resp.iter_content(chunk_size=limit), b"")
    except requests.RequestException:
        chunk = b""
    return chunk[:limit].decode("utf-8", errors="replace")
