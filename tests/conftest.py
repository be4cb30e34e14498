"""Shared test fixtures."""

from unittest.mock import MagicMock

import pytest
from requests.structures import CaseInsensitiveDict

from netabako.topics.base import TransportError


@pytest.fixture(autouse=True)
def isolated_logs(tmp_path, monkeypatch):
    """Keep log files out of the real home directory."""
    monkeypatch.setattr("netabako.log.LOGS_DIR", tmp_path / "logs")


def _make_response(body=b"", status=200, content_type="application/rss+xml; charset=UTF-8"):
    """A canned streamed response as returned by Fetcher.get."""
    if isinstance(body, str):
        body = body.encode("utf-8")
    resp = MagicMock()
    resp.status_code = status
    resp.reason = "OK" if status == 200 else "Error"
    resp.headers = CaseInsensitiveDict({"Content-Type": content_type})
    resp.content = body
    resp.iter_content.side_effect = lambda chunk_size=1, **kw: iter(
        [body[i:i + chunk_size] for i in range(0, len(body), chunk_size)]
    )
    return resp


@pytest.fixture
def make_response():
    return _make_response


class FakeFetcher:
    """Maps URL -> response (or exception) and records every request."""

    def __init__(self, routes: dict):
        self.routes = routes
        self.calls = []

    def get(self, url, deadline=None):
        self.calls.append(url)
        result = self.routes.get(url)
        if result is None:
            raise TransportError(f"GET {url}: connection refused")
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def fake_fetcher():
    return FakeFetcher


def rss_document(items):
    """Build an RSS 2.0 body from (title, description) pairs."""
    parts = []
    for title, description in items:
        parts.append(
            f"<item><title>{title}</title><description>{description}</description></item>"
        )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<rss version="2.0"><channel><title>Daily Search Trends</title>'
        + "".join(parts)
        + "</channel></rss>"
    )


@pytest.fixture
def sample_rss():
    return rss_document([
        ("大谷翔平", "20万+ 検索"),
        ("  台風 ", "5,000+検索 関連ニュース"),
        ("World Cup", "200,000 searches"),
        ("新製品", "no traffic info"),
        ("Election", "1.5万+ 検索"),
    ])


@pytest.fixture
def sample_trend_html():
    """Yahoo-style page: nav links mixed with trend links, one duplicate."""
    return """
    <html><body>
      <ul class="nav">
        <li><a href="/realtime">リアルタイム</a></li>
        <li><a href="/search?p=news">ニュース</a></li>
      </ul>
      <ol class="ranking">
        <li><a href="/realtime/search?p=%E5%A4%A7%E8%B0%B7">大谷翔平</a></li>
        <li><a href="/realtime/search?p=typhoon"> 台風 </a></li>
        <li><a href="/realtime/search?p=empty">   </a></li>
        <li><a href="/realtime/search?p=ohtani">大谷翔平</a></li>
        <li><a href="/realtime/search?p=wc">World Cup</a></li>
      </ol>
      <div><a href="/realtime/search?p=outside">Not in a list</a></div>
    </body></html>
    """
