"""Yahoo! JAPAN realtime-search trend page (HTML scraping)."""

import requests
from bs4 import BeautifulSoup

from .base import (
    SOURCE_MARKUP, StructureChangedError, Topic, TopicSource, TransportError, normalize_title,
)
from .fetcher import Fetcher, read_snippet

TREND_URL = "https://search.yahoo.co.jp/realtime/trend"
ANCHOR_SELECTOR = "ol li a, ul li a"
TREND_LINK_MARKER = "/realtime/search"


def extract_candidates(html: str | bytes) -> list[Topic]:
    """Trend anchors from list markup.

    Rank is the anchor's position among every `li a` in the page, counted
    before navigation/footer links are filtered out.
    """
    soup = BeautifulSoup(html, "html.parser")
    topics = []
    for i, a in enumerate(soup.select(ANCHOR_SELECTOR)):
        href = a.get("href") or ""
        text = a.get_text().strip()
        if not text or TREND_LINK_MARKER not in href:
            continue
        topics.append(Topic(title=text, source=SOURCE_MARKUP, rank=i + 1))
    return topics


def dedupe_topics(topics: list[Topic], limit: int = 0) -> list[Topic]:
    """First occurrence per normalized title wins; stop at `limit` if > 0."""
    seen = set()
    out = []
    for t in topics:
        key = normalize_title(t.title)
        if not key or key in seen:
            continue
        seen.add(key)
        out.append(t)
        if limit > 0 and len(out) >= limit:
            break
    return out


class YahooRealtimeSource(TopicSource):
    name = SOURCE_MARKUP

    def __init__(self, config: dict = None, fetcher: Fetcher = None):
        config = config or {}
        self.url = config.get("url", TREND_URL)
        self.fetcher = fetcher or Fetcher()

    def fetch_topics(self, limit: int = 10, deadline: float | None = None) -> list[Topic]:
        try:
            resp = self.fetcher.get(self.url, deadline=deadline)
        except TransportError as e:
            raise TransportError(f"yahoo realtime request: {e}") from e

        try:
            if resp.status_code != 200:
                snippet = read_snippet(resp)
                raise TransportError(
                    f"yahoo realtime status: {resp.status_code} {resp.reason} body: {snippet!r}"
                )
            try:
                body = resp.content
            except requests.RequestException as e:
                raise TransportError(f"yahoo realtime read: {e}") from e
        finally:
            resp.close()

        topics = dedupe_topics(extract_candidates(body), limit)
        if not topics:
            raise StructureChangedError("yahoo realtime: no topics parsed (DOM changed?)")
        return topics
