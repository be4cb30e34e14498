"""Google Trends daily RSS topic source."""

import io
import re

import feedparser
import requests

from ..log import get_logger
from .base import SOURCE_FEED, FormatError, SourceError, Topic, TopicSource, TransportError
from .fetcher import Fetcher, read_snippet

FEED_URLS = [
    "https://trends.google.com/trends/trendingsearches/daily/rss?hl=ja&geo={geo}",
    "https://trends.google.com/trending/rss?geo={geo}",
]

# "20万+ 検索", "1,000+検索" or "200,000+ searches"
TRAFFIC_RE = re.compile(r"([0-9,\.]+)\s*万?\+?\s*検索|([0-9,\.]+)\s*searches")


def extract_traffic_note(text: str) -> str:
    """Return the first search-volume hint in `text` verbatim, or ""."""
    if not text:
        return ""
    m = TRAFFIC_RE.search(text)
    return m.group(0) if m else ""


def parse_feed(body: bytes, limit: int = 0) -> list[Topic]:
    """Parse an RSS document into ranked topics.

    Rank is the item's position in the feed, so skipped untitled items
    leave gaps. Raises FormatError when the body is not a feed at all.
    """
    feed = feedparser.parse(io.BytesIO(body))
    if feed.bozo and not feed.entries:
        raise FormatError(f"google trends decode: {feed.get('bozo_exception', 'not a feed')}")

    topics = []
    for i, entry in enumerate(feed.entries):
        title = entry.get("title", "").strip()
        if not title:
            continue
        topics.append(Topic(
            title=title,
            source=SOURCE_FEED,
            note=extract_traffic_note(entry.get("summary", "")),
            rank=i + 1,
        ))
        if limit > 0 and len(topics) >= limit:
            break
    return topics


class GoogleTrendsSource(TopicSource):
    name = SOURCE_FEED

    def __init__(self, config: dict = None, fetcher: Fetcher = None):
        config = config or {}
        self.geo = config.get("geo", "JP")
        self.fetcher = fetcher or Fetcher()

    @property
    def urls(self) -> list[str]:
        return [u.format(geo=self.geo) for u in FEED_URLS]

    def fetch_topics(self, limit: int = 10, deadline: float | None = None) -> list[Topic]:
        """Try each feed URL in order; first one yielding topics wins."""
        logger = get_logger()
        last_err = None
        for url in self.urls:
            try:
                topics = self._fetch_url(url, limit, deadline)
            except SourceError as e:
                logger.debug("google trends: %s failed: %s", url, e)
                last_err = e
                continue
            if topics:
                return topics
            last_err = FormatError(f"google trends: zero items from {url}")
        raise last_err

    def _fetch_url(self, url: str, limit: int, deadline: float | None) -> list[Topic]:
        try:
            resp = self.fetcher.get(url, deadline=deadline)
        except TransportError as e:
            raise TransportError(f"google trends request: {e}") from e

        try:
            content_type = resp.headers.get("Content-Type", "")
            if "xml" not in content_type:
                snippet = read_snippet(resp)
                raise FormatError(
                    f"google trends non-XML response: {content_type} ... {snippet!r}"
                )
            try:
                body = resp.content
            except requests.RequestException as e:
                raise TransportError(f"google trends read: {e}") from e
            return parse_feed(body, limit)
        finally:
            resp.close()
