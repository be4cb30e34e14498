"""TopicEngine — sequential collection from both sources, merge, random pick."""

import random
from dataclasses import dataclass, field

from ..config import get_top_n, load_config
from ..log import get_logger, log
from .base import NoTopicsError, SourceError, Topic
from .fetcher import Fetcher
from .google_trends import GoogleTrendsSource
from .merge import merge_and_rank
from .yahoo_realtime import YahooRealtimeSource

DEFAULT_LIMIT = 10


@dataclass
class SourceResult:
    """What one source produced: its topics, or the error that stopped it."""
    name: str
    topics: list[Topic] = field(default_factory=list)
    error: SourceError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class TopicCollection:
    markup: SourceResult
    feed: SourceResult

    @property
    def empty(self) -> bool:
        return not self.markup.topics and not self.feed.topics


class TopicEngine:
    """Fetches the markup source then the feed source, merges, picks."""

    def __init__(self, fetcher: Fetcher = None, config: dict = None, rng: random.Random = None):
        self.config = load_config() if config is None else config
        self.fetcher = fetcher or Fetcher()
        self.rng = rng or random.Random()

        source_config = self.config.get("topic_sources", {})
        self._markup_cfg = source_config.get(YahooRealtimeSource.name, {})
        self._feed_cfg = source_config.get(GoogleTrendsSource.name, {})
        self.markup_source = YahooRealtimeSource(self._markup_cfg, fetcher=self.fetcher)
        self.feed_source = GoogleTrendsSource(self._feed_cfg, fetcher=self.fetcher)

    def _run(self, source, limit: int, deadline: float | None) -> SourceResult:
        try:
            topics = source.fetch_topics(limit, deadline=deadline)
        except SourceError as e:
            get_logger().warning("%s fetch failed: %s", source.name, e)
            return SourceResult(source.name, error=e)
        log(f"{source.name}: found {len(topics)} topics")
        return SourceResult(source.name, topics=topics)

    def collect(self, deadline: float | None = None) -> TopicCollection:
        """Run both sources one after the other; failures are recorded, not raised."""
        markup = self._run(
            self.markup_source, self._markup_cfg.get("limit", DEFAULT_LIMIT), deadline
        )
        feed = self._run(
            self.feed_source, self._feed_cfg.get("limit", DEFAULT_LIMIT), deadline
        )
        return TopicCollection(markup=markup, feed=feed)

    def discover(self, top_n: int | None = None, deadline: float | None = None) -> list[Topic]:
        """Collect + merge. Raises NoTopicsError only when both sources came up empty."""
        collection = self.collect(deadline=deadline)
        if collection.empty:
            raise NoTopicsError(
                "no topics from either source; check the network or the page selectors"
            )
        if top_n is None:
            top_n = get_top_n(self.config)
        return merge_and_rank(collection.markup.topics, collection.feed.topics, top_n)

    def pick(self, candidates: list[Topic]) -> str:
        """Choose one title uniformly at random."""
        if not candidates:
            raise NoTopicsError("nothing to pick from")
        return self.rng.choice(candidates).title
