"""Topic dataclass, TopicSource ABC, and source errors."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

SOURCE_FEED = "google_trends"
SOURCE_MARKUP = "yahoo_realtime"
SOURCE_MIXED = "mixed"


def normalize_title(title: str) -> str:
    """Merge/dedupe key: whitespace-trimmed, case-folded title."""
    return title.strip().lower()


@dataclass(frozen=True)
class Topic:
    """A trending topic as reported by one source (or merged from several)."""
    title: str
    source: str  # SOURCE_FEED, SOURCE_MARKUP or SOURCE_MIXED
    note: str = ""  # e.g. search-volume hint
    rank: int = 0  # 1-based position in the originating list; 0 = unranked

    @property
    def key(self) -> str:
        return normalize_title(self.title)


class SourceError(Exception):
    """A topic source could not produce any topics."""


class TransportError(SourceError):
    """Network, DNS, timeout or non-200 status while reaching a source."""


class FormatError(SourceError):
    """The response arrived but did not look like what the source expects."""


class StructureChangedError(SourceError):
    """The page was fetched but the selector matched nothing usable."""


class NoTopicsError(Exception):
    """No source yielded any topic."""


class TopicSource(ABC):
    """Abstract base class for topic sources."""

    name: str = "unknown"

    @abstractmethod
    def fetch_topics(self, limit: int = 10, deadline: float | None = None) -> list[Topic]:
        """Fetch trending topics from this source.

        Raises SourceError when nothing usable could be fetched.
        """
        ...
