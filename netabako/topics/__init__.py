"""Trending-topic discovery: Google Trends + Yahoo! realtime, merged."""

from .base import NoTopicsError, SourceError, Topic, TopicSource
from .engine import TopicEngine
from .merge import merge_and_rank

__all__ = ["NoTopicsError", "SourceError", "Topic", "TopicSource", "TopicEngine", "merge_and_rank"]
