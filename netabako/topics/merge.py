"""Merge the two ranked lists into one."""

from dataclasses import dataclass, field

from ..log import get_logger
from .base import SOURCE_MARKUP, SOURCE_MIXED, Topic, normalize_title

# Realtime-search buzz counts a little more than daily search volume
MARKUP_WEIGHT = 3
DEFAULT_WEIGHT = 2

NOTE_SEPARATOR = " / "


@dataclass
class _Accumulator:
    title: str
    best: Topic
    notes: list[str] = field(default_factory=list)
    score: int = 0

    def add(self, topic: Topic):
        self.score += MARKUP_WEIGHT if topic.source == SOURCE_MARKUP else DEFAULT_WEIGHT
        if topic.note:
            self.notes.append(topic.note)
        if topic.rank > 0 and (self.best.rank <= 0 or topic.rank < self.best.rank):
            self.best = topic


def _sort_key(topic: Topic):
    # Unranked last, then best rank, then title
    return (topic.rank <= 0, topic.rank, topic.title)


def merge_and_rank(markup: list[Topic], feed: list[Topic], top_n: int = 0) -> list[Topic]:
    """Fold both lists by normalized title and order the result.

    Each merged topic keeps the first-seen title, every note, and the best
    rank any contributor had. Ordering uses rank and title only; the
    per-title score is computed but not used for sorting.
    """
    acc: dict[str, _Accumulator] = {}

    for topic in [*markup, *feed]:
        key = normalize_title(topic.title)
        if not key:
            continue
        if key not in acc:
            acc[key] = _Accumulator(title=topic.title, best=topic)
        acc[key].add(topic)

    logger = get_logger()
    merged = []
    for a in acc.values():
        logger.debug("merge: %s score=%d best_rank=%d", a.title, a.score, a.best.rank)
        merged.append(Topic(
            title=a.title,
            source=SOURCE_MIXED,
            note=NOTE_SEPARATOR.join(a.notes),
            rank=a.best.rank,
        ))

    merged.sort(key=_sort_key)

    if top_n > 0:
        return merged[:top_n]
    return merged
