"""Presentation formatting: ranked corpus entries -> feed cards."""

from __future__ import annotations

from collections.abc import Sequence

from filters import usable_description
from models import CorpusEntry, CuratedEntry

DEFAULT_COUNT = 3
DEFAULT_READING_TIME = 5


def derive_category(doc_id: str) -> str:
    """Build a display category from the first segment of a doc id.

    "distributed-systems/replication/wal" -> "Distributed Systems". Only the
    first character of each word is upper-cased; the rest keeps its casing.
    """
    group = doc_id.split("/")[0]
    return " ".join(word[:1].upper() + word[1:] for word in group.split("-"))


def format_reading_time(minutes: int) -> str:
    return f"{minutes} min read"


def _reading_time(entry: CorpusEntry) -> int:
    value = entry.front_matter.reading_time
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value
    return DEFAULT_READING_TIME


def to_curated_entry(entry: CorpusEntry) -> CuratedEntry:
    return CuratedEntry(
        title=entry.title,
        description=usable_description(entry),
        link=entry.permalink,
        category=derive_category(entry.id),
        date=entry.front_matter.last_update_date or "",
        reading_time=_reading_time(entry),
    )


def format_entries(entries: Sequence[CorpusEntry], count: int = DEFAULT_COUNT) -> list[CuratedEntry]:
    """Truncate ranked entries to `count` and map them to CuratedEntry values.

    A negative count is clamped to 0.
    """
    count = max(count, 0)
    return [to_curated_entry(entry) for entry in entries[:count]]
