"""Static feed shown when curation yields nothing."""

from __future__ import annotations

from collections.abc import Sequence

from models import CuratedEntry

FALLBACK_ENTRIES: tuple[CuratedEntry, ...] = (
    CuratedEntry(
        title="Write-Ahead Logging (WAL)",
        description=(
            "Write-Ahead Logging (WAL) is a fundamental technique in database systems that "
            "ensures data durability and consistency by recording changes to a log before "
            "applying them to the actual data store."
        ),
        link="/docs/distributed-systems/replication/wal",
        category="Distributed Systems",
        date="",
        reading_time=25,
    ),
    CuratedEntry(
        title="Segmented Log Architecture",
        description=(
            "The Segmented Log architecture addresses scalability limitations in WAL systems "
            "by partitioning logs into bounded segments for better performance and maintenance."
        ),
        link="/docs/distributed-systems/replication/segmented-log",
        category="Distributed Systems",
        date="",
        reading_time=18,
    ),
    CuratedEntry(
        title="Quick Sort Algorithm",
        description=(
            "Quick Sort is one of the most efficient sorting algorithms using divide-and-conquer "
            "strategy to achieve O(n log n) average-case performance."
        ),
        link="/docs/algorithms/sorting/quick-sort",
        category="Algorithms",
        date="",
        reading_time=12,
    ),
)


def entries_or_fallback(
    entries: Sequence[CuratedEntry],
    fallback: Sequence[CuratedEntry] = FALLBACK_ENTRIES,
) -> list[CuratedEntry]:
    """Return the curated entries, or the static fallback when there are none."""
    return list(entries) if entries else list(fallback)
