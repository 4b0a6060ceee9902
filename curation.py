"""Latest-articles curation: snapshot -> filter -> rank -> format."""

from __future__ import annotations

from typing import Any

from filters import filter_eligible_entries
from formatter import DEFAULT_COUNT, format_entries
from models import CuratedEntry, CurationResult
from ranking import rank_by_recency
from snapshot import extract_docs, parse_corpus_entries


def curate(snapshot: Any, count: int = DEFAULT_COUNT) -> CurationResult:
    """Build the latest-articles feed for one docs snapshot.

    Never raises. A missing or misshapen snapshot gives an empty result; an
    unexpected failure gives an empty result carrying the exception so the
    caller can report it.
    """
    try:
        entries = parse_corpus_entries(extract_docs(snapshot))
        eligible = filter_eligible_entries(entries)
        ranked = rank_by_recency(eligible)
        return CurationResult(entries=tuple(format_entries(ranked, count)))
    except Exception as exc:  # any stage failure yields an empty feed
        return CurationResult(error=exc)


def latest_entries(snapshot: Any, count: int = DEFAULT_COUNT) -> list[CuratedEntry]:
    """Plain list view of curate(); [] means "nothing to show"."""
    return list(curate(snapshot, count).entries)
