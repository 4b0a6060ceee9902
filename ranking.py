"""Recency ranking for eligible corpus entries."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime

from models import CorpusEntry

# Ordering date for entries without a usable last_update.date; sorts them last.
EPOCH_SENTINEL = date(1970, 1, 1)


def parse_update_date(raw: object) -> date:
    """Parse a front matter last_update.date into a calendar date.

    Accepts ISO-8601 dates and date-times (a trailing "Z" included). Missing,
    non-string or unparsable values map to EPOCH_SENTINEL instead of raising.
    """
    if not isinstance(raw, str) or not raw.strip():
        return EPOCH_SENTINEL

    value = raw.strip()
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        return EPOCH_SENTINEL


def rank_by_recency(entries: Sequence[CorpusEntry]) -> list[CorpusEntry]:
    """Order entries newest-first by last_update.date.

    The input position is part of the sort key, so entries with equal or
    missing dates keep their relative order.
    """
    keyed = [
        (-parse_update_date(entry.front_matter.last_update_date).toordinal(), index, entry)
        for index, entry in enumerate(entries)
    ]
    keyed.sort(key=lambda item: (item[0], item[1]))
    return [entry for _, _, entry in keyed]
