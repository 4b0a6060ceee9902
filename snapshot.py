"""Docs snapshot boundary: raw plugin payload -> CorpusEntry records."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from models import CorpusEntry, FrontMatter

LOGGER = logging.getLogger(__name__)


def load_snapshot(path: str | Path) -> Any:
    """Read a docs snapshot JSON file; "-" reads stdin.

    Raises OSError, or ValueError (JSONDecodeError, UnicodeDecodeError) for
    content that is not UTF-8 JSON; callers decide how to recover.
    """
    if str(path) == "-":
        return json.load(sys.stdin)

    with Path(path).open(encoding="utf-8") as fh:
        return json.load(fh)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def extract_docs(payload: Any) -> Sequence[Any]:
    """Return versions[0].docs from a snapshot, or [] for any other shape."""
    if not isinstance(payload, Mapping):
        return []

    versions = payload.get("versions")
    if not _is_sequence(versions) or not versions:
        return []

    current = versions[0]
    if not isinstance(current, Mapping):
        return []

    docs = current.get("docs")
    return docs if _is_sequence(docs) else []


def parse_corpus_entries(docs: Sequence[Any]) -> list[CorpusEntry]:
    """Normalize raw doc metadata into CorpusEntry objects.

    Docs that are not objects or have no string id are skipped. Optional
    fields of the wrong type fall back to their defaults.
    """
    parsed: list[CorpusEntry] = []
    skipped = 0
    for item in docs:
        if not isinstance(item, Mapping):
            skipped += 1
            continue

        doc_id = _as_str(item.get("id"))
        if not doc_id:
            skipped += 1
            continue

        parsed.append(
            CorpusEntry(
                id=doc_id,
                title=_as_str(item.get("title")) or "",
                permalink=_as_str(item.get("permalink")) or "",
                description=_as_str(item.get("description")),
                front_matter=_parse_front_matter(item.get("frontMatter")),
            )
        )

    if skipped:
        LOGGER.debug("Snapshot: skipped %s malformed docs out of %s", skipped, len(docs))
    return parsed


def _parse_front_matter(raw: Any) -> FrontMatter:
    if not isinstance(raw, Mapping):
        return FrontMatter()

    keywords = raw.get("keywords")
    reading_time = raw.get("reading_time")
    last_update = raw.get("last_update")
    last_update_date = last_update.get("date") if isinstance(last_update, Mapping) else None

    return FrontMatter(
        description=_as_str(raw.get("description")),
        keywords=tuple(k for k in keywords if isinstance(k, str)) if _is_sequence(keywords) else (),
        draft=bool(raw.get("draft")),
        reading_time=reading_time if isinstance(reading_time, int) and not isinstance(reading_time, bool) else None,
        last_update_date=_as_str(last_update_date),
    )


def _as_str(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None
