"""Eligibility filter for the latest-articles feed."""

from __future__ import annotations

from collections.abc import Iterable

from models import CorpusEntry

# Section landing pages carry ids like "algorithms/intro" and are never
# surfaced as articles.
# The suffix test subsumes the segment test; both are kept to name the two id forms.
_INTRO_SEGMENT = "/intro"
_INTRO_SUFFIX = "intro"


def usable_description(entry: CorpusEntry) -> str:
    """Return the top-level description, else the front matter one, else ""."""
    if entry.description:
        return entry.description
    return entry.front_matter.description or ""


def is_intro_placeholder(doc_id: str) -> bool:
    return doc_id.endswith(_INTRO_SEGMENT) or doc_id.endswith(_INTRO_SUFFIX)


def is_eligible_entry(entry: CorpusEntry) -> bool:
    """Return True if the entry may appear in the feed.

    An entry qualifies when it has a usable description, is not an intro
    placeholder and is not marked as a draft.
    """
    if not usable_description(entry):
        return False
    if is_intro_placeholder(entry.id):
        return False
    return not entry.front_matter.draft


def filter_eligible_entries(entries: Iterable[CorpusEntry]) -> list[CorpusEntry]:
    """Keep eligible entries, preserving their input order."""
    return [entry for entry in entries if is_eligible_entry(entry)]
