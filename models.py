"""Shared typed models for the curation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class FrontMatter:
    """Front matter fields the curation stages care about."""

    description: str | None = None
    keywords: tuple[str, ...] = ()
    draft: bool = False
    reading_time: int | None = None
    last_update_date: str | None = None


@dataclass(frozen=True, slots=True)
class CorpusEntry:
    """Normalized doc metadata record supplied by the docs snapshot."""

    id: str
    title: str
    permalink: str
    description: str | None = None
    front_matter: FrontMatter = field(default_factory=FrontMatter)


@dataclass(frozen=True, slots=True)
class CuratedEntry:
    """One card of the latest-articles feed."""

    title: str
    description: str
    link: str
    category: str
    date: str
    reading_time: int

    def to_dict(self) -> dict[str, str | int]:
        return {
            "title": self.title,
            "description": self.description,
            "link": self.link,
            "category": self.category,
            "date": self.date,
            "readingTime": self.reading_time,
        }


@dataclass(frozen=True, slots=True)
class CurationResult:
    """Outcome of one curation call.

    `error` is only set when an unexpected exception was absorbed. An empty
    feed means "nothing to show" whatever the cause.
    """

    entries: tuple[CuratedEntry, ...] = ()
    error: Exception | None = None

    @property
    def is_empty(self) -> bool:
        return not self.entries
