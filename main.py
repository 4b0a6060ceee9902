"""CLI entrypoint for the latest-articles feed."""

from __future__ import annotations

import argparse
import json
import logging
import os
from typing import Any

from dotenv import load_dotenv

from curation import curate
from fallback import entries_or_fallback
from formatter import DEFAULT_COUNT, format_reading_time
from models import CuratedEntry
from snapshot import load_snapshot

LOGGER = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line flags."""
    parser = argparse.ArgumentParser(description="Print the latest articles from a docs snapshot")
    parser.add_argument(
        "--snapshot",
        default=os.getenv("DOCS_SNAPSHOT_PATH"),
        help="Path to the docs plugin snapshot JSON ('-' for stdin). Defaults to DOCS_SNAPSHOT_PATH.",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=os.getenv("LATEST_DOCS_COUNT", str(DEFAULT_COUNT)),
        help="Number of articles to show (LATEST_DOCS_COUNT, default 3)",
    )
    parser.add_argument("--format", choices=["text", "json"], default="text", help="Output format")
    parser.add_argument(
        "--no-fallback",
        action="store_true",
        help="Print nothing instead of the static fallback list when no article qualifies",
    )
    return parser.parse_args(argv)


def resolve_log_level(name: str | None) -> str:
    """Return a known logging level name, INFO when unset or unknown."""
    level = (name or "INFO").strip().upper()
    return level if level in logging.getLevelNamesMapping() else "INFO"


def read_snapshot(path: str | None) -> Any:
    """Load the snapshot file, treating any read or decode failure as no snapshot."""
    if not path:
        LOGGER.warning("No snapshot path given; curating an empty snapshot")
        return None

    try:
        return load_snapshot(path)
    except (OSError, ValueError) as exc:
        LOGGER.warning("Could not load snapshot from %s: %s", path, exc)
        return None


def render_text(entries: list[CuratedEntry]) -> str:
    cards = []
    for entry in entries:
        cards.append(
            "\n".join([
                f"[{entry.category}] {entry.title}",
                f"  {entry.description}",
                f"  {format_reading_time(entry.reading_time)} | {entry.link}",
            ])
        )
    return "\n\n".join(cards)


def run(snapshot_path: str | None, count: int, output_format: str, use_fallback: bool) -> list[CuratedEntry]:
    """Curate one snapshot and print the resulting feed."""
    result = curate(read_snapshot(snapshot_path), count)
    if result.error is not None:
        LOGGER.warning("Curation failed, feed is empty: %s", result.error)

    entries = list(result.entries)
    LOGGER.info("Curated %s latest articles (requested=%s)", len(entries), count)

    if use_fallback and not entries:
        entries = entries_or_fallback(entries)
        LOGGER.info("Using %s fallback articles", len(entries))

    if output_format == "json":
        print(json.dumps([entry.to_dict() for entry in entries], indent=2, ensure_ascii=False))
    elif entries:
        print(render_text(entries))

    return entries


def main(argv: list[str] | None = None) -> None:
    """Initialize config and print the feed."""
    load_dotenv()
    log_level = os.getenv("LOG_LEVEL")
    logging.basicConfig(
        level=resolve_log_level(log_level),
        format="%(asctime)s %(levelname)s %(message)s",
    )
    if log_level and resolve_log_level(log_level) != log_level.strip().upper():
        LOGGER.warning("Unknown LOG_LEVEL=%s, using INFO", log_level)
    args = parse_args(argv)
    run(
        snapshot_path=args.snapshot,
        count=args.count,
        output_format=args.format,
        use_fallback=not args.no_fallback,
    )


if __name__ == "__main__":
    main()
