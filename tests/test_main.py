"""Tests for the CLI entrypoint (main.run / main.main)."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest

import main
from fallback import FALLBACK_ENTRIES, entries_or_fallback
from models import CuratedEntry, CurationResult


def _write_snapshot(tmp_path, docs: list[dict]) -> str:
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps({"versions": [{"docs": docs}]}), encoding="utf-8")
    return str(path)


def _doc(doc_id: str, date: str | None = None) -> dict:
    return {
        "id": doc_id,
        "title": f"Title {doc_id}",
        "description": f"About {doc_id}",
        "permalink": f"/docs/{doc_id}",
        "frontMatter": {"last_update": {"date": date}} if date else {},
    }


def test_run_prints_json_feed(tmp_path, capsys) -> None:
    path = _write_snapshot(tmp_path, [
        _doc("algorithms/sorting/merge-sort"),
        _doc("distributed-systems/replication/wal", date="2026-01-10"),
    ])

    entries = main.run(snapshot_path=path, count=3, output_format="json", use_fallback=True)

    printed = json.loads(capsys.readouterr().out)
    assert [e["link"] for e in printed] == [
        "/docs/distributed-systems/replication/wal",
        "/docs/algorithms/sorting/merge-sort",
    ]
    assert printed[0]["readingTime"] == 5
    assert len(entries) == 2


def test_run_prints_text_cards(tmp_path, capsys) -> None:
    path = _write_snapshot(tmp_path, [_doc("distributed-systems/replication/wal")])

    main.run(snapshot_path=path, count=1, output_format="text", use_fallback=True)

    out = capsys.readouterr().out
    assert "[Distributed Systems] Title distributed-systems/replication/wal" in out
    assert "5 min read | /docs/distributed-systems/replication/wal" in out


def test_run_uses_fallback_when_feed_is_empty(tmp_path, capsys) -> None:
    path = _write_snapshot(tmp_path, [_doc("algorithms/intro")])

    entries = main.run(snapshot_path=path, count=3, output_format="json", use_fallback=True)

    assert entries == list(FALLBACK_ENTRIES)
    printed = json.loads(capsys.readouterr().out)
    assert printed[0]["title"] == "Write-Ahead Logging (WAL)"


def test_run_without_fallback_prints_empty_json(tmp_path, capsys) -> None:
    path = _write_snapshot(tmp_path, [])

    entries = main.run(snapshot_path=path, count=3, output_format="json", use_fallback=False)

    assert entries == []
    assert json.loads(capsys.readouterr().out) == []


def test_run_treats_unreadable_snapshot_as_absent(tmp_path, capsys) -> None:
    broken = tmp_path / "broken.json"
    broken.write_text("{oops", encoding="utf-8")

    entries = main.run(snapshot_path=str(broken), count=3, output_format="json", use_fallback=False)

    assert entries == []


def test_run_with_missing_snapshot_falls_back(tmp_path) -> None:
    entries = main.run(
        snapshot_path=str(tmp_path / "nope.json"),
        count=3,
        output_format="json",
        use_fallback=True,
    )
    assert entries == list(FALLBACK_ENTRIES)


def test_run_logs_absorbed_curation_error(tmp_path, caplog) -> None:
    path = _write_snapshot(tmp_path, [_doc("a/one")])
    failure = CurationResult(error=RuntimeError("boom"))

    with patch("main.curate", return_value=failure), caplog.at_level("WARNING"):
        entries = main.run(snapshot_path=path, count=3, output_format="json", use_fallback=False)

    assert entries == []
    assert "Curation failed" in caplog.text


def test_count_defaults_from_environment() -> None:
    with patch.dict("os.environ", {"LATEST_DOCS_COUNT": "5", "DOCS_SNAPSHOT_PATH": "docs.json"}):
        args = main.parse_args([])

    assert args.count == 5
    assert args.snapshot == "docs.json"
    assert args.format == "text"
    assert args.no_fallback is False


def test_main_wires_arguments_to_run(tmp_path) -> None:
    path = _write_snapshot(tmp_path, [])

    with patch("main.load_dotenv"), patch("main.run") as mock_run:
        main.main(["--snapshot", path, "--count", "2", "--format", "json", "--no-fallback"])

    mock_run.assert_called_once_with(
        snapshot_path=path,
        count=2,
        output_format="json",
        use_fallback=False,
    )


def test_invalid_count_is_rejected_by_argparse() -> None:
    with pytest.raises(SystemExit):
        main.parse_args(["--count", "many"])


def test_entries_or_fallback_keeps_curated_entries() -> None:
    curated = [CuratedEntry("T", "D", "/docs/t", "Cat", "", 5)]
    assert entries_or_fallback(curated) == curated
    assert entries_or_fallback([]) == list(FALLBACK_ENTRIES)


def test_run_treats_non_utf8_snapshot_as_absent(tmp_path) -> None:
    binary = tmp_path / "binary.json"
    binary.write_bytes(b'{"versions": [{"docs": [{"id": "\xff"}]}]}')

    entries = main.run(snapshot_path=str(binary), count=3, output_format="json", use_fallback=False)

    assert entries == []


def test_non_integer_count_from_environment_is_an_argparse_error(capsys) -> None:
    with patch.dict("os.environ", {"LATEST_DOCS_COUNT": "lots"}), pytest.raises(SystemExit):
        main.parse_args([])

    assert "--count" in capsys.readouterr().err


def test_explicit_count_overrides_invalid_environment_default() -> None:
    with patch.dict("os.environ", {"LATEST_DOCS_COUNT": "lots"}):
        args = main.parse_args(["--count", "4"])

    assert args.count == 4


@pytest.mark.parametrize("name, expected", [
    (None, "INFO"),
    ("", "INFO"),
    ("debug", "DEBUG"),
    (" warning ", "WARNING"),
    ("chatty", "INFO"),
])
def test_resolve_log_level(name, expected) -> None:
    assert main.resolve_log_level(name) == expected


def test_main_survives_unknown_log_level(tmp_path) -> None:
    with patch.dict("os.environ", {"LOG_LEVEL": "chatty"}), \
         patch("main.load_dotenv"), \
         patch("main.run") as mock_run:
        main.main(["--snapshot", str(tmp_path / "docs.json")])

    mock_run.assert_called_once()
