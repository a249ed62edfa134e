"""Tests for ``SearchRichHandler`` rendering of search events."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any

from rich.console import Console
from rich.text import Text

from lgrep.platform.logging import SearchRichHandler


def _make_handler() -> SearchRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return SearchRichHandler(console=console)


def _build_record(msg: str = "", **extras: Any) -> logging.LogRecord:
    record = logging.LogRecord(
        name="lgrep",
        level=logging.INFO,
        pathname="test",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_file_error_truncates_long_paths() -> None:
    handler = _make_handler()
    record = _build_record(
        search_event="search.file.error",
        source_path="/home/user/projects/logs/2024/archive/march/server.txt",
        error_message="Permission denied",
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)

    plain = rendered.plain
    assert "Error processing …/2024/archive/march/server.txt" in plain
    assert "(Permission denied)" in plain


def test_file_error_relativizes_to_base() -> None:
    handler = _make_handler()
    record = _build_record(
        search_event="search.file.error",
        source_path="/data/corpus/sub/notes.txt",
        source_base_path="/data/corpus",
        error_message="boom",
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert "Error processing sub/notes.txt (boom)" in rendered.plain


def test_start_event_lists_details_and_directory() -> None:
    handler = _make_handler()
    record = _build_record(
        search_event="search.start",
        search_term="needle",
        file_pattern="*.log",
        total_files=12,
        recursive=True,
        limit=5,
        directory="/srv/logs",
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)

    plain = rendered.plain
    assert "Searching for 'needle' [pattern=*.log, files=12, recursive, limit=5]" in plain
    assert plain.endswith("@ /srv/logs")


def test_complete_event_renders_metrics() -> None:
    handler = _make_handler()
    record = _build_record(
        search_event="search.complete",
        total_matches=4,
        scanned=3,
        abandoned=0,
        failed=1,
        duration_seconds=0.5,
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert "Search complete [matches=4, scanned=3, abandoned=0, failed=1, duration=0.50s]" in rendered.plain


def test_other_events_render_the_message() -> None:
    handler = _make_handler()
    record = _build_record(search_event="search.cancel.requested")

    rendered = handler.render_message(record, "Cancellation requested.")
    assert isinstance(rendered, Text)
    assert rendered.plain.endswith("Cancellation requested.")


def test_plain_records_use_default_rendering() -> None:
    handler = _make_handler()
    record = _build_record(msg="plain message")

    rendered = handler.render_message(record, "plain message")
    assert isinstance(rendered, Text)
    assert rendered.plain == "plain message"
