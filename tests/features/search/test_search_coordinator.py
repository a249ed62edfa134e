"""Tests for the concurrent search coordinator."""

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from lgrep.features.search import (
    CancellationSignal,
    EmptySearchTermError,
    SearchCoordinator,
    SearchOutcome,
)

from search_doubles import CancellingSink, CollectingDiagnostics, CollectingSink


@pytest.fixture
def corpus(tmp_path: Path) -> list[Path]:
    """Ten files with five matching lines each, interleaved with noise."""

    paths: list[Path] = []
    for file_index in range(10):
        lines: list[str] = []
        for line_index in range(5):
            lines.append(f"Needle {file_index}-{line_index}")
            lines.append("haystack")
        path = tmp_path / f"f{file_index:02d}.txt"
        _ = path.write_text("\n".join(lines), encoding="utf-8")
        paths.append(path)
    return paths


def test_counts_every_match_without_limit(
    corpus: list[Path], sink: CollectingSink, diagnostics: CollectingDiagnostics
) -> None:
    summary = SearchCoordinator(diagnostics, max_workers=4).run(
        corpus, "needle", None, CancellationSignal(), sink
    )

    assert summary.total_matches == 50
    assert len(sink.events) == 50
    assert not summary.limit_reached
    assert not summary.cancelled
    assert summary.total_files == 10
    assert summary.outcome is SearchOutcome.COMPLETED


@pytest.mark.parametrize("limit", [1, 7, 49])
def test_limit_caps_emitted_matches(
    corpus: list[Path],
    sink: CollectingSink,
    diagnostics: CollectingDiagnostics,
    limit: int,
) -> None:
    """Never more than ``limit`` matches, and the flag is raised when more existed."""

    summary = SearchCoordinator(diagnostics, max_workers=8).run(
        corpus, "needle", limit, CancellationSignal(), sink
    )

    assert summary.total_matches == limit
    assert len(sink.events) == limit
    assert summary.limit_reached
    assert summary.outcome is SearchOutcome.LIMIT_REACHED


def test_limit_equal_to_match_total_is_not_reached(
    corpus: list[Path], sink: CollectingSink, diagnostics: CollectingDiagnostics
) -> None:
    summary = SearchCoordinator(diagnostics, max_workers=8).run(
        corpus, "needle", 50, CancellationSignal(), sink
    )

    assert summary.total_matches == 50
    assert not summary.limit_reached


def test_count_is_independent_of_concurrency_degree(
    corpus: list[Path], diagnostics: CollectingDiagnostics
) -> None:
    serial_sink = CollectingSink()
    parallel_sink = CollectingSink()

    serial = SearchCoordinator(diagnostics, max_workers=1).run(
        corpus, "NEEDLE", None, CancellationSignal(), serial_sink
    )
    parallel = SearchCoordinator(diagnostics, max_workers=8).run(
        corpus, "NEEDLE", None, CancellationSignal(), parallel_sink
    )

    assert serial.total_matches == parallel.total_matches == 50
    assert sorted(serial_sink.events, key=str) == sorted(parallel_sink.events, key=str)


def test_serial_run_preserves_file_and_line_order(
    corpus: list[Path], sink: CollectingSink, diagnostics: CollectingDiagnostics
) -> None:
    _ = SearchCoordinator(diagnostics, max_workers=1).run(
        corpus[:2], "needle", None, CancellationSignal(), sink
    )

    assert [event.line for event in sink.events] == [
        f"Needle {file_index}-{line_index}" for file_index in range(2) for line_index in range(5)
    ]


def test_cancellation_before_start_scans_nothing(
    corpus: list[Path], sink: CollectingSink, diagnostics: CollectingDiagnostics
) -> None:
    signal = CancellationSignal()
    _ = signal.trigger()

    summary = SearchCoordinator(diagnostics).run(corpus, "needle", None, signal, sink)

    assert summary.total_matches == 0
    assert summary.cancelled
    assert sink.events == []
    assert summary.outcome is SearchOutcome.CANCELLED


def test_cancellation_mid_search_stops_promptly(
    corpus: list[Path], diagnostics: CollectingDiagnostics
) -> None:
    """With one worker, cancelling on the first match leaves exactly one match."""

    signal = CancellationSignal()
    cancelling_sink = CancellingSink(signal)

    summary = SearchCoordinator(diagnostics, max_workers=1).run(
        corpus, "needle", None, signal, cancelling_sink
    )

    assert summary.cancelled
    assert summary.total_matches == 1
    assert len(cancelling_sink.events) == 1


def test_signal_is_inert_after_the_search(
    corpus: list[Path], sink: CollectingSink, diagnostics: CollectingDiagnostics
) -> None:
    signal = CancellationSignal()

    summary = SearchCoordinator(diagnostics).run(corpus, "needle", None, signal, sink)

    assert signal.trigger() is False
    assert not summary.cancelled


def test_unreadable_file_is_isolated(
    write_file: Callable[[str, str], Path],
    tmp_path: Path,
    sink: CollectingSink,
    diagnostics: CollectingDiagnostics,
) -> None:
    """A file that cannot be read yields a diagnostic; the rest still counts."""

    readable = write_file("a.txt", "match one\nno\nMATCH two\n")
    unreadable = tmp_path / "b.txt"

    summary = SearchCoordinator(diagnostics, max_workers=2).run(
        [readable, unreadable], "match", None, CancellationSignal(), sink
    )

    assert summary.total_matches == 2
    assert summary.failed_files == 1
    assert [error.path for error in diagnostics.errors] == [unreadable]


def test_file_failing_partway_keeps_earlier_matches(
    tmp_path: Path, sink: CollectingSink, diagnostics: CollectingDiagnostics
) -> None:
    # Valid text large enough to be decoded before the bad bytes are reached
    good_prefix = ("match line\n" * 2000).encode("utf-8")
    path = tmp_path / "broken.txt"
    _ = path.write_bytes(good_prefix + b"\xff\xfe\xfd match\n")

    summary = SearchCoordinator(diagnostics, encoding="utf-8", encoding_errors="strict").run(
        [path], "match", None, CancellationSignal(), sink
    )

    assert summary.failed_files == 1
    assert len(diagnostics.errors) == 1
    assert summary.total_matches == len(sink.events)
    assert summary.total_matches < 2001


def test_empty_candidate_list(sink: CollectingSink, diagnostics: CollectingDiagnostics) -> None:
    summary = SearchCoordinator(diagnostics).run([], "needle", None, CancellationSignal(), sink)

    assert summary.total_matches == 0
    assert not summary.limit_reached
    assert not summary.cancelled


def test_empty_search_term_is_rejected(
    corpus: list[Path], sink: CollectingSink, diagnostics: CollectingDiagnostics
) -> None:
    with pytest.raises(EmptySearchTermError):
        _ = SearchCoordinator(diagnostics).run(corpus, "", None, CancellationSignal(), sink)

    assert sink.events == []


def test_custom_executor_factory_is_used(
    corpus: list[Path],
    sink: CollectingSink,
    diagnostics: CollectingDiagnostics,
    mocker: MockerFixture,
) -> None:
    factory = mocker.Mock(side_effect=lambda: ThreadPoolExecutor(max_workers=2))

    summary = SearchCoordinator(diagnostics, executor_factory=factory).run(
        corpus, "needle", None, CancellationSignal(), sink
    )

    factory.assert_called_once_with()
    assert summary.total_matches == 50
