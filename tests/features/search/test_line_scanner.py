"""Tests for the per-file line scanner."""

from collections.abc import Callable
from pathlib import Path

from lgrep.features.search import LineScanner
from lgrep.features.search.usecases import fold_case, line_matches

from search_doubles import CollectingDiagnostics


def test_line_matches_is_case_insensitive_substring() -> None:
    assert line_matches("Hello world", fold_case("hello"))
    assert line_matches("abcdef", fold_case("CDE"))
    assert not line_matches("abc", fold_case("abcd"))


def test_fold_case_maps_one_character_at_a_time() -> None:
    assert fold_case("straße") == "STRAßE"
    assert fold_case("ﬁle") == "ﬁLE"
    assert fold_case("Ärger ÉTÉ") == fold_case("ärger été")
    assert len(fold_case("İstanbul")) == len("İstanbul")


def test_expanding_case_mappings_do_not_match(
    write_file: Callable[[str, str], Path], diagnostics: CollectingDiagnostics
) -> None:
    """Sharp s never equals "ss" and the "ﬁ" ligature never equals "fi"."""

    path = write_file("a.txt", "STRASSE\nfile\nStraße\n")
    scanner = LineScanner(diagnostics)

    assert list(scanner.scan(path, "straße")) == ["Straße"]
    assert list(scanner.scan(path, "ﬁle")) == []
    assert list(scanner.scan(path, "FILE")) == ["file"]


def test_scan_yields_matching_lines_in_order(
    write_file: Callable[[str, str], Path], diagnostics: CollectingDiagnostics
) -> None:
    """Matching lines come back in file order without their terminators."""

    path = write_file("a.txt", "first Hello\nnothing here\nsecond HELLO\r\nhello again")
    scanner = LineScanner(diagnostics)

    assert list(scanner.scan(path, "hello")) == ["first Hello", "second HELLO", "hello again"]
    assert diagnostics.errors == []


def test_scan_strips_byte_order_mark(tmp_path: Path, diagnostics: CollectingDiagnostics) -> None:
    path = tmp_path / "bom.txt"
    _ = path.write_bytes("\ufeffhello at start\n".encode("utf-8"))

    assert list(LineScanner(diagnostics).scan(path, "hello")) == ["hello at start"]


def test_scan_replaces_undecodable_bytes_by_default(
    tmp_path: Path, diagnostics: CollectingDiagnostics
) -> None:
    """Best-effort reads keep going past invalid bytes."""

    path = tmp_path / "mixed.txt"
    _ = path.write_bytes(b"needle \xff here\nplain\n")

    lines = list(LineScanner(diagnostics).scan(path, "needle"))

    assert len(lines) == 1
    assert lines[0].startswith("needle ")
    assert diagnostics.errors == []


def test_missing_file_is_reported_not_raised(
    tmp_path: Path, diagnostics: CollectingDiagnostics
) -> None:
    missing = tmp_path / "gone.txt"

    assert list(LineScanner(diagnostics).scan(missing, "x")) == []
    assert len(diagnostics.errors) == 1
    assert diagnostics.errors[0].path == missing
    assert isinstance(diagnostics.errors[0].cause, FileNotFoundError)


def test_strict_decoding_failure_ends_scan_with_diagnostic(
    tmp_path: Path, diagnostics: CollectingDiagnostics
) -> None:
    path = tmp_path / "binary.txt"
    _ = path.write_bytes(b"match\n\xff\xfe\xfd match\nmatch\n")
    scanner = LineScanner(diagnostics, encoding="utf-8", errors="strict")

    _ = list(scanner.scan(path, "match"))

    assert len(diagnostics.errors) == 1
    assert isinstance(diagnostics.errors[0].cause, UnicodeDecodeError)


def test_should_stop_ends_scan_early(
    write_file: Callable[[str, str], Path], diagnostics: CollectingDiagnostics
) -> None:
    """The stop predicate is polled before each line."""

    path = write_file("many.txt", "hit 1\nhit 2\nhit 3\n")
    calls = {"count": 0}

    def stop_after_first_line() -> bool:
        calls["count"] += 1
        return calls["count"] > 1

    lines = list(LineScanner(diagnostics).scan(path, "hit", stop_after_first_line))

    assert lines == ["hit 1"]


def test_closing_the_iterator_releases_the_file(
    write_file: Callable[[str, str], Path], diagnostics: CollectingDiagnostics
) -> None:
    path = write_file("a.txt", "hit\nhit\n")
    lines = LineScanner(diagnostics).scan(path, "hit")

    assert next(lines) == "hit"
    lines.close()

    assert list(lines) == []
    assert diagnostics.errors == []
