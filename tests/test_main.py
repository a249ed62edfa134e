"""Tests for the package entry points."""

from pytest_mock import MockerFixture


def test_ui_cli_exposes_main() -> None:
    from lgrep.ui.cli import main

    assert callable(main)


def test_dunder_main_exits_with_cli_code(mocker: MockerFixture) -> None:
    import runpy

    _ = mocker.patch("lgrep.ui.cli.main", return_value=3)
    exit_call = mocker.patch("sys.exit")

    _ = runpy.run_module("lgrep.__main__", run_name="__main__")

    exit_call.assert_called_once_with(3)
