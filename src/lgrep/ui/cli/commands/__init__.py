"""Command execution package for CLI."""

from lgrep.ui.cli.commands.search import SearchCommand, cancel_on_key

__all__ = ["SearchCommand", "cancel_on_key"]
