"""Command line interface package."""

from lgrep.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
