"""Command line argument handling package."""

from lgrep.ui.cli.args.options import SearchArgs
from lgrep.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "SearchArgs"]
