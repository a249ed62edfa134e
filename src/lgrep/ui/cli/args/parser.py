"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from lgrep.config.config import Config
from lgrep.config.settings import resolve_settings
from lgrep.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from lgrep.ui.cli.args.options import SearchArgs


def _colon_value(raw: str) -> str:
    """Accept the ``-t:N`` / ``-d:PATH`` spelling by dropping one leading colon."""

    return raw[1:] if raw.startswith(":") else raw


def _limit_value(raw: str) -> int:
    value = _colon_value(raw)
    try:
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid limit: {value!r}") from None


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="lgrep",
            description=(
                "lgrep - search files for lines containing a term (case-insensitive).\n"
                "Run without a search term to be prompted for every parameter."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        _ = parser.add_argument(
            "search_term",
            nargs="?",
            help="Text to look for in each line",
            metavar="TERM",
        )
        _ = parser.add_argument(
            "file_pattern",
            nargs="?",
            help="File name glob, e.g. '*.log' (default from config, normally *.txt)",
            metavar="PATTERN",
        )
        _ = parser.add_argument(
            "-r",
            "--recursive",
            action="store_true",
            help="Search subdirectories too",
        )
        _ = parser.add_argument(
            "-t",
            "--limit",
            type=_limit_value,
            help="Stop after N matches (also accepted as -t:N)",
            metavar="N",
        )
        _ = parser.add_argument(
            "-d",
            "--directory",
            type=_colon_value,
            help="Directory to search (default: current directory; also -d:DIR)",
            metavar="DIR",
        )
        _ = parser.add_argument(
            "--once",
            action="store_true",
            help="Exit after one search instead of offering to search again",
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            help="Read configuration from this TOML file",
            metavar="CONFIG_FILE",
        )
        _ = parser.add_argument(
            "--log-file",
            nargs="?",
            const=str(DEFAULT_LOG_FILE),
            help="Also write a debug log to this file (default location when no path is given)",
            metavar="LOG_FILE",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed search information",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except matches and errors",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> SearchArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            SearchArgs: Processed command line arguments.

        Raises:
            SystemExit: If the limit is not a positive integer or parsing fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load(Path(parsed_args.config) if parsed_args.config else None)
        log_file_path = (
            Path(parsed_args.log_file) if parsed_args.log_file else configuration.log_file
        )
        _ = setup_logger(log_file=log_file_path, console_level=log_level)
        settings = resolve_settings(configuration)

        limit: int | None = parsed_args.limit
        if limit is not None and limit <= 0:
            logger.error("Limit must be a positive integer; received %s", limit)
            sys.exit(1)

        directory = Path.cwd()
        if parsed_args.directory:
            candidate = Path(parsed_args.directory)
            if candidate.is_dir():
                directory = candidate
            else:
                logger.warning("Invalid directory: %s. Using current directory.", candidate)

        return SearchArgs(
            search_term=parsed_args.search_term,
            file_pattern=parsed_args.file_pattern,
            recursive=parsed_args.recursive,
            limit=limit,
            directory=directory,
            once=parsed_args.once,
            quiet=parsed_args.quiet,
            settings=settings,
        )


__all__ = ["ArgumentParser"]
