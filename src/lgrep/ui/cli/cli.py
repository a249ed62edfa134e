"""Command line interface for lgrep."""

from collections.abc import Callable
from typing import final

from lgrep.features.search import DirectoryError, SearchRequest
from lgrep.platform.logging import logger
from lgrep.ui.cli.args import ArgumentParser, SearchArgs
from lgrep.ui.cli.commands import SearchCommand
from lgrep.ui.cli.prompts import SearchPrompter


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(
        args_list: list[str] | None = None,
        *,
        prompter_factory: Callable[[SearchArgs], SearchPrompter] | None = None,
        command_factory: Callable[[SearchRequest, SearchArgs], SearchCommand] | None = None,
    ) -> int:
        """Process command line arguments and run the search loop.

        Values given on the command line drive the first search only; each
        further search is prompted for.

        Args:
            args_list: List of command line arguments (for testing).
            prompter_factory: Override for the interactive prompter.
            command_factory: Override for the per-search command.

        Returns:
            int: Process exit code. 0 on success, 1 when the last search
            failed or no search term was given, 130 on Ctrl+C.
        """
        make_command = command_factory or CommandProcessor._default_command
        exit_code = 0
        try:
            args = ArgumentParser.process_args(args_list)
            prompter = (
                prompter_factory(args)
                if prompter_factory
                else SearchPrompter(args.settings)
            )

            request = args.to_request()
            while True:
                if request is None:
                    request = prompter.ask_request()

                if not request.search_term:
                    logger.error("Search term is required.")
                    return 1

                try:
                    _ = make_command(request, args).execute()
                    exit_code = 0
                except DirectoryError:
                    # Already reported by the service; the loop may still offer another attempt.
                    exit_code = 1

                if args.once or not prompter.ask_again():
                    return exit_code
                request = None

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            return 130
        except EOFError:
            logger.info("\nNo more input; exiting")
            return exit_code
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            return 1

    @staticmethod
    def _default_command(request: SearchRequest, args: SearchArgs) -> SearchCommand:
        return SearchCommand(request, args.settings, quiet=args.quiet)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code.
    """
    return CommandProcessor.process_command()
