"""src/lgrep/ui/cli/commands/search.py
What: Execute one search from the CLI with keypress cancellation.
Why: Bridge a parsed request with the application service and console output.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import final

from lgrep.application.services import TextSearchService
from lgrep.config.settings import SearchSettings
from lgrep.features.search import CancellationSignal, SearchEvent, SearchRequest, SearchSummary
from lgrep.platform.logging import logger
from lgrep.platform.terminal import KeypressListener
from lgrep.ui.cli.display import ConsoleMatchSink, ResultDisplay


def cancel_on_key(signal: CancellationSignal, cancel_key: str) -> Callable[[str], bool]:
    """Return a key handler that triggers ``signal`` when ``cancel_key`` is pressed.

    The handler returns ``True`` once the key was seen so the listener stops.
    """

    def _on_key(key: str) -> bool:
        if key.lower() != cancel_key:
            return False
        if signal.trigger():
            logger.info(
                "Cancellation requested.",
                extra={"search_event": SearchEvent.CANCEL_REQUESTED.value},
            )
        return True

    return _on_key


@final
class SearchCommand:
    """Command for running a single search."""

    request: SearchRequest
    settings: SearchSettings
    quiet: bool
    service: TextSearchService
    match_sink: ConsoleMatchSink
    result_display: ResultDisplay

    def __init__(
        self,
        request: SearchRequest,
        settings: SearchSettings,
        *,
        quiet: bool = False,
        service: TextSearchService | None = None,
        listener_factory: Callable[[Callable[[str], bool]], KeypressListener] | None = None,
    ) -> None:
        """Initialize the command.

        Args:
            request: Parameters of the search to run.
            settings: Runtime settings (cancel key, pool size, encoding).
            quiet: Suppress the cancel hint and the summary.
            service: Search service override, mainly for tests.
            listener_factory: Builds the keypress listener for a key handler.
        """
        self.request = request
        self.settings = settings
        self.quiet = quiet
        self.service = service or TextSearchService(settings)
        self.match_sink = ConsoleMatchSink()
        self.result_display = ResultDisplay()
        self._listener_factory: Callable[[Callable[[str], bool]], KeypressListener] = (
            listener_factory or KeypressListener
        )

    def execute(self) -> SearchSummary:
        """Run the search and display its summary.

        Returns:
            SearchSummary: Outcome of the search.

        Raises:
            DirectoryError: If the search directory cannot be listed.
        """
        signal = CancellationSignal()
        listener = self._listener_factory(cancel_on_key(signal, self.settings.cancel_key))

        if listener.start():
            self.result_display.show_cancel_hint(self.settings.cancel_key, quiet=self.quiet)
        try:
            summary = self.service.search(self.request, self.match_sink, signal)
        except KeyboardInterrupt:
            # Workers keep running after Ctrl+C unless they are told to stop.
            _ = signal.trigger()
            raise
        finally:
            listener.stop()

        self.result_display.show_summary(summary, quiet=self.quiet)
        return summary
