"""Rich console handler with dedicated rendering for search events.

Where: platform/logging/handlers.py
What: Render structured ``search_event`` log records with icons, colours and compact paths.
Why: Keep console formatting out of the search use cases.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class SearchRichHandler(RichHandler):
    """Rich handler that renders search lifecycle events and keeps paths compact."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "search.start": ("🔍", "cyan"),
        "search.complete": ("✅", "green"),
        "search.limit_reached": ("🛑", "yellow"),
        "search.cancelled": ("⏹️", "yellow"),
        "search.cancel.requested": ("✋", "yellow"),
        "search.no_files": ("ℹ️", "yellow"),
        "search.directory.error": ("❌", "red"),
        "search.file.error": ("⛔", "red"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with fixed presentation settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path relative to ``base`` when possible, truncating long prefixes.

        Args:
            path: Absolute or relative path string to format.
            base: Optional base path used to relativize ``path``.

        Returns:
            Text: Styled path with ellipsis truncation.
        """
        pure_path = self._to_pure_path(path)
        base_path = self._to_pure_path(base) if base else None

        display_path: PurePath = pure_path
        if base_path is not None and pure_path.is_relative_to(base_path):
            relative_path = pure_path.relative_to(base_path)
            if str(relative_path) not in {"", "."}:
                display_path = relative_path

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        prefix = anchor
        if len(body_parts) > self._PATH_SEGMENT_LIMIT:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]
            prefix = "…" + separator

        rendered = prefix + separator.join(body_parts)
        return self._style_path_string(rendered or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        text = Text()
        for char in path_string:
            if char in {separator, "/", "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_search_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render structured search events with dedicated styling."""

        event = getattr(record, "search_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        if event == "search.start":
            _ = body.append("Searching")
            term = getattr(record, "search_term", None)
            if term:
                _ = body.append(f" for '{term}'")
            details: list[str] = []
            pattern = getattr(record, "file_pattern", None)
            if pattern:
                details.append(f"pattern={pattern}")
            total_files = getattr(record, "total_files", None)
            if isinstance(total_files, int):
                details.append(f"files={total_files}")
            if getattr(record, "recursive", False):
                details.append("recursive")
            limit = getattr(record, "limit", None)
            if isinstance(limit, int):
                details.append(f"limit={limit}")
            if details:
                _ = body.append(" [" + ", ".join(details) + "]")
        elif event == "search.complete":
            _ = body.append("Search complete")
            metrics: list[str] = []
            for key in ("total_matches", "scanned", "abandoned", "failed"):
                value = getattr(record, key, None)
                if isinstance(value, int):
                    metrics.append(f"{key.replace('total_', '')}={value}")
            duration = getattr(record, "duration_seconds", None)
            if isinstance(duration, (int, float)):
                metrics.append(f"duration={duration:.2f}s")
            if metrics:
                _ = body.append(" [" + ", ".join(metrics) + "]")
        elif event == "search.file.error":
            _ = body.append("Error processing ")
            source_path = getattr(record, "source_path", None)
            if source_path:
                _ = body.append_text(
                    self._format_path(
                        str(source_path),
                        base=getattr(record, "source_base_path", None),
                    )
                )
            error_message = getattr(record, "error_message", None)
            if error_message:
                _ = body.append(f" ({error_message})")
            _ = text.append_text(body)
            return text
        else:
            _ = body.append(message)

        directory = getattr(record, "directory", None)
        if directory and event in {"search.start", "search.no_files", "search.directory.error"}:
            _ = body.append(" @ ")
            _ = body.append_text(self._format_path(str(directory)))

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for search events."""

        search_text = self._render_search_message(record, message)
        if search_text is not None:
            return search_text

        return super().render_message(record, message)


__all__ = ["SearchRichHandler"]
