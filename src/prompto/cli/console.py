"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so
bootstrap paths (``--help``, ``--version``) and plain-stream prompting
remain functional even when Rich is not installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from prompto.exceptions import EnvironmentError, IoFaultError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()


def escape_markup(text: object) -> str:
    """Escape *text* for interpolation into a markup string.

    Without Rich the proxy prints plain text, so *text* is returned as is.
    """
    try:
        from rich.markup import escape
    except ModuleNotFoundError:
        return str(text)
    return escape(str(text))


class RichConsoleSink:
    """:class:`~prompto.core.protocols.LineSink` writing through Rich.

    Prompt text is emitted verbatim: markup, highlighting and emoji
    codes are disabled, no newline is appended, and long prompts are
    not wrapped.

    Parameters
    ----------
    rich_console:
        A ``rich.console.Console``; defaults to a new stderr console.

    Raises
    ------
    EnvironmentError
        If no console is given and Rich is not installed.
    """

    def __init__(self, rich_console: Any | None = None) -> None:
        self._console: Any = rich_console if rich_console is not None else get_rich_console()

    def write(self, text: str) -> None:
        try:
            self._console.print(
                text,
                end="",
                markup=False,
                highlight=False,
                emoji=False,
                soft_wrap=True,
            )
        except OSError as exc:
            raise IoFaultError(f"Failed to write prompt: {exc}") from exc


def configure_logging(level: int = logging.DEBUG) -> None:
    """Route log records to stderr, through ``RichHandler`` when available."""
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        logging.basicConfig(
            level=level,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )
        return
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=get_rich_console(), show_path=False)],
    )
