"""Stderr console for diagnostics, with optional Rich support.

Menu frames go to the input channel's output stream untouched; only
diagnostics (errors, hints, notices) pass through here.  Rich is
imported lazily on every print so plain menus and bootstrap paths
(``--help``, ``--version``) keep working when it is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from assmus_menu.exceptions import EnvironmentError


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


def escape(text: str) -> str:
    """Escape Rich markup in user-supplied *text* when Rich is available."""
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text
    return rich_escape(text)


class _ConsoleProxy:
    """``print``-compatible stderr proxy; Rich when present, plain otherwise."""

    def print(self, *objects: object) -> None:
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)

    def error(self, message: str, *, hint: str | None = None, origin: str | None = None) -> None:
        """Print a red ``Error:`` line, then the optional hint and origin.

        *message*, *hint* and *origin* are escaped; they never carry markup.
        """
        self.print(f"[bold red]Error:[/bold red] {escape(message)}")
        if hint:
            self.print(f"[yellow]Hint:[/yellow] {escape(hint)}")
        if origin:
            self.print(f"[dim]  in {escape(origin)}[/dim]")


console = _ConsoleProxy()
