"""Error reporting for the run loop.

:class:`ConsoleErrorReporter` satisfies
:class:`~assmus_menu.core.protocols.ErrorReporter`: it prints the error,
its hint and its origin through the stderr console and, when asked to,
waits for a key press before the menu is redrawn.
"""

from __future__ import annotations

from typing import Any

from assmus_menu.cli.console import console
from assmus_menu.exceptions import EnvironmentError


def _import_questionary() -> Any:
    """Import questionary lazily for the "press any key" pause."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


class ConsoleErrorReporter:
    """Render runtime errors on stderr, optionally pausing afterwards."""

    def __init__(self, *, pause: bool = False) -> None:
        self.pause = pause

    def report(self, error: BaseException, *, origin: str) -> None:
        console.error(str(error), hint=getattr(error, "hint", None), origin=origin)
        if self.pause:
            self.wait_for_key()

    @staticmethod
    def wait_for_key() -> None:
        """Block until the user presses a key."""
        questionary = _import_questionary()
        questionary.press_any_key_to_continue().ask()
