"""Infrastructure: terminal screen clearing.

Shells out to the platform's native clear command (``cls`` through
``cmd`` on Windows, ``clear`` elsewhere) and waits for it to finish so
that stale output never interleaves with the next frame.
"""

from __future__ import annotations

import platform
import subprocess

from assmus_menu.exceptions import ScreenClearError


def clear_command() -> tuple[str, ...]:
    """Return the argv that clears the terminal on the current OS."""
    if platform.system().lower() == "windows":
        return ("cmd", "/c", "cls")
    return ("clear",)


def clear_screen() -> None:
    """Clear the terminal, blocking until the command completes.

    Raises
    ------
    ScreenClearError
        If the command cannot be started or exits non-zero.
    """
    command = clear_command()
    try:
        subprocess.run(command, check=True)
    except FileNotFoundError as exc:
        raise ScreenClearError(
            f"Clear command not found: {command[0]}",
            hint="Disable screen clearing for this menu.",
        ) from exc
    except (OSError, subprocess.CalledProcessError) as exc:
        raise ScreenClearError(f"Failed to clear the screen: {exc}") from exc
