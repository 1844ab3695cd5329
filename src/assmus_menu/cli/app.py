"""Demo application entry point for assmus-menu.

This module is the **error boundary** for the ``assmus-menu`` console
script.  It catches :class:`~assmus_menu.exceptions.AssmusMenuError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

The menu it runs doubles as a usage example for library users.
"""

from __future__ import annotations

import argparse
import sys

from assmus_menu.cli import exit_codes
from assmus_menu.cli.console import console, escape
from assmus_menu.cli.menu import Menu
from assmus_menu.core.discovery import menu_option, on_unknown_input
from assmus_menu.exceptions import AssmusMenuError
from assmus_menu.infra.channel import InputChannel
from assmus_menu.version import __version__

DEFAULT_TITLE = "MY COOL CLI APP"
CONTINUE_PROMPT = "\n Press Enter to continue..."


# ---------------------------------------------------------------------------
# Demo menu
# ---------------------------------------------------------------------------

class DemoMenu(Menu):
    """Three-option menu showing both return-value styles."""

    @menu_option("Info", "i")
    def info(self, channel: InputChannel) -> None:
        channel.write(f"\n assmus-menu {__version__}\n")
        channel.read_line(CONTINUE_PROMPT)

    @menu_option("Help", "h")
    def help(self, channel: InputChannel) -> None:
        channel.write("\n Type the letter in brackets and press Enter.\n")
        channel.read_line(CONTINUE_PROMPT)

    @menu_option("Quit", "q")
    def quit(self) -> bool:
        return True

    @on_unknown_input
    def unknown(self) -> None:
        console.print(f"[yellow]Unknown option:[/yellow] {escape(self.last_input or '')}")
        self.channel.read_line(CONTINUE_PROMPT)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="assmus-menu",
        description="Run the assmus-menu demo menu.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--title",
        default=DEFAULT_TITLE,
        help=f"Menu title (default: {DEFAULT_TITLE!r}).",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the terminal before each frame.",
    )
    parser.add_argument(
        "--pause-on-error",
        action="store_true",
        help="Wait for a key press after an error is reported.",
    )
    return parser


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the demo menu.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    args = _build_parser().parse_args(argv)

    channel = InputChannel()
    menu = DemoMenu(
        args.title,
        channel=channel,
        clear_screen=not args.no_clear and channel.is_interactive(),
        pause_on_error=args.pause_on_error,
    )
    menu.run()
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except AssmusMenuError as exc:
        console.error(str(exc), hint=exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
