"""Process exit codes returned by the ``assmus-menu`` demo script."""

from __future__ import annotations

SUCCESS: int = 0
"""The menu stopped through a handler or end of input."""

GENERAL_ERROR: int = 1
"""An AssmusMenuError escaped the menu (e.g. a duplicate fallback handler)."""

UNEXPECTED_ERROR: int = 2
"""Any other exception reached the error boundary."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C; 128 + SIGINT."""
