"""Shared pytest fixtures and configuration for the assmus-menu test suite.

Guidelines
----------
* No terminal access in any test — menus are built with
  ``clear_screen=False`` or with ``clear_screen`` patched.
* Input arrives through ``io.StringIO`` backed channels.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

import pytest


class RecordingReporter:
    """ErrorReporter that keeps every report for later assertions."""

    def __init__(self) -> None:
        self.reports: list[tuple[BaseException, str]] = []

    def report(self, error: BaseException, *, origin: str) -> None:
        self.reports.append((error, origin))

    @property
    def errors(self) -> list[BaseException]:
        return [error for error, _ in self.reports]

    @property
    def origins(self) -> list[str]:
        return [origin for _, origin in self.reports]


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()
