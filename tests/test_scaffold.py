"""Smoke tests — verify package wiring.

These tests prove that:
* The public API is importable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

import assmus_menu
from assmus_menu import __version__
from assmus_menu.cli import exit_codes
from assmus_menu.exceptions import (
    AssmusMenuError,
    DuplicateFallbackHandlerError,
    EndOfInputError,
    EnvironmentError,
    HandlerSignatureError,
    InvocationError,
    IOFailureError,
    MenuClosedError,
    MenuDefinitionError,
    ParseFailureError,
    ScreenClearError,
)


# ---------------------------------------------------------------------------
# Version / public API
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


class TestPublicAPI:
    @pytest.mark.parametrize("name", assmus_menu.__all__)
    def test_exported_names_resolve(self, name: str) -> None:
        assert getattr(assmus_menu, name) is not None


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            MenuDefinitionError,
            DuplicateFallbackHandlerError,
            InvocationError,
            HandlerSignatureError,
            ParseFailureError,
            IOFailureError,
            EndOfInputError,
            ScreenClearError,
            MenuClosedError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[AssmusMenuError]
    ) -> None:
        assert issubclass(exc_class, AssmusMenuError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(AssmusMenuError, Exception)

    def test_signature_error_is_invocation_error(self) -> None:
        assert issubclass(HandlerSignatureError, InvocationError)

    @pytest.mark.parametrize("exc_class", [EndOfInputError, ScreenClearError])
    def test_io_failures(self, exc_class: type[IOFailureError]) -> None:
        assert issubclass(exc_class, IOFailureError)

    def test_hint_is_stored(self) -> None:
        err = AssmusMenuError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = AssmusMenuError("boom")
        assert err.hint is None

    def test_invocation_error_carries_origin(self) -> None:
        err = InvocationError("boom", origin="App.quit")
        assert err.origin == "App.quit"
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2
