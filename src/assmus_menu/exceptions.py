"""Custom exception hierarchy for assmus-menu.

All exceptions raised by the engine inherit from
:class:`AssmusMenuError`.  Errors raised by user handler code never
leave the run loop raw — they are wrapped in :class:`InvocationError`
and handed to the error reporter.

Hierarchy
---------
AssmusMenuError
├── MenuDefinitionError
├── DuplicateFallbackHandlerError
├── InvocationError
│   └── HandlerSignatureError
├── ParseFailureError
├── IOFailureError
│   ├── EndOfInputError
│   └── ScreenClearError
├── MenuClosedError
└── EnvironmentError
"""

from __future__ import annotations


class AssmusMenuError(Exception):
    """Base exception for all assmus-menu errors.

    Every user-visible error condition maps to a subclass of this
    exception so that reporters can render a clean message without
    leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Menu construction -----------------------------------------------------

class MenuDefinitionError(AssmusMenuError):
    """Raised when a handler tag is declared with invalid arguments."""


class DuplicateFallbackHandlerError(AssmusMenuError):
    """Raised when more than one handler is tagged as the unknown-input fallback."""


# --- Handler invocation ----------------------------------------------------

class InvocationError(AssmusMenuError):
    """Raised when a handler fails while being invoked by the run loop."""

    def __init__(
        self,
        message: str,
        *,
        origin: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.origin: str | None = origin
        """Qualified name of the handler that failed."""


class HandlerSignatureError(InvocationError):
    """Raised when a handler requests a parameter kind the engine cannot supply."""


# --- Input -----------------------------------------------------------------

class ParseFailureError(AssmusMenuError):
    """Raised internally when input text cannot be converted to a kind.

    :class:`~assmus_menu.core.reader.TypedReader` never lets this escape;
    it is reported and a ``none`` value is returned instead.
    """


class IOFailureError(AssmusMenuError):
    """Raised when the input channel or terminal cannot be used."""


class EndOfInputError(IOFailureError):
    """Raised when the input channel has no more lines to deliver."""


class ScreenClearError(IOFailureError):
    """Raised when the platform clear command fails or cannot be started."""


# --- Lifecycle / environment -----------------------------------------------

class MenuClosedError(AssmusMenuError):
    """Raised when a menu is used after its input channel was released."""


class EnvironmentError(AssmusMenuError):
    """Raised when an optional UI dependency is not available."""
