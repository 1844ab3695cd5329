"""Protocols (interfaces) consumed by the core layer.

These define the contracts that the input collaborator and the error
reporter must satisfy.  Core code depends ONLY on these protocols —
never on concrete implementations.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LineSource(Protocol):
    """Contract for the line-oriented input collaborator.

    A handler parameter annotated with this protocol (or any class that
    explicitly derives from it, such as
    :class:`~assmus_menu.infra.channel.InputChannel`) receives the
    menu's input channel.
    """

    def read_line(self, prompt: str | None = None) -> str:
        """Emit *prompt* (when given) and block until one line is available.

        The returned text has its line terminator removed.

        Raises
        ------
        EndOfInputError
            When the underlying stream is exhausted.
        IOFailureError
            When the underlying stream cannot be read.
        """
        ...  # pragma: no cover

    def write(self, text: str) -> None:
        """Write *text* verbatim to the channel's output side."""
        ...  # pragma: no cover

    def close(self) -> None:
        """Release the channel.  Calling it more than once is a no-op."""
        ...  # pragma: no cover


class ErrorReporter(Protocol):
    """Contract for reporting runtime errors caught by the run loop."""

    def report(self, error: BaseException, *, origin: str) -> None:
        """Show *error* to the user, tagged with where it came from.

        *origin* is a handler's qualified name, ``"input"`` or
        ``"screen"``.
        """
        ...  # pragma: no cover
