"""Infrastructure: the line-oriented input channel.

:class:`InputChannel` wraps a text input stream (``sys.stdin`` by
default) and the output stream prompts and frames are written to
(``sys.stdout`` by default).  Raw stream exceptions are re-raised as
:class:`~assmus_menu.exceptions.IOFailureError` subclasses.

The channel is released exactly once: :meth:`InputChannel.close` is
idempotent and closes the underlying input stream only when the channel
was told it owns it.
"""

from __future__ import annotations

import sys
from typing import TextIO

from assmus_menu.core.protocols import LineSource
from assmus_menu.exceptions import EndOfInputError, IOFailureError


def _isatty(stream: object) -> bool:
    checker = getattr(stream, "isatty", None)
    if not callable(checker):
        return False
    return bool(checker())


class InputChannel(LineSource):
    """Concrete :class:`LineSource` over a pair of text streams.

    Usage::

        with InputChannel() as channel:
            name = channel.read_line("Name: ")
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        output: TextIO | None = None,
        *,
        owns_stream: bool = False,
    ) -> None:
        self._stream: TextIO = stream if stream is not None else sys.stdin
        self._output: TextIO = output if output is not None else sys.stdout
        self._owns_stream = owns_stream
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def is_interactive(self) -> bool:
        """``True`` when both sides of the channel are attached to a terminal."""
        return _isatty(self._stream) and _isatty(self._output)

    # ------------------------------------------------------------------
    # LineSource
    # ------------------------------------------------------------------

    def read_line(self, prompt: str | None = None) -> str:
        if self._closed:
            raise IOFailureError("Input channel is closed.")
        if prompt:
            self.write(prompt)

        try:
            line = self._stream.readline()
        except (OSError, ValueError) as exc:
            raise IOFailureError(f"Failed to read input: {exc}") from exc

        if line == "":
            raise EndOfInputError("End of input reached.")
        return line.rstrip("\r\n")

    def write(self, text: str) -> None:
        try:
            self._output.write(text)
            self._output.flush()
        except (OSError, ValueError) as exc:
            raise IOFailureError(f"Failed to write output: {exc}") from exc

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_stream:
            self._stream.close()

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> InputChannel:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
