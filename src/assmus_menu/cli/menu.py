"""The menu engine: render, read, match, invoke, repeat.

Subclass :class:`Menu` and tag handler methods::

    class App(Menu):
        @menu_option("Info", "i")
        def info(self) -> None:
            print("Author: ...")

        @menu_option("Quit", "q")
        def quit(self) -> bool:
            return True

    App("MY COOL CLI APP").run()

Loop termination
----------------
The loop keeps a run flag that means "keep running".  It stops when

* a handler annotated ``-> bool`` returns a truthy value (the flag is
  set to the negation of the return value), or
* a handler that declares a :class:`RunFlag` parameter clears it, or
* the input channel reaches end of input.

Handler failures and I/O failures are reported and the loop redraws.
A screen clear failure is reported and the frame is still drawn and
read.
Only discovery errors (raised from ``__init__``) are fatal.
"""

from __future__ import annotations

from typing import Any

from assmus_menu.cli.reporter import ConsoleErrorReporter
from assmus_menu.core.discovery import discover_handlers
from assmus_menu.core.models import (
    HandlerSpec,
    Option,
    ParamKind,
    ParsedValue,
    ReturnKind,
    RunFlag,
    ValueKind,
)
from assmus_menu.core.protocols import ErrorReporter, LineSource
from assmus_menu.core.reader import TypedReader
from assmus_menu.core.registry import OptionRegistry
from assmus_menu.core.render import PROMPT_MARKER, build_underline, render_menu
from assmus_menu.exceptions import (
    EndOfInputError,
    HandlerSignatureError,
    InvocationError,
    IOFailureError,
    MenuClosedError,
    ScreenClearError,
)
from assmus_menu.infra.channel import InputChannel
from assmus_menu.infra.screen import clear_screen


class Menu:
    """Base class for interactive text menus.

    Parameters
    ----------
    title:
        Heading shown above the options.
    channel:
        Input collaborator; an :class:`InputChannel` over stdin/stdout
        when omitted.  The menu releases it when :meth:`run` returns.
    reporter:
        Receives runtime errors caught by the loop.  Defaults to a
        :class:`ConsoleErrorReporter`.
    clear_screen:
        Clear the terminal before every frame.
    pause_on_error:
        Wait for a key press after an error is reported (default
        reporter only).
    max_io_failures:
        Consecutive I/O failures after which :meth:`run` re-raises the
        last one.  ``None`` retries forever.

    Raises
    ------
    DuplicateFallbackHandlerError
        When the subclass tags more than one unknown-input handler.
    """

    def __init__(
        self,
        title: str,
        *,
        channel: LineSource | None = None,
        reporter: ErrorReporter | None = None,
        clear_screen: bool = True,
        pause_on_error: bool = False,
        max_io_failures: int | None = None,
    ) -> None:
        options, fallback = discover_handlers(type(self), Menu)

        self.title = title
        self._underline = build_underline(title)
        self._registry = OptionRegistry(options, fallback)
        self._reporter: ErrorReporter = (
            reporter if reporter is not None else ConsoleErrorReporter(pause=pause_on_error)
        )
        self._channel: LineSource = channel if channel is not None else InputChannel()
        self._reader = TypedReader(self._channel, self._reporter)
        self._should_clear = clear_screen
        self._max_io_failures = max_io_failures
        self._run_flag: RunFlag | None = None
        self._closed = False
        self.last_input: str | None = None
        """Most recent raw selection line, ``None`` before the first read."""

    # ------------------------------------------------------------------
    # Option table
    # ------------------------------------------------------------------

    def size(self) -> int:
        return len(self._registry)

    def __len__(self) -> int:
        return len(self._registry)

    @property
    def options(self) -> tuple[Option, ...]:
        return self._registry.options

    @property
    def fallback(self) -> HandlerSpec | None:
        return self._registry.fallback

    def add(self, option: Option) -> None:
        self._registry.add(option)

    def remove(self, option: Option) -> bool:
        return self._registry.remove(option)

    def remove_at(self, index: int) -> Option:
        return self._registry.remove_at(index)

    def get(self, index: int) -> Option:
        return self._registry.get(index)

    # ------------------------------------------------------------------
    # Input / output helpers for handlers
    # ------------------------------------------------------------------

    @property
    def channel(self) -> LineSource:
        return self._channel

    @property
    def running(self) -> bool:
        """Whether a :meth:`run` loop is active and has not been told to stop."""
        return self._run_flag is not None and bool(self._run_flag)

    def read(self, kind: object = ValueKind.TEXT, prompt: str | None = None) -> ParsedValue:
        """Read one line from the menu's channel as *kind*.

        Parse failures are reported and return :meth:`ParsedValue.none`.
        """
        return self._reader.read(kind, prompt)

    def render(self) -> str:
        """Return the current frame, prompt marker included."""
        return render_menu(self.title, self._registry, underline=self._underline)

    @staticmethod
    def clear() -> None:
        """Clear the terminal (blocking)."""
        clear_screen()

    # ------------------------------------------------------------------
    # Run loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Loop until the run flag is cleared, then release the channel.

        Raises
        ------
        MenuClosedError
            If this menu already ran or was closed.
        IOFailureError
            Only when ``max_io_failures`` consecutive I/O failures occur.
        """
        if self._closed:
            raise MenuClosedError(
                "This menu has been closed.",
                hint="Create a new menu instance to run again.",
            )

        flag = self._run_flag = RunFlag(True)
        io_failures = 0
        try:
            while flag:
                try:
                    self._draw()
                    selection = self._reader.read(ValueKind.TEXT, PROMPT_MARKER)
                    self._dispatch(selection.value, flag)
                    io_failures = 0
                except EndOfInputError:
                    flag.stop()
                except IOFailureError as exc:
                    io_failures += 1
                    self._reporter.report(exc, origin="input")
                    if self._max_io_failures is not None and io_failures >= self._max_io_failures:
                        raise
                except InvocationError as exc:
                    self._reporter.report(exc, origin=exc.origin or "handler")
        finally:
            self.close()

    def close(self) -> None:
        """Release the input channel.  Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self._channel.close()

    def __enter__(self) -> Menu:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _draw(self) -> None:
        if self._should_clear:
            try:
                clear_screen()
            except ScreenClearError as exc:
                # A failed clear never blocks the frame or the read.
                self._reporter.report(exc, origin="screen")
        self._channel.write(
            render_menu(
                self.title,
                self._registry,
                underline=self._underline,
                include_prompt=False,
            )
        )

    def _dispatch(self, pattern: str | None, flag: RunFlag) -> None:
        self.last_input = pattern
        option = self._registry.find(pattern)
        if option is not None:
            self._invoke(option.handler, flag)
            return

        fallback = self._registry.fallback
        if fallback is not None:
            self._invoke(fallback, flag)

    def _invoke(self, handler: HandlerSpec, flag: RunFlag) -> None:
        handle = RunFlag(flag.value)
        args, kwargs = self._resolve_arguments(handler, handle)

        try:
            result = handler.invoke(self, args, kwargs)
        except InvocationError:
            raise
        except Exception as exc:
            raise InvocationError(
                f"{handler.qualname} failed: {type(exc).__name__}: {exc}",
                origin=handler.qualname,
                hint=getattr(exc, "hint", None),
            ) from exc

        if handler.return_kind is ReturnKind.BOOLEAN:
            flag.value = not bool(result)
        else:
            flag.value = handle.value

    def _resolve_arguments(
        self,
        handler: HandlerSpec,
        handle: RunFlag,
    ) -> tuple[tuple[Any, ...], dict[str, Any]]:
        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        for param in handler.parameters:
            if param.kind is ParamKind.RUN_FLAG:
                value: Any = handle
            elif param.kind is ParamKind.INPUT_CHANNEL:
                value = self._channel
            else:
                raise HandlerSignatureError(
                    f"{handler.qualname} requests unsupported parameter "
                    f"{param.name!r} ({param.annotation}).",
                    origin=handler.qualname,
                    hint="Handler parameters must be annotated RunFlag or InputChannel.",
                )
            if param.keyword_only:
                kwargs[param.name] = value
            else:
                args.append(value)
        return tuple(args), kwargs
