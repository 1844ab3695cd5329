"""Domain models for assmus-menu.

Options and handler specs are **frozen** dataclasses built once during
discovery and never mutated afterwards.  :class:`RunFlag` is the single
deliberately mutable object: the handle a handler receives when it asks
for write access to the loop's run state.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


# ---------------------------------------------------------------------------
# Handler signature kinds
# ---------------------------------------------------------------------------

class ParamKind(enum.Enum):
    """What the engine passes for one handler parameter."""

    RUN_FLAG = "run_flag"
    INPUT_CHANNEL = "input_channel"
    UNKNOWN = "unknown"


class ReturnKind(enum.Enum):
    """How the engine interprets a handler's return value."""

    VOID = "void"
    BOOLEAN = "boolean"


@dataclass(frozen=True, slots=True)
class ParamSpec:
    """One declared handler parameter, resolved at discovery time."""

    name: str
    kind: ParamKind
    annotation: str
    """Printable form of the declared annotation (for error messages)."""

    keyword_only: bool = False


@dataclass(frozen=True, slots=True)
class HandlerSpec:
    """A handler callable together with its resolved signature.

    ``bind_instance`` is ``True`` for methods discovered on a menu
    class; such handlers receive the menu instance as their first
    positional argument.
    """

    func: Callable[..., Any]
    parameters: tuple[ParamSpec, ...] = ()
    return_kind: ReturnKind = ReturnKind.VOID
    bind_instance: bool = True

    @property
    def qualname(self) -> str:
        return getattr(self.func, "__qualname__", repr(self.func))

    def invoke(
        self,
        instance: object,
        args: tuple[Any, ...] = (),
        kwargs: dict[str, Any] | None = None,
    ) -> Any:
        """Call the handler, binding *instance* when it is a method."""
        kwargs = kwargs or {}
        if self.bind_instance:
            return self.func(instance, *args, **kwargs)
        return self.func(*args, **kwargs)


# ---------------------------------------------------------------------------
# Option
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Option:
    """A single selectable menu entry.

    Equality is defined by ``(name, pattern, handler function)``; the
    resolved signature does not take part in comparisons.
    """

    name: str
    """Display name shown in the menu."""

    pattern: str
    """Exact text the user types to select this option."""

    handler: HandlerSpec = field(compare=False)

    action: Callable[..., Any] = field(init=False)
    """The bare handler callable (mirrors ``handler.func``)."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "action", self.handler.func)

    @property
    def parameters(self) -> tuple[ParamSpec, ...]:
        return self.handler.parameters

    @property
    def return_kind(self) -> ReturnKind:
        return self.handler.return_kind

    @classmethod
    def from_callable(
        cls,
        name: str,
        pattern: str,
        func: Callable[..., Any],
        *,
        bind_instance: bool = False,
    ) -> Option:
        """Build an option around *func*, resolving its signature now."""
        from assmus_menu.core.discovery import resolve_handler

        return cls(name, pattern, resolve_handler(func, bind_instance=bind_instance))


# ---------------------------------------------------------------------------
# Run state
# ---------------------------------------------------------------------------

class RunFlag:
    """Mutable handle to the run loop's "keep running" state.

    A handler that declares a ``RunFlag`` parameter may call
    :meth:`stop` (or assign ``value = False``); the engine reads the
    flag back after the handler returns.
    """

    __slots__ = ("value",)

    def __init__(self, value: bool = True) -> None:
        self.value = value

    def stop(self) -> None:
        self.value = False

    def __bool__(self) -> bool:
        return self.value

    def __repr__(self) -> str:
        return f"RunFlag({self.value!r})"


# ---------------------------------------------------------------------------
# Typed input values
# ---------------------------------------------------------------------------

class ValueKind(enum.Enum):
    """Kinds of value :class:`~assmus_menu.core.reader.TypedReader` can produce."""

    TEXT = "text"
    INTEGER = "integer"
    LONG = "long"
    SHORT = "short"
    BIG_INTEGER = "big_integer"
    DOUBLE = "double"
    FLOAT = "float"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    BYTE = "byte"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class ParsedValue:
    """Typed result of reading one line of input.

    A ``NONE`` kind means no value was obtained (parse failure or an
    unsupported requested kind).  It is distinct from a ``TEXT`` value
    holding the empty string.
    """

    kind: ValueKind
    value: Any = None

    @classmethod
    def none(cls) -> ParsedValue:
        return cls(ValueKind.NONE)

    @property
    def is_none(self) -> bool:
        return self.kind is ValueKind.NONE
