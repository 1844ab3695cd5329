"""Declarative handler tags and the discovery scan that reads them.

A menu subclass marks its handler methods with two tags:

* :func:`menu_option` — a selectable entry with a display name and the
  exact text that triggers it.
* :func:`on_unknown_input` — the single handler invoked when the input
  matches no option.

:func:`discover_handlers` scans a menu class once, resolves every
tagged handler's signature, and caches the result per class.  Handlers
declared on the engine base class itself are never considered.
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable
from typing import Any, TypeVar

from assmus_menu.core.models import (
    HandlerSpec,
    Option,
    ParamKind,
    ParamSpec,
    ReturnKind,
    RunFlag,
)
from assmus_menu.core.protocols import LineSource
from assmus_menu.exceptions import DuplicateFallbackHandlerError, MenuDefinitionError

F = TypeVar("F", bound=Callable[..., Any])

_OPTION_TAG = "__assmus_menu_option__"
_FALLBACK_TAG = "__assmus_menu_fallback__"

_RUN_FLAG_NAMES = frozenset({"RunFlag"})
_CHANNEL_NAMES = frozenset({"InputChannel", "LineSource"})

_CACHE_ATTR = "__assmus_menu_handlers__"

_DiscoveryResult = tuple[tuple[Option, ...], HandlerSpec | None]


# ---------------------------------------------------------------------------
# Tags
# ---------------------------------------------------------------------------

def menu_option(name: str, pattern: str) -> Callable[[F], F]:
    """Tag a method as a selectable menu option.

    Parameters
    ----------
    name:
        Display name shown in the rendered menu.
    pattern:
        Exact input text that selects the option.

    Raises
    ------
    MenuDefinitionError
        If *name* or *pattern* is not a non-empty string, or the method
        already carries an option tag.
    """
    for label, value in (("name", name), ("pattern", pattern)):
        if not isinstance(value, str) or not value:
            raise MenuDefinitionError(
                f"menu_option {label} must be a non-empty string, got {value!r}.",
            )

    def decorator(func: F) -> F:
        if hasattr(func, _OPTION_TAG):
            raise MenuDefinitionError(
                f"{func.__qualname__} is already tagged as a menu option.",
                hint="Use one menu_option tag per handler.",
            )
        setattr(func, _OPTION_TAG, (name, pattern))
        return func

    return decorator


def on_unknown_input(func: F | None = None) -> Any:
    """Tag a method as the fallback for unmatched input.

    Usable bare (``@on_unknown_input``) or called
    (``@on_unknown_input()``).
    """

    def decorator(target: F) -> F:
        setattr(target, _FALLBACK_TAG, True)
        return target

    if func is None:
        return decorator
    return decorator(func)


# ---------------------------------------------------------------------------
# Signature resolution
# ---------------------------------------------------------------------------

def _describe(annotation: Any) -> str:
    if annotation is inspect.Parameter.empty:
        return "<unannotated>"
    if isinstance(annotation, str):
        return annotation
    return getattr(annotation, "__qualname__", repr(annotation))


def _param_kind(annotation: Any) -> ParamKind:
    """Map a declared parameter annotation to the argument the engine supplies."""
    if isinstance(annotation, str):
        # Unresolvable forward reference: fall back to the bare class name.
        bare = annotation.rsplit(".", 1)[-1]
        if bare in _RUN_FLAG_NAMES:
            return ParamKind.RUN_FLAG
        if bare in _CHANNEL_NAMES:
            return ParamKind.INPUT_CHANNEL
        return ParamKind.UNKNOWN
    if not isinstance(annotation, type):
        return ParamKind.UNKNOWN
    try:
        if issubclass(annotation, RunFlag):
            return ParamKind.RUN_FLAG
        if issubclass(annotation, LineSource):
            return ParamKind.INPUT_CHANNEL
    except TypeError:
        return ParamKind.UNKNOWN
    return ParamKind.UNKNOWN


def _return_kind(annotation: Any) -> ReturnKind:
    if annotation is bool or annotation == "bool":
        return ReturnKind.BOOLEAN
    return ReturnKind.VOID


def resolve_handler(func: Callable[..., Any], *, bind_instance: bool = True) -> HandlerSpec:
    """Resolve *func*'s parameter kinds and return kind into a :class:`HandlerSpec`.

    When *bind_instance* is true the first positional parameter
    (``self``) is skipped.  Unrecognised parameters are recorded as
    :attr:`ParamKind.UNKNOWN`; they are rejected when the handler is
    invoked, not here.
    """
    try:
        hints = typing.get_type_hints(func)
    except NameError:
        hints = {}

    signature = inspect.signature(func)
    parameters = list(signature.parameters.values())
    if bind_instance and parameters:
        parameters = parameters[1:]

    specs: list[ParamSpec] = []
    for param in parameters:
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        annotation = hints.get(param.name, param.annotation)
        specs.append(
            ParamSpec(
                name=param.name,
                kind=_param_kind(annotation),
                annotation=_describe(annotation),
                keyword_only=param.kind is param.KEYWORD_ONLY,
            )
        )

    return HandlerSpec(
        func=func,
        parameters=tuple(specs),
        return_kind=_return_kind(hints.get("return", signature.return_annotation)),
        bind_instance=bind_instance,
    )


# ---------------------------------------------------------------------------
# Class scan
# ---------------------------------------------------------------------------

def _declared_members(cls: type, base: type) -> dict[str, Any]:
    """Collect attributes declared below *base* in *cls*'s MRO.

    Ancestors are visited first so that declaration order is preserved
    while a subclass redefinition replaces the inherited member.
    """
    members: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        if klass in base.__mro__:
            continue
        for attr_name, member in vars(klass).items():
            members[attr_name] = member
    return members


def _is_tagged(member: Any) -> bool:
    return hasattr(member, _OPTION_TAG) or getattr(member, _FALLBACK_TAG, False)


def _reject_unbound(attr_name: str, member: Any) -> None:
    """Refuse tags on static and class methods; handlers are instance methods."""
    if not isinstance(member, (staticmethod, classmethod)):
        return
    if _is_tagged(member) or _is_tagged(member.__func__):
        raise MenuDefinitionError(
            f"{attr_name} is a {type(member).__name__} and cannot be a menu handler.",
            hint="Tag a plain instance method instead.",
        )


def discover_handlers(
    cls: type,
    base: type = object,
) -> _DiscoveryResult:
    """Scan *cls* for tagged handlers.

    Returns the options in declaration order and the fallback handler
    (or ``None``).  Successful scans are cached per ``(cls, base)`` on
    *cls* itself, so the cache lives and dies with the class.

    Raises
    ------
    MenuDefinitionError
        When a static or class method carries a handler tag.
    DuplicateFallbackHandlerError
        When more than one handler carries the fallback tag.
    """
    cached = vars(cls).get(_CACHE_ATTR)
    if cached is not None and base in cached:
        return cached[base]

    options: list[Option] = []
    fallback: HandlerSpec | None = None

    for attr_name, member in _declared_members(cls, base).items():
        _reject_unbound(attr_name, member)
        if not inspect.isfunction(member):
            continue

        tag = getattr(member, _OPTION_TAG, None)
        if tag is not None:
            name, pattern = tag
            options.append(Option(name, pattern, resolve_handler(member)))

        if getattr(member, _FALLBACK_TAG, False):
            if fallback is not None:
                raise DuplicateFallbackHandlerError(
                    "Only one method tagged with @on_unknown_input is possible.",
                    hint=(
                        f"Both {fallback.qualname} and {member.__qualname__} "
                        "are tagged; remove one of the tags."
                    ),
                )
            fallback = resolve_handler(member)

    result: _DiscoveryResult = (tuple(options), fallback)
    if cached is None:
        cached = {}
        setattr(cls, _CACHE_ATTR, cached)
    cached[base] = result
    return result
