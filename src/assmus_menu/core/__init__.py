"""Core layer — discovery, option table, frame formatting and typed input.

Rules
-----
* No ``print()`` calls.
* No process or terminal access; input arrives through ``LineSource``.
* No imports from ``cli`` or ``infra``.
"""

from assmus_menu.core.discovery import discover_handlers, menu_option, on_unknown_input
from assmus_menu.core.models import (
    HandlerSpec,
    Option,
    ParamKind,
    ParamSpec,
    ParsedValue,
    ReturnKind,
    RunFlag,
    ValueKind,
)
from assmus_menu.core.protocols import ErrorReporter, LineSource
from assmus_menu.core.reader import TypedReader
from assmus_menu.core.registry import OptionRegistry
from assmus_menu.core.render import render_menu

__all__: list[str] = [
    "ErrorReporter",
    "HandlerSpec",
    "LineSource",
    "Option",
    "OptionRegistry",
    "ParamKind",
    "ParamSpec",
    "ParsedValue",
    "ReturnKind",
    "RunFlag",
    "TypedReader",
    "ValueKind",
    "discover_handlers",
    "menu_option",
    "on_unknown_input",
    "render_menu",
]
