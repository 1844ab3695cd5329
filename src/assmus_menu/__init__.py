"""assmus-menu — tagged handler methods as an interactive text menu.

Subclass :class:`Menu`, tag methods with :func:`menu_option` (and at
most one with :func:`on_unknown_input`), then call :meth:`Menu.run`.
"""

from assmus_menu.cli.menu import Menu
from assmus_menu.core.discovery import menu_option, on_unknown_input
from assmus_menu.core.models import Option, ParsedValue, RunFlag, ValueKind
from assmus_menu.infra.channel import InputChannel
from assmus_menu.version import __version__

__all__: list[str] = [
    "InputChannel",
    "Menu",
    "Option",
    "ParsedValue",
    "RunFlag",
    "ValueKind",
    "__version__",
    "menu_option",
    "on_unknown_input",
]
