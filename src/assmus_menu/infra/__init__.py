"""Infrastructure layer — the input stream and the terminal.

Every raw stream or subprocess exception is caught here and re-raised
as an :class:`~assmus_menu.exceptions.IOFailureError` subclass.

Rules
-----
* No imports from ``cli``.
* No Rich rendering.
"""

from assmus_menu.infra.channel import InputChannel
from assmus_menu.infra.screen import clear_command, clear_screen

__all__: list[str] = [
    "InputChannel",
    "clear_command",
    "clear_screen",
]
