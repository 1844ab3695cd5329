"""Pure menu frame formatting.

Frame layout (``\\n`` separated)::

    <blank>
     <title>
     <'=' * UNDERLINE_MULTIPLIER * len(title)>
       (<pattern>) <name>
       ...
    <blank>
     > <cursor>

No I/O happens here; the engine clears the screen and writes the text.
"""

from __future__ import annotations

from collections.abc import Iterable

from assmus_menu.core.models import Option

UNDERLINE_CHAR: str = "="
UNDERLINE_MULTIPLIER: int = 2
"""Underline length as a multiple of the title's character length."""

OPTION_INDENT: str = "   "
PROMPT_MARKER: str = "\n > "


def build_underline(title: str, multiplier: int = UNDERLINE_MULTIPLIER) -> str:
    """Return the ``=`` underline for *title*.

    Computed once per menu and reused for every frame.
    """
    return UNDERLINE_CHAR * (len(title) * multiplier)


def format_option(option: Option) -> str:
    return f"{OPTION_INDENT}({option.pattern}) {option.name}"


def render_menu(
    title: str,
    options: Iterable[Option],
    *,
    underline: str | None = None,
    include_prompt: bool = True,
) -> str:
    """Format one menu frame.

    Parameters
    ----------
    title:
        Menu heading.
    options:
        Options in display order.
    underline:
        Precomputed underline; built from *title* when omitted.
    include_prompt:
        When false the trailing :data:`PROMPT_MARKER` is left off so the
        caller can hand it to the reader as the prompt instead.
    """
    if underline is None:
        underline = build_underline(title)

    lines = ["", f" {title}", f" {underline}"]
    lines.extend(format_option(option) for option in options)
    text = "\n".join(lines) + "\n"
    if include_prompt:
        text += PROMPT_MARKER
    return text
