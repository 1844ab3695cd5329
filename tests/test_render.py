"""Tests for frame formatting (core/render.py).

The frame format is bit-exact: every assertion compares full strings.
"""

from __future__ import annotations

import pytest

from assmus_menu.core.models import HandlerSpec, Option
from assmus_menu.core.render import (
    PROMPT_MARKER,
    UNDERLINE_MULTIPLIER,
    build_underline,
    format_option,
    render_menu,
)


def _noop(self: object) -> None:
    return None


def _opt(name: str, pattern: str) -> Option:
    return Option(name, pattern, HandlerSpec(_noop))


# ---------------------------------------------------------------------------
# Underline
# ---------------------------------------------------------------------------

class TestBuildUnderline:
    def test_multiplier_is_two(self) -> None:
        assert UNDERLINE_MULTIPLIER == 2

    def test_length_is_twice_title(self) -> None:
        assert build_underline("MY COOL CLI APP") == "=" * 30

    @pytest.mark.parametrize("multiplier", [1, 3])
    def test_custom_multiplier(self, multiplier: int) -> None:
        assert build_underline("abc", multiplier) == "=" * (3 * multiplier)

    def test_empty_title(self) -> None:
        assert build_underline("") == ""


# ---------------------------------------------------------------------------
# Frame
# ---------------------------------------------------------------------------

class TestRenderMenu:
    def test_scenario_frame(self) -> None:
        text = render_menu("MY COOL CLI APP", [_opt("Help", "h"), _opt("Quit", "q")])
        assert text == (
            "\n"
            " MY COOL CLI APP\n"
            " ==============================\n"
            "   (h) Help\n"
            "   (q) Quit\n"
            "\n"
            " > "
        )

    def test_without_prompt(self) -> None:
        text = render_menu("T", [_opt("Quit", "q")], include_prompt=False)
        assert text == "\n T\n ==\n   (q) Quit\n"
        assert text + PROMPT_MARKER == render_menu("T", [_opt("Quit", "q")])

    def test_no_options(self) -> None:
        assert render_menu("T", []) == "\n T\n ==\n\n > "

    def test_precomputed_underline_used(self) -> None:
        text = render_menu("T", [], underline="~~~~")
        assert text.splitlines()[2] == " ~~~~"

    def test_preserves_option_order(self) -> None:
        text = render_menu("T", [_opt("Zed", "z"), _opt("Alpha", "a")])
        assert text.index("(z) Zed") < text.index("(a) Alpha")

    def test_format_option(self) -> None:
        assert format_option(_opt("Help", "h")) == "   (h) Help"
