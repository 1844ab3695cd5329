"""Tests for handler tags and the discovery scan (core/discovery.py).

Discovery is pure — classes are defined inline and scanned without any
menu instance or I/O.
"""

from __future__ import annotations

import gc
import weakref

import pytest

from assmus_menu.core.discovery import (
    discover_handlers,
    menu_option,
    on_unknown_input,
    resolve_handler,
)
from assmus_menu.core.models import ParamKind, ReturnKind, RunFlag
from assmus_menu.core.protocols import LineSource
from assmus_menu.exceptions import DuplicateFallbackHandlerError, MenuDefinitionError
from assmus_menu.infra.channel import InputChannel


class Base:
    """Stand-in for the engine base class."""

    @menu_option("Engine", "e")
    def engine_helper(self) -> None:
        return None


# ---------------------------------------------------------------------------
# Tags
# ---------------------------------------------------------------------------

class TestMenuOptionTag:
    @pytest.mark.parametrize(
        ("name", "pattern"),
        [("", "q"), ("Quit", ""), (None, "q"), ("Quit", 1)],
    )
    def test_rejects_empty_or_non_string(self, name: object, pattern: object) -> None:
        with pytest.raises(MenuDefinitionError, match="non-empty string"):
            menu_option(name, pattern)  # type: ignore[arg-type]

    def test_returns_same_function(self) -> None:
        def quit_app(self: object) -> bool:
            return True

        assert menu_option("Quit", "q")(quit_app) is quit_app

    def test_second_option_tag_rejected(self) -> None:
        with pytest.raises(MenuDefinitionError, match="already tagged"):

            @menu_option("A", "a")
            @menu_option("B", "b")
            def handler(self: object) -> None:
                return None


class TestOnUnknownInputTag:
    def test_bare_form(self) -> None:
        @on_unknown_input
        def fallback(self: object) -> None:
            return None

        class App(Base):
            unknown = fallback

        _, found = discover_handlers(App, Base)
        assert found is not None
        assert found.func is fallback

    def test_called_form(self) -> None:
        class App(Base):
            @on_unknown_input()
            def unknown(self) -> None:
                return None

        _, found = discover_handlers(App, Base)
        assert found is not None
        assert found.func is App.unknown


# ---------------------------------------------------------------------------
# Signature resolution
# ---------------------------------------------------------------------------

class TestResolveHandler:
    def test_skips_self_for_methods(self) -> None:
        def handler(self: object) -> None:
            return None

        assert resolve_handler(handler).parameters == ()

    def test_keeps_first_parameter_when_unbound(self) -> None:
        def handler(flag: RunFlag) -> None:
            return None

        spec = resolve_handler(handler, bind_instance=False)
        assert [p.kind for p in spec.parameters] == [ParamKind.RUN_FLAG]

    def test_parameter_kinds(self) -> None:
        def handler(
            self: object,
            flag: RunFlag,
            channel: InputChannel,
            source: LineSource,
            other: int,
            bare,  # noqa: ANN001
        ) -> None:
            return None

        kinds = [p.kind for p in resolve_handler(handler).parameters]
        assert kinds == [
            ParamKind.RUN_FLAG,
            ParamKind.INPUT_CHANNEL,
            ParamKind.INPUT_CHANNEL,
            ParamKind.UNKNOWN,
            ParamKind.UNKNOWN,
        ]

    def test_keyword_only_recorded(self) -> None:
        def handler(self: object, *, flag: RunFlag) -> None:
            return None

        (param,) = resolve_handler(handler).parameters
        assert param.keyword_only is True
        assert param.name == "flag"

    def test_var_arguments_ignored(self) -> None:
        def handler(self: object, *args: object, **kwargs: object) -> None:
            return None

        assert resolve_handler(handler).parameters == ()

    def test_unresolvable_annotations_fall_back_to_names(self) -> None:
        def handler(self: object, flag: RunFlag, other: NotDefinedAnywhere) -> bool:  # noqa: F821
            return True

        spec = resolve_handler(handler)
        assert [p.kind for p in spec.parameters] == [ParamKind.RUN_FLAG, ParamKind.UNKNOWN]
        assert spec.parameters[1].annotation == "NotDefinedAnywhere"
        assert spec.return_kind is ReturnKind.BOOLEAN

    @pytest.mark.parametrize(
        ("returns", "expected"),
        [("bool", ReturnKind.BOOLEAN), ("None", ReturnKind.VOID), ("int", ReturnKind.VOID)],
    )
    def test_return_kind(self, returns: str, expected: ReturnKind) -> None:
        def handler(self: object) -> None:
            return None

        handler.__annotations__["return"] = returns
        assert resolve_handler(handler).return_kind is expected

    def test_missing_return_annotation_is_void(self) -> None:
        def handler(self):  # noqa: ANN001, ANN202
            return True

        assert resolve_handler(handler).return_kind is ReturnKind.VOID


# ---------------------------------------------------------------------------
# Class scan
# ---------------------------------------------------------------------------

class TestDiscoverHandlers:
    def test_options_in_declaration_order(self) -> None:
        class App(Base):
            @menu_option("Help", "h")
            def help(self) -> None:
                return None

            def not_an_option(self) -> None:
                return None

            @menu_option("Quit", "q")
            def quit(self) -> bool:
                return True

        options, fallback = discover_handlers(App, Base)
        assert [(o.name, o.pattern) for o in options] == [("Help", "h"), ("Quit", "q")]
        assert options[1].return_kind is ReturnKind.BOOLEAN
        assert fallback is None

    def test_base_class_handlers_excluded(self) -> None:
        class App(Base):
            pass

        options, _ = discover_handlers(App, Base)
        assert options == ()

    def test_intermediate_classes_included(self) -> None:
        class Common(Base):
            @menu_option("Help", "h")
            def help(self) -> None:
                return None

        class App(Common):
            @menu_option("Quit", "q")
            def quit(self) -> bool:
                return True

        options, _ = discover_handlers(App, Base)
        assert [o.pattern for o in options] == ["h", "q"]

    def test_untagged_override_removes_option(self) -> None:
        class Common(Base):
            @menu_option("Help", "h")
            def help(self) -> None:
                return None

        class App(Common):
            def help(self) -> None:
                return None

        options, _ = discover_handlers(App, Base)
        assert options == ()

    def test_handler_with_both_tags(self) -> None:
        class App(Base):
            @on_unknown_input
            @menu_option("Help", "h")
            def help(self) -> None:
                return None

        options, fallback = discover_handlers(App, Base)
        assert len(options) == 1
        assert fallback is not None
        assert fallback.func is App.help

    def test_duplicate_fallback_rejected(self) -> None:
        class App(Base):
            @on_unknown_input
            def first(self) -> None:
                return None

            @on_unknown_input
            def second(self) -> None:
                return None

        with pytest.raises(DuplicateFallbackHandlerError, match="Only one") as exc_info:
            discover_handlers(App, Base)
        assert exc_info.value.hint is not None
        assert "second" in exc_info.value.hint

    def test_non_functions_ignored(self) -> None:
        class App(Base):
            label = "not a handler"

            @staticmethod
            def helper() -> None:
                return None

        options, fallback = discover_handlers(App, Base)
        assert options == ()
        assert fallback is None

    def test_results_cached_per_class(self) -> None:
        class App(Base):
            @menu_option("Help", "h")
            def help(self) -> None:
                return None

        assert discover_handlers(App, Base) is discover_handlers(App, Base)

    def test_subclass_does_not_reuse_parent_cache(self) -> None:
        class App(Base):
            @menu_option("Help", "h")
            def help(self) -> None:
                return None

        class Extended(App):
            @menu_option("Quit", "q")
            def quit(self) -> bool:
                return True

        assert len(discover_handlers(App, Base)[0]) == 1
        assert [o.pattern for o in discover_handlers(Extended, Base)[0]] == ["h", "q"]

    def test_scanned_class_can_be_collected(self) -> None:
        class App(Base):
            @menu_option("Help", "h")
            def help(self) -> None:
                super().__init__()

        discover_handlers(App, Base)
        ref = weakref.ref(App)
        del App
        gc.collect()

        assert ref() is None

    @pytest.mark.parametrize("wrapper", [staticmethod, classmethod])
    def test_tagged_static_or_class_method_rejected(self, wrapper: type) -> None:
        def handler(*_args: object) -> None:
            return None

        tagged = wrapper(menu_option("Help", "h")(handler))
        App = type("App", (Base,), {"help": tagged})

        with pytest.raises(MenuDefinitionError, match=wrapper.__name__):
            discover_handlers(App, Base)

    def test_tagged_static_method_rejected_in_class_body(self) -> None:
        with pytest.raises(MenuDefinitionError, match="staticmethod"):
            class App(Base):
                @staticmethod
                @on_unknown_input
                def unknown() -> None:
                    return None

            discover_handlers(App, Base)
