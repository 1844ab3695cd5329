"""Ordered option table plus the optional unknown-input fallback.

Insertion order is discovery order is render order.  Duplicate trigger
patterns are accepted: :meth:`OptionRegistry.find` returns the first
match, so later duplicates are never dispatched to.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from assmus_menu.core.models import HandlerSpec, Option
from assmus_menu.exceptions import DuplicateFallbackHandlerError


class OptionRegistry:
    """Insertion-ordered sequence of :class:`Option` with one fallback slot."""

    def __init__(
        self,
        options: Iterable[Option] = (),
        fallback: HandlerSpec | None = None,
    ) -> None:
        self._options: list[Option] = list(options)
        self._fallback: HandlerSpec | None = fallback

    # -- option table -------------------------------------------------------

    def add(self, option: Option) -> None:
        self._options.append(option)

    def remove(self, option: Option) -> bool:
        """Remove the first entry equal to *option*; ``False`` if absent."""
        try:
            self._options.remove(option)
        except ValueError:
            return False
        return True

    def remove_at(self, index: int) -> Option:
        return self._options.pop(index)

    def get(self, index: int) -> Option:
        return self._options[index]

    def find(self, pattern: str | None) -> Option | None:
        """Return the first option whose trigger equals *pattern* exactly."""
        if not pattern:
            return None
        return next((opt for opt in self._options if opt.pattern == pattern), None)

    @property
    def options(self) -> tuple[Option, ...]:
        return tuple(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[Option]:
        return iter(tuple(self._options))

    # -- fallback -----------------------------------------------------------

    @property
    def fallback(self) -> HandlerSpec | None:
        return self._fallback

    def set_fallback(self, handler: HandlerSpec) -> None:
        """Register the unknown-input handler.  It can be set only once."""
        if self._fallback is not None:
            raise DuplicateFallbackHandlerError(
                "Only one unknown-input handler is possible.",
                hint=f"{self._fallback.qualname} is already registered.",
            )
        self._fallback = handler
