"""Typed line input: one line in, one :class:`ParsedValue` out.

Conversion rules per :class:`ValueKind`:

* ``TEXT`` — the line unchanged (may be empty).
* ``BYTE`` / ``SHORT`` / ``INTEGER`` / ``LONG`` — optionally signed ASCII
  decimal digits, range-checked to 8 / 16 / 32 / 64 bit signed.
* ``BIG_INTEGER`` — same digits, unbounded.
* ``DOUBLE`` / ``FLOAT`` — Python float syntax; ``FLOAT`` is rounded to
  single precision and fails when it overflows.
* ``DECIMAL`` — :class:`decimal.Decimal` syntax, finite values only.
* ``BOOLEAN`` — ``true`` / ``false``, case-insensitive.

Leading and trailing whitespace is ignored for every kind but ``TEXT``.
Parse failures and unsupported kinds are reported and yield
:meth:`ParsedValue.none`; they never raise.  I/O failures from the
channel do propagate.
"""

from __future__ import annotations

import math
import re
import struct
from collections.abc import Callable
from decimal import Decimal, InvalidOperation
from typing import Any

from assmus_menu.core.models import ParsedValue, ValueKind
from assmus_menu.core.protocols import ErrorReporter, LineSource
from assmus_menu.exceptions import ParseFailureError

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

_INTEGER_BITS: dict[ValueKind, int] = {
    ValueKind.BYTE: 8,
    ValueKind.SHORT: 16,
    ValueKind.INTEGER: 32,
    ValueKind.LONG: 64,
}

_PYTHON_TYPES: dict[type, ValueKind] = {
    str: ValueKind.TEXT,
    int: ValueKind.INTEGER,
    float: ValueKind.DOUBLE,
    bool: ValueKind.BOOLEAN,
    Decimal: ValueKind.DECIMAL,
}


# ---------------------------------------------------------------------------
# Parsers (pure — raise ParseFailureError on bad input)
# ---------------------------------------------------------------------------

def _parse_integer(text: str, bits: int | None) -> int:
    stripped = text.strip()
    if not _INTEGER_RE.fullmatch(stripped):
        raise ParseFailureError(f"{text!r} is not an integer.")
    value = int(stripped)
    if bits is not None:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
        if not low <= value <= high:
            raise ParseFailureError(
                f"{value} is out of range [{low}, {high}].",
            )
    return value


def _parse_double(text: str) -> float:
    stripped = text.strip()
    if not stripped or "_" in stripped:
        raise ParseFailureError(f"{text!r} is not a number.")
    try:
        return float(stripped)
    except ValueError as exc:
        raise ParseFailureError(f"{text!r} is not a number.") from exc


def _parse_float(text: str) -> float:
    value = _parse_double(text)
    try:
        result = struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError as exc:
        raise ParseFailureError(
            f"{text!r} does not fit in single precision.",
        ) from exc
    # Some interpreters round out-of-range values to inf instead of raising.
    if math.isinf(result) and not math.isinf(value):
        raise ParseFailureError(f"{text!r} does not fit in single precision.")
    return result


def _parse_decimal(text: str) -> Decimal:
    stripped = text.strip()
    if "_" in stripped:
        raise ParseFailureError(f"{text!r} is not a decimal number.")
    try:
        value = Decimal(stripped)
    except InvalidOperation as exc:
        raise ParseFailureError(f"{text!r} is not a decimal number.") from exc
    if not value.is_finite():
        raise ParseFailureError(f"{text!r} is not a finite decimal number.")
    return value


def _parse_boolean(text: str) -> bool:
    lowered = text.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ParseFailureError(
        f"{text!r} is not a boolean.",
        hint="Type true or false.",
    )


_PARSERS: dict[ValueKind, Callable[[str], Any]] = {
    ValueKind.TEXT: lambda text: text,
    ValueKind.BYTE: lambda text: _parse_integer(text, 8),
    ValueKind.SHORT: lambda text: _parse_integer(text, 16),
    ValueKind.INTEGER: lambda text: _parse_integer(text, 32),
    ValueKind.LONG: lambda text: _parse_integer(text, 64),
    ValueKind.BIG_INTEGER: lambda text: _parse_integer(text, None),
    ValueKind.DOUBLE: _parse_double,
    ValueKind.FLOAT: _parse_float,
    ValueKind.DECIMAL: _parse_decimal,
    ValueKind.BOOLEAN: _parse_boolean,
}


def coerce_kind(kind: object) -> ValueKind | None:
    """Normalise *kind* to a supported :class:`ValueKind`, or ``None``."""
    if isinstance(kind, ValueKind):
        return kind if kind in _PARSERS else None
    if isinstance(kind, type):
        return _PYTHON_TYPES.get(kind)
    return None


def parse_value(kind: ValueKind, text: str) -> ParsedValue:
    """Convert *text* to *kind*.

    Raises
    ------
    ParseFailureError
        When *text* is not valid for *kind* or *kind* is unsupported.
    """
    parser = _PARSERS.get(kind)
    if parser is None:
        raise ParseFailureError(f"Unsupported value kind: {kind!r}.")
    return ParsedValue(kind, parser(text))


# ---------------------------------------------------------------------------
# Reader
# ---------------------------------------------------------------------------

class TypedReader:
    """Reads one line from a :class:`LineSource` and converts it."""

    def __init__(
        self,
        channel: LineSource,
        reporter: ErrorReporter | None = None,
    ) -> None:
        self._channel = channel
        self._reporter = reporter

    def read(self, kind: object = ValueKind.TEXT, prompt: str | None = None) -> ParsedValue:
        """Read one line and convert it to *kind*.

        *kind* is a :class:`ValueKind` or one of ``str``, ``int``,
        ``float``, ``bool`` and :class:`~decimal.Decimal`.  Exactly one
        line is consumed even when *kind* is unsupported.

        Raises
        ------
        IOFailureError
            When the channel cannot deliver a line.
        """
        line = self._channel.read_line(prompt)

        resolved = coerce_kind(kind)
        try:
            if resolved is None:
                raise ParseFailureError(f"Unsupported value kind: {kind!r}.")
            return parse_value(resolved, line)
        except ParseFailureError as exc:
            if self._reporter is not None:
                self._reporter.report(exc, origin="input")
            return ParsedValue.none()
