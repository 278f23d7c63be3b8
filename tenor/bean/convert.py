"""Canonical text conversion for property value types.

Each convertible type has one (parse, format) pair. parse returns
Ok | Err[str] and never raises; format(parse(text)) is the canonical text.

Resolution order in find_converter:
  1. explicitly registered types (str, int, bool, Decimal, date, ...)
  2. Enum subclasses, converted by member value
  3. classes with a static parse(text) -> Ok | Err and a __str__
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, final

from tenor.core.result import Err, Ok


@final
@dataclass(frozen=True, slots=True)
class StringConverter[V]:
    """A parse/format pair for one value type."""

    target: type[V]
    parse: Callable[[str], Ok[V] | Err[str]]
    format: Callable[[V], str]


_CONVERTERS: dict[type, StringConverter[Any]] = {}
_LOCK = threading.Lock()


def register_converter[V](
    target: type[V],
    parse: Callable[[str], Ok[V] | Err[str]],
    format: Callable[[V], str] = str,  # noqa: A002
) -> StringConverter[V]:
    """Register (or replace) the converter for a type."""
    converter = StringConverter(target=target, parse=parse, format=format)
    with _LOCK:
        _CONVERTERS[target] = converter
    return converter


def find_converter(target: object) -> StringConverter[Any] | None:
    """Return the converter for a type, or None if it has no text form."""
    if not isinstance(target, type):
        return None
    found = _CONVERTERS.get(target)
    if found is not None:
        return found
    if issubclass(target, Enum):
        return _enum_converter(target)
    parse = getattr(target, "parse", None)
    if callable(parse):
        return register_converter(target, parse)
    return None


def _enum_converter[E: Enum](target: type[E]) -> StringConverter[E]:
    def parse(text: str) -> Ok[E] | Err[str]:
        for member in target:
            if text in (member.value, member.name):
                return Ok(member)
        return Err(f"{text!r} is not a valid {target.__name__}")

    return register_converter(target, parse, lambda member: str(member.value))


# ---------------------------------------------------------------------------
# Built-in converters
# ---------------------------------------------------------------------------


def _parse_str(text: str) -> Ok[str]:
    return Ok(text)


def _parse_int(text: str) -> Ok[int] | Err[str]:
    try:
        return Ok(int(text.strip()))
    except ValueError:
        return Err(f"not an integer: {text!r}")


def _parse_bool(text: str) -> Ok[bool] | Err[str]:
    match text.strip().lower():
        case "true":
            return Ok(True)
        case "false":
            return Ok(False)
        case _:
            return Err(f"not a boolean: {text!r}")


def _parse_decimal(text: str) -> Ok[Decimal] | Err[str]:
    try:
        value = Decimal(text.strip())
    except InvalidOperation:
        return Err(f"not a decimal: {text!r}")
    if not value.is_finite():
        return Err(f"decimal must be finite: {text!r}")
    return Ok(value)


def _parse_date(text: str) -> Ok[date] | Err[str]:
    try:
        return Ok(date.fromisoformat(text.strip()))
    except ValueError:
        return Err(f"not an ISO date: {text!r}")


register_converter(str, _parse_str)
register_converter(int, _parse_int)
register_converter(bool, _parse_bool, lambda b: "true" if b else "false")
register_converter(Decimal, _parse_decimal)
register_converter(date, _parse_date, date.isoformat)
