"""Predicate builders used by the convenience entry points."""

from __future__ import annotations

import numbers
from collections.abc import Callable
from typing import Any

from pyfindpath._errors import (
    ERR_MSG_NOT_CALLABLE,
    ERR_MSG_NOT_NUMERIC,
    InvalidArgumentsError,
)


def check_predicate(predicate: Any) -> None:
    """Validate that ``predicate`` can be called with a value."""
    if not callable(predicate):
        raise InvalidArgumentsError(
            ERR_MSG_NOT_CALLABLE,
            f"predicate must be callable, got {type(predicate).__name__}",
        )


def eq_predicate(target: Any) -> Callable[[Any], bool]:
    """Build an equality predicate for ``target``.

    ``None`` equals only ``None`` and a ``bool`` equals only a ``bool``;
    every other pair is compared with ``==``, after an identity check so the
    very ``nan`` object passed as ``target`` is still found. A different
    ``nan`` never matches. Values are never stringified, so ``42`` does not
    match ``"42"``.
    """

    def predicate(value: Any) -> bool:
        if value is None or target is None:
            return value is None and target is None
        if isinstance(value, bool) != isinstance(target, bool):
            return False
        return value is target or bool(value == target)

    return predicate


def as_number(value: Any) -> numbers.Number | None:
    """Coerce ``value`` to a number, or return None if it is not numeric.

    Numbers (except ``bool``) are returned unchanged and strings holding
    an int or float literal are parsed with ``float``.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Number):
        return value
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def num_predicate(target: Any) -> Callable[[Any], bool]:
    """Build a numeric-equality predicate for ``target``."""
    number = as_number(target)
    if number is None:
        raise InvalidArgumentsError(
            ERR_MSG_NOT_NUMERIC,
            f"numeric target expected, got {type(target).__name__} {target!r}",
        )

    def predicate(value: Any) -> bool:
        candidate = as_number(value)
        return candidate is not None and candidate == number

    return predicate
