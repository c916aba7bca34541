"""pyfindpath - Find the paths to matching values in nested data structures."""

from __future__ import annotations

try:
    from pyfindpath._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

import logging
from collections.abc import Callable
from typing import Any

from pyfindpath._errors import FindPathError, InvalidArgumentsError, InvalidPathError
from pyfindpath._finder import find
from pyfindpath._parser import parse_path
from pyfindpath._path import Index, Key, Path, Step, escape_key, render_path
from pyfindpath._predicates import check_predicate, eq_predicate, num_predicate
from pyfindpath._resolve import PATH_MISSING, get_path
from pyfindpath.options import FindOptions

__all__ = [
    "find",
    "find_paths",
    "find_paths_eq",
    "find_paths_num",
    "find_steps",
    "get_path",
    "parse_path",
    "render_path",
    "escape_key",
    "FindOptions",
    "Index",
    "Key",
    "Path",
    "Step",
    "PATH_MISSING",
    "FindPathError",
    "InvalidArgumentsError",
    "InvalidPathError",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())


def find_steps(
    predicate: Callable[[Any], Any],
    data: Any,
    *,
    inside_objects: bool = False,
    inside_matches: bool = False,
) -> list[Path]:
    """Find matching values and return their paths as tuples of steps.

    Args:
        predicate: Called with every visited value; truthy means a match.
        data: The structure to search.
        inside_objects: Also search inside tagged containers (subclasses
            of list/tuple/dict and objects with attributes).
        inside_matches: Keep searching inside containers that matched.

    Returns:
        Paths of ``Index``/``Key`` steps in depth-first pre-order.

    Raises:
        InvalidArgumentsError: If ``predicate`` is not callable.
    """
    check_predicate(predicate)
    options = FindOptions.from_kwargs(
        inside_objects=inside_objects,
        inside_matches=inside_matches,
    )
    return find(predicate, data, options)


def find_paths(
    predicate: Callable[[Any], Any],
    data: Any,
    *,
    inside_objects: bool = False,
    inside_matches: bool = False,
) -> list[str]:
    """Return the rendered paths of values for which ``predicate`` is true.

    >>> find_paths(lambda v: v == "fred", {"bob": [1, 42, 42, {"foo": "fred"}]})
    ["{'bob'}[3]{'foo'}"]

    Args:
        predicate: Called with every visited value, including ``None``;
            truthy means a match. Exceptions it raises propagate unchanged.
        data: The structure to search. A matching root yields ``[""]``.
        inside_objects: Also search inside tagged containers.
        inside_matches: Keep searching inside containers that matched.

    Returns:
        Path strings such as ``{'bob'}[3]{'foo'}``, keys in sorted order
        and elements in index order.

    Raises:
        InvalidArgumentsError: If ``predicate`` is not callable.
    """
    steps = find_steps(
        predicate,
        data,
        inside_objects=inside_objects,
        inside_matches=inside_matches,
    )
    return [render_path(path) for path in steps]


def find_paths_eq(
    value: Any,
    data: Any,
    *,
    inside_objects: bool = False,
    inside_matches: bool = False,
) -> list[str]:
    """Return the paths of values equal to ``value``.

    Equality is Python ``==`` with two fixed exceptions: ``None`` only
    equals ``None``, and booleans only equal booleans (so ``True`` does not
    match ``1``). Values are not stringified, so ``42`` does not match
    ``"42"``; use :func:`find_paths_num` for that.
    """
    return find_paths(
        eq_predicate(value),
        data,
        inside_objects=inside_objects,
        inside_matches=inside_matches,
    )


def find_paths_num(
    value: Any,
    data: Any,
    *,
    inside_objects: bool = False,
    inside_matches: bool = False,
) -> list[str]:
    """Return the paths of values numerically equal to ``value``.

    Numbers are compared as-is and numeric strings such as ``"42"`` or
    ``" 4.2e1 "`` are parsed first. Booleans, ``None`` and other values never
    match.

    Raises:
        InvalidArgumentsError: If ``value`` is not a number or numeric string.
    """
    return find_paths(
        num_predicate(value),
        data,
        inside_objects=inside_objects,
        inside_matches=inside_matches,
    )
