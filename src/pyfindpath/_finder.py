"""Depth-first search for paths to values matching a predicate."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pyfindpath._kinds import Kind, classify, is_tagged, sorted_entries
from pyfindpath._path import Index, Key, Path, render_path
from pyfindpath.options import FindOptions

logger = logging.getLogger(__name__)

Predicate = Callable[[Any], Any]


def _find(
    predicate: Predicate,
    value: Any,
    path: Path,
    options: FindOptions,
    seen: frozenset[int],
) -> list[Path]:
    kind = classify(value)

    # Only ancestors on this branch are in ``seen``, so a value shared by
    # two sibling paths is still found through both.
    if kind is not Kind.SCALAR:
        if id(value) in seen:
            logger.debug("pruning cycle at %r", render_path(path))
            return []
        seen = seen | {id(value)}

    results: list[Path] = []

    if predicate(value):
        if not options.inside_matches:
            return [path]
        results.append(path)

    if not options.inside_objects and is_tagged(value):
        return results

    if kind is Kind.MAPPING:
        for key, child in sorted_entries(value):
            results.extend(_find(predicate, child, path + (Key(key),), options, seen))
    elif kind is Kind.SEQUENCE:
        for i, child in enumerate(value):
            results.extend(_find(predicate, child, path + (Index(i),), options, seen))

    return results


def find(
    predicate: Predicate,
    data: Any,
    options: FindOptions | None = None,
) -> list[Path]:
    """Return the paths, in depth-first pre-order, of values matching ``predicate``.

    Mapping keys are visited in ascending ``str(key)`` order and sequence
    elements in index order. A container that appears again among its own
    ancestors is skipped, so self-referential data terminates.

    Args:
        predicate: Called with each visited value; truthy means a match.
            Exceptions it raises propagate unchanged.
        data: The root value. A matching scalar root yields ``[()]``.
        options: Descent policy. Defaults to ``FindOptions()``.

    Returns:
        One tuple of ``Index``/``Key`` steps per match.
    """
    if options is None:
        options = FindOptions()
    paths = _find(predicate, data, (), options, frozenset())
    logger.debug("found %d matching path(s)", len(paths))
    return paths
