"""Following rendered paths back into a data structure."""

from __future__ import annotations

from typing import Any

from pyfindpath._kinds import Kind, classify, mapping_items
from pyfindpath._parser import parse_path
from pyfindpath._path import Key, Path, Step


class _PathMissing:
    """Sentinel for paths that do not resolve."""

    def __repr__(self) -> str:
        return "PATH_MISSING"


PATH_MISSING: _PathMissing = _PathMissing()


def _lookup_key(container: Any, key: str) -> Any:
    items = mapping_items(container)
    if key in items:
        return items[key]
    # Non-string keys are rendered with str(), so match on that.
    for candidate in sorted(items, key=str):
        if str(candidate) == key:
            return items[candidate]
    return PATH_MISSING


def _follow(current: Any, step: Step) -> Any:
    kind = classify(current)
    if isinstance(step, Key):
        if kind is not Kind.MAPPING:
            return PATH_MISSING
        return _lookup_key(current, step.key)

    if kind is not Kind.SEQUENCE or step.index >= len(current):
        return PATH_MISSING
    return current[step.index]


def get_path(data: Any, path: str | Path | list[Step]) -> Any:
    """Resolve ``path`` (a rendered string or a sequence of steps) in ``data``.

    Returns ``PATH_MISSING`` if any step is unavailable.

    Raises:
        InvalidPathError: If ``path`` is a string that cannot be parsed.
    """
    steps = parse_path(path) if isinstance(path, str) else path

    current = data
    for step in steps:
        current = _follow(current, step)
        if current is PATH_MISSING:
            return PATH_MISSING
    return current


__all__ = ["PATH_MISSING", "get_path"]
