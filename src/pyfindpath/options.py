"""Traversal options for path finding."""

from __future__ import annotations

from dataclasses import dataclass

from pyfindpath._constants import DEFAULT_INSIDE_MATCHES, DEFAULT_INSIDE_OBJECTS


@dataclass(frozen=True)
class FindOptions:
    """Descent policy for a single traversal.

    Attributes:
        inside_objects: Descend into tagged containers (subclass instances
            of list/tuple/dict and objects with an instance ``__dict__``)
            the same way as plain lists and dicts.
        inside_matches: Keep searching inside a container whose own value
            matched, emitting the container's path before its descendants.
    """

    inside_objects: bool = DEFAULT_INSIDE_OBJECTS
    inside_matches: bool = DEFAULT_INSIDE_MATCHES

    @classmethod
    def from_kwargs(
        cls,
        *,
        inside_objects: bool | None = None,
        inside_matches: bool | None = None,
    ) -> FindOptions:
        kwargs: dict[str, bool] = {}
        if inside_objects is not None:
            kwargs["inside_objects"] = bool(inside_objects)
        if inside_matches is not None:
            kwargs["inside_matches"] = bool(inside_matches)
        return cls(**kwargs)
