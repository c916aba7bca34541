"""Defaults shared across path finding modules."""

DEFAULT_INSIDE_OBJECTS = False
"""Whether traversal descends into tagged containers (subclass instances, objects)."""

DEFAULT_INSIDE_MATCHES = False
"""Whether traversal keeps descending into a container that matched."""
