"""Path steps, key escaping, and path rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from pyfindpath._errors import (
    ERR_MSG_INVALID_INDEX,
    ERR_MSG_INVALID_KEY,
    InvalidPathError,
)


@dataclass(frozen=True)
class Index:
    """Position of an element within a sequence."""

    index: int

    def __post_init__(self) -> None:
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise InvalidPathError(
                ERR_MSG_INVALID_INDEX,
                f"index step must be an int, got {type(self.index).__name__}",
            )
        if self.index < 0:
            raise InvalidPathError(
                ERR_MSG_INVALID_INDEX,
                f"index step must be non-negative, got {self.index}",
            )

    def render(self) -> str:
        return f"[{self.index}]"


@dataclass(frozen=True)
class Key:
    """Key of an entry within a mapping (or attribute of an object)."""

    key: str

    def __post_init__(self) -> None:
        if not isinstance(self.key, str):
            raise InvalidPathError(
                ERR_MSG_INVALID_KEY,
                f"key step must be a str, got {type(self.key).__name__}",
            )

    def render(self) -> str:
        return "{'" + escape_key(self.key) + "'}"


Step: TypeAlias = Index | Key
Path: TypeAlias = tuple[Step, ...]


def escape_key(text: str) -> str:
    """Escape a mapping key for use inside ``{'...'}``.

    Backslashes are doubled first, then single quotes are backslash-escaped,
    so ``odd'\\`` becomes ``odd\\'\\\\``.
    """
    result = text.replace("\\", "\\\\")
    result = result.replace("'", "\\'")
    return result


def unescape_key(text: str) -> str:
    """Reverse :func:`escape_key` for the body of a parsed key step."""
    out: list[str] = []
    chars = iter(text)
    for ch in chars:
        if ch == "\\":
            out.append(next(chars, ""))
        else:
            out.append(ch)
    return "".join(out)


def render_path(steps: Path | list[Step]) -> str:
    """Render steps as ``{'key'}[0]...``; the empty path renders as ``""``."""
    return "".join(step.render() for step in steps)
