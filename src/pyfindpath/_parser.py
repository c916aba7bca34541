"""Parsing of rendered path strings back into steps."""

from __future__ import annotations

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from pyfindpath._errors import ERR_MSG_INVALID_PATH, InvalidPathError
from pyfindpath._path import Index, Key, Path, unescape_key

PATH_GRAMMAR = r"""
    start: _step*

    _step: index
         | key

    index: "[" INDEX "]"
    key: KEY

    INDEX: /0|[1-9][0-9]*/
    KEY: /\{'(?:[^\\']|\\[\\'])*'\}/
"""


class _StepBuilder(Transformer):
    """Turn the parse tree into a tuple of steps."""

    def start(self, steps: list[Index | Key]) -> Path:
        return tuple(steps)

    def index(self, children: list[Token]) -> Index:
        return Index(int(children[0]))

    def key(self, children: list[Token]) -> Key:
        # Strip the surrounding {' and '}
        return Key(unescape_key(children[0][2:-2]))


_parser = Lark(PATH_GRAMMAR, parser="lalr")
_builder = _StepBuilder()


def parse_path(text: str) -> Path:
    """Parse ``{'key'}[0]...`` into a tuple of ``Key``/``Index`` steps.

    The empty string parses to the empty path (the root).

    Raises:
        InvalidPathError: If ``text`` does not follow the path grammar.
    """
    if not isinstance(text, str):
        raise InvalidPathError(
            ERR_MSG_INVALID_PATH,
            f"path must be a str, got {type(text).__name__}",
        )
    try:
        tree = _parser.parse(text)
    except UnexpectedInput as e:
        raise InvalidPathError(
            ERR_MSG_INVALID_PATH,
            f"cannot parse path {text!r}: {e}",
            wrapped=e,
        ) from e
    return _builder.transform(tree)
