"""Container and object types shared by the tests."""

from collections import namedtuple
from dataclasses import dataclass
from typing import Any


@dataclass
class Record:
    name: str
    tags: list


class Box:
    def __init__(self, **attrs: Any) -> None:
        self.__dict__.update(attrs)


class TaggedDict(dict):
    pass


class TaggedList(list):
    pass


Point = namedtuple("Point", ["x", "y"])
