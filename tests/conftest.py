"""Shared test fixtures."""

from collections import OrderedDict

import pytest

from tests.helpers import Box, Point, Record, TaggedDict, TaggedList


@pytest.fixture
def bob():
    return {"bob": [1, 42, 42, {"foo": "fred"}]}


@pytest.fixture
def reversed_keys():
    # Inserted in reverse order; output must still be sorted.
    return {"zed": 1, "mid": 1, "alpha": 1}


@pytest.fixture
def self_referential():
    data = {"name": "loop", "value": 42}
    data["self"] = data
    return data


@pytest.fixture
def tagged_data():
    return {
        "box": Box(answer=42, nested={"deep": 42}),
        "odict": OrderedDict([("answer", 42)]),
        "plain": {"answer": 42},
        "point": Point(42, 7),
        "record": Record(name="r", tags=[42]),
        "tdict": TaggedDict(answer=42),
        "tlist": TaggedList([42]),
    }
