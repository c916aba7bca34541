"""Error raise-site tests: short message in str(), detail in internal()."""

import pytest
from lark.exceptions import UnexpectedInput

from pyfindpath import FindPathError, Index, Key, find_paths, parse_path
from pyfindpath._errors import InvalidArgumentsError, InvalidPathError
from pyfindpath._predicates import num_predicate


class TestPathParseErrors:
    @pytest.mark.parametrize("text", ["[01]", "{'a}"])
    def test_lark_error_kept(self, text):
        with pytest.raises(InvalidPathError) as exc_info:
            parse_path(text)
        err = exc_info.value
        assert str(err) == "invalid path expression"
        assert isinstance(err.wrapped, UnexpectedInput)
        assert err.__cause__ is err.wrapped
        assert str(err.wrapped) in err.internal()
        assert repr(text) in err.internal()

    def test_non_string_path(self):
        with pytest.raises(InvalidPathError) as exc_info:
            parse_path(42)
        err = exc_info.value
        assert str(err) == "invalid path expression"
        assert err.wrapped is None
        assert "got int" in err.internal()


class TestStepErrors:
    def test_negative_index(self):
        with pytest.raises(InvalidPathError) as exc_info:
            Index(-1)
        assert str(exc_info.value) == "invalid index step"
        assert "non-negative, got -1" in exc_info.value.internal()

    def test_bool_index(self):
        with pytest.raises(InvalidPathError) as exc_info:
            Index(True)
        assert str(exc_info.value) == "invalid index step"
        assert "got bool" in exc_info.value.internal()

    def test_non_string_key(self):
        with pytest.raises(InvalidPathError) as exc_info:
            Key(3)
        assert str(exc_info.value) == "invalid key step"
        assert "got int" in exc_info.value.internal()


class TestArgumentErrors:
    def test_non_numeric_target(self):
        with pytest.raises(InvalidArgumentsError) as exc_info:
            num_predicate(object())
        err = exc_info.value
        assert str(err) == "numeric target required"
        assert "got object" in err.internal()
        assert err.wrapped is None

    def test_non_callable_predicate(self):
        with pytest.raises(InvalidArgumentsError) as exc_info:
            find_paths(None, {"a": 1})
        assert str(exc_info.value) == "predicate must be callable"
        assert "got NoneType" in exc_info.value.internal()


@pytest.mark.parametrize(
    "trigger",
    [
        lambda: parse_path("{bob}"),
        lambda: Index(-1),
        lambda: Key(None),
        lambda: num_predicate("fred"),
        lambda: find_paths("fred", {}),
    ],
)
def test_raise_sites_share_base(trigger):
    with pytest.raises(FindPathError):
        trigger()
