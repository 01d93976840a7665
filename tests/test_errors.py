"""Tests for the shared error base."""

import pytest

from fundamentals.css import SelectorError, SelectorParseError, parse_selector
from fundamentals.errors import SourceError
from fundamentals.objects import SerializationError, from_json


class TestSourceError:
    def test_message_and_position(self):
        err = SourceError("bad", line=3, column=7)
        assert str(err) == "bad"
        assert err.line == 3
        assert err.column == 7
        assert err.location == "3:7"

    def test_position_defaults(self):
        err = SourceError("bad")
        assert err.line is None
        assert err.column is None
        assert err.location == ""

    def test_line_only(self):
        assert SourceError("bad", line=2).location == "2"


class TestSubclasses:
    def test_hierarchy(self):
        assert issubclass(SerializationError, SourceError)
        assert issubclass(SelectorParseError, SourceError)
        assert issubclass(SelectorParseError, SelectorError)

    def test_selector_parse_error_position(self):
        with pytest.raises(SelectorParseError) as exc_info:
            parse_selector("div$")
        assert exc_info.value.location == "1:4"

    def test_serialization_error_position(self):
        with pytest.raises(SerializationError) as exc_info:
            from_json(dict, "{\n  oops\n}")
        assert exc_info.value.location == "2:3"
