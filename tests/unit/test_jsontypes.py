"""Unit tests for JSON value classification, comparison and rendering."""

from __future__ import annotations

import copy
import math
import pickle

import pytest

from schemavalidator.jsontypes import (
    UNDEFINED,
    JsonType,
    is_falsy,
    is_number,
    json_contains,
    json_equal,
    json_type_of,
    render,
    render_json,
    type_mismatch,
)


class TestUndefined:
    """Test the UNDEFINED marker."""

    def test_singleton(self) -> None:
        """Copies and pickles resolve to the same marker."""
        assert copy.copy(UNDEFINED) is UNDEFINED
        assert copy.deepcopy({"a": UNDEFINED})["a"] is UNDEFINED
        assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED

    def test_distinct_from_none(self) -> None:
        assert UNDEFINED is not None
        assert not UNDEFINED
        assert repr(UNDEFINED) == "UNDEFINED"


class TestJsonType:
    """Test JsonType parsing."""

    def test_parse_known_names(self) -> None:
        assert JsonType.parse("string") is JsonType.STRING
        assert JsonType.parse("integer") is JsonType.INTEGER
        assert str(JsonType.NULL) == "null"

    @pytest.mark.parametrize("declared", ["String", "decimal", None, 3, ["string"]])
    def test_parse_unknown(self, declared: object) -> None:
        assert JsonType.parse(declared) is None


class TestTypeGuard:
    """Test runtime type classification."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, "null"),
            (True, "boolean"),
            (0, "number"),
            (1.5, "number"),
            (float("nan"), "number"),
            ("", "string"),
            ([], "array"),
            ((1, 2), "array"),
            ({}, "object"),
            (UNDEFINED, "undefined"),
        ],
    )
    def test_json_type_of(self, value: object, expected: str) -> None:
        assert json_type_of(value) == expected

    def test_booleans_are_not_numbers(self) -> None:
        assert is_number(1)
        assert not is_number(True)

    def test_type_mismatch(self) -> None:
        assert type_mismatch("x", JsonType.STRING) is None
        assert type_mismatch(1, JsonType.INTEGER) == "Value should have been a integer but was of type number"
        assert type_mismatch([], JsonType.OBJECT) == "Value should have been a object but was of type array"


class TestFalsiness:
    """Test JSON-script falsiness."""

    @pytest.mark.parametrize("value", [UNDEFINED, None, False, 0, 0.0, float("nan"), ""])
    def test_falsy(self, value: object) -> None:
        assert is_falsy(value)

    @pytest.mark.parametrize("value", [True, 1, -0.5, "0", " ", [], {}, [0]])
    def test_truthy(self, value: object) -> None:
        assert not is_falsy(value)


class TestJsonEqual:
    """Test structural equality."""

    def test_numbers(self) -> None:
        assert json_equal(1, 1.0)
        assert not json_equal(1, 2)

    def test_booleans_never_equal_numbers(self) -> None:
        assert not json_equal(True, 1)
        assert not json_equal(0, False)
        assert json_equal(False, False)

    def test_nested_structures(self) -> None:
        assert json_equal({"a": [1, {"b": None}]}, {"a": [1.0, {"b": None}]})
        assert not json_equal({"a": [True]}, {"a": [1]})
        assert not json_equal({"a": 1}, {"a": 1, "b": 2})
        assert json_equal([1, 2], (1, 2))

    def test_mixed_types(self) -> None:
        assert not json_equal("1", 1)
        assert not json_equal(None, 0)
        assert not json_equal([], {})

    def test_contains(self) -> None:
        assert json_contains([{"a": 1}, [2]], [2])
        assert not json_contains([1, 2], True)


class TestRender:
    """Test interpolation of values into reasons."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (2, "2"),
            (2.0, "2"),
            (0.1, "0.1"),
            (math.inf, "Infinity"),
            (-math.inf, "-Infinity"),
            (math.nan, "NaN"),
            (True, "true"),
            (None, "null"),
            ("abc", "abc"),
            ([1, "a", None], "1,a,"),
            ({"a": 1}, "[object Object]"),
        ],
    )
    def test_render(self, value: object, expected: str) -> None:
        assert render(value) == expected

    def test_render_json_is_compact(self) -> None:
        assert render_json({"a": [1, 2.0, None, True], "b": "é"}) == '{"a":[1,2,null,true],"b":"é"}'
        assert render_json("x") == '"x"'
