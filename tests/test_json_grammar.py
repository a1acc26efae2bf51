"""Tests for the canonical JSON-like serializer."""

from __future__ import annotations

import json

from mail_canon.conversion.values import (
    NULL,
    Array,
    Boolean,
    Number,
    Object,
    String,
)
from mail_canon.serialization import serialize


def test_scalars() -> None:
    assert serialize(NULL) == "null"
    assert serialize(Boolean(True)) == "true"
    assert serialize(Boolean(False)) == "false"
    assert serialize(Number(5)) == "5"
    assert serialize(Number(1.5)) == "1.5"
    assert serialize(Number(-0.25)) == "-0.25"


def test_non_finite_number_renders_null() -> None:
    assert serialize(Number(float("inf"))) == "null"
    assert serialize(Number(float("nan"))) == "null"


def test_string_escaping() -> None:
    assert serialize(String('a"b\nc')) == '"a\\"b\\nc"'
    assert serialize(String("\\\r\t\b\f")) == '"\\\\\\r\\t\\b\\f"'
    assert serialize(String("\x01\x1f\x7f\x9f")) == '"\\u0001\\u001f\\u007f\\u009f"'
    assert serialize(String("café ☃")) == '"café ☃"'


def test_empty_containers() -> None:
    assert serialize(Array(())) == "[]"
    assert serialize(Object({})) == "{}"


def test_nested_layout_sorts_keys() -> None:
    value = Object({"b": Number(1), "a": Array((String("x"), NULL))})

    assert serialize(value) == (
        "{\n"
        '  "a": [\n'
        '    "x",\n'
        "    null\n"
        "  ],\n"
        '  "b": 1\n'
        "}"
    )


def test_key_order_is_independent_of_insertion_order() -> None:
    first = Object({"z": String("1"), "A": String("2"), "a": String("3")})
    second = Object({"a": String("3"), "z": String("1"), "A": String("2")})

    assert serialize(first) == serialize(second)
    assert serialize(first).index('"A"') < serialize(first).index('"a"')


def test_custom_indentation_and_newline() -> None:
    value = Array((NULL, Boolean(True)))

    rendered = serialize(value, indent="\t", newline="\r\n")

    assert rendered == "[\r\n\tnull,\r\n\ttrue\r\n]"


def test_output_is_valid_json_and_repeatable() -> None:
    value = Object(
        {
            "text": String("line\u0000break"),
            "list": Array((Number(1), Object({"k": Boolean(False)}))),
        }
    )

    first = serialize(value)

    assert first == serialize(value)
    assert json.loads(first) == {
        "list": [1, {"k": False}],
        "text": "line\u0000break",
    }
