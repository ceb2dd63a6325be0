"""Tests for value-to-literal formatting."""

from collections.abc import Sequence
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from fractions import Fraction
from typing import Any

import pytest

from sqlinterp import InterpolationConfig, Opaque, SQLArray, ValueList, escape_string, format_argument
from sqlinterp.core.formatting import format_array, format_bytes, format_timestamp, format_value_list


class CustomValuer:
    def __init__(self, value: Any) -> None:
        self.value = value

    def sql_value(self) -> Any:
        return self.value


class FailingValuer:
    def sql_value(self) -> Any:
        msg = "cannot resolve"
        raise RuntimeError(msg)


class Point:
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


class BrokenStr:
    def __str__(self) -> str:
        msg = "no text"
        raise ValueError(msg)


class Rows(Sequence):
    """Minimal non-list sequence."""

    def __init__(self, *items: Any) -> None:
        self._items = items

    def __getitem__(self, index: Any) -> Any:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "NULL"),
        ("hello", "'hello'"),
        ("", "''"),
        (42, "42"),
        (-7, "-7"),
        (0, "0"),
        (2**70, str(2**70)),
        (True, "true"),
        (False, "false"),
        (3.14, "3.140000"),
        (-0.5, "-0.500000"),
        (1e20, "100000000000000000000.000000"),
        (Fraction(1, 4), "0.250000"),
        (Fraction(10**400), "'" + str(10**400) + "'"),
        (float("inf"), "inf"),
        (float("-inf"), "-inf"),
        (float("nan"), "nan"),
        (datetime(2024, 2, 12, 15, 4, 5, 999999), "'2024-02-12 15:04:05.999999'"),
        (datetime(2024, 2, 12, 15, 4, 5), "'2024-02-12 15:04:05.000000'"),
        (b"\x01\x02\x03", "'\\x010203'"),
        (b"", "'\\x'"),
        (bytearray(b"\xde\xad"), "'\\xdead'"),
        (memoryview(b"\xbe\xef"), "'\\xbeef'"),
        (CustomValuer("custom"), "'custom'"),
    ],
    ids=[
        "none",
        "string",
        "empty_string",
        "int",
        "negative_int",
        "zero",
        "big_int",
        "bool_true",
        "bool_false",
        "float",
        "negative_float",
        "large_float_no_exponent",
        "fraction",
        "fraction_beyond_float_range",
        "positive_infinity",
        "negative_infinity",
        "nan",
        "timestamp",
        "timestamp_zero_micros",
        "bytes",
        "empty_bytes",
        "bytearray",
        "memoryview",
        "custom_valuer",
    ],
)
def test_format_argument(value: Any, expected: str) -> None:
    assert format_argument(value) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("hello", "'hello'"),
        ("O'Connor", "'O''Connor'"),
        ("It's O'Connor's", "'It''s O''Connor''s'"),
        ("''", "''''''"),
        ("back\\slash", "'back\\slash'"),
        ("line\nbreak\t\x00", "'line\nbreak\t\x00'"),
        ("ünïcödé", "'ünïcödé'"),
    ],
)
def test_escape_string(text: str, expected: str) -> None:
    assert escape_string(text) == expected
    assert format_argument(text) == expected


@pytest.mark.parametrize("text", ["", "'", "a'b'c", "'leading", "trailing'", "plain", "''double''"])
def test_escaped_string_unescapes_to_original(text: str) -> None:
    literal = format_argument(text)

    assert literal.startswith("'")
    assert literal.endswith("'")
    assert literal[1:-1].replace("''", "'") == text


@pytest.mark.parametrize("data", [b"", b"\x00", b"\xff\x10", bytes(range(256))])
def test_format_bytes_hex_length(data: bytes) -> None:
    literal = format_bytes(data)
    hex_part = literal[3:-1]

    assert literal.startswith("'\\x")
    assert len(hex_part) == 2 * len(data)
    assert hex_part == hex_part.lower()
    assert bytes.fromhex(hex_part) == data


def test_format_timestamp_keeps_wall_clock_time() -> None:
    tz = timezone(timedelta(hours=5))
    value = datetime(2024, 2, 12, 15, 4, 5, 123, tzinfo=tz)

    assert format_timestamp(value) == "'2024-02-12 15:04:05.000123'"
    assert format_argument(value) == "'2024-02-12 15:04:05.000123'"


def test_format_timestamp_pads_early_years() -> None:
    assert format_argument(datetime(1, 1, 1)) == "'0001-01-01 00:00:00.000000'"


def test_failing_valuer_formats_as_null() -> None:
    assert format_argument(FailingValuer()) == "NULL"


def test_valuer_resolving_to_none_formats_as_null() -> None:
    assert format_argument(CustomValuer(None)) == "NULL"


@pytest.mark.parametrize(
    ("resolved", "expected"),
    [
        (5, "5"),
        (b"\x0a", "'\\x0a'"),
        (["a", "b"], "('a','b')"),
        (datetime(2020, 1, 1), "'2020-01-01 00:00:00.000000'"),
    ],
)
def test_valuer_result_is_dispatched(resolved: Any, expected: str) -> None:
    assert format_argument(CustomValuer(resolved)) == expected


def test_nested_valuer_is_not_resolved_twice() -> None:
    inner = CustomValuer(1)
    assert format_argument(CustomValuer(inner)) == escape_string(str(inner))


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (["admin", "user"], "('admin','user')"),
        ((1, 2, 3), "(1,2,3)"),
        ([], "()"),
        (range(3), "(0,1,2)"),
        (Rows("a", "b"), "('a','b')"),
        ([1, "a"], "ARRAY[1,'a']"),
        ([None, 1], "ARRAY[NULL,1]"),
        ([True, 1], "ARRAY[true,1]"),
        ([1, 1.5], "ARRAY[1,1.500000]"),
        ([[1, 2], [3]], "ARRAY[(1,2),(3)]"),
        ([CustomValuer("x"), CustomValuer("y")], "ARRAY['x','y']"),
        (Rows(1, "b"), "ARRAY[1,'b']"),
    ],
)
def test_format_sequences(value: Any, expected: str) -> None:
    assert format_argument(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (SQLArray([1, 2, 3]), "ARRAY[1,2,3]"),
        (SQLArray([]), "ARRAY[]"),
        (SQLArray(["a", None, b"\x01"]), "ARRAY['a',NULL,'\\x01']"),
        (SQLArray([SQLArray([1]), ValueList([2])]), "ARRAY[ARRAY[1],(2)]"),
        (ValueList(["a", "b"]), "('a','b')"),
        (ValueList([]), "()"),
        (ValueList([1, "mixed"]), "(1,'mixed')"),
    ],
)
def test_format_explicit_collections(value: Any, expected: str) -> None:
    assert format_argument(value) == expected


def test_format_array_and_value_list_helpers() -> None:
    assert format_array(["a", 1]) == "ARRAY['a',1]"
    assert format_value_list(["a", 1]) == "('a',1)"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Decimal("1.50"), "'1.50'"),
        (Point(1, 2), "'(1,2)'"),
        ({"k": "v"}, "'{''k'': ''v''}'"),
        (Opaque(Point(3, 4)), "'(3,4)'"),
        (Opaque("it's", render=str.upper), "'IT''S'"),
    ],
)
def test_format_generic_fallback(value: Any, expected: str) -> None:
    assert format_argument(value) == expected


def test_opaque_renderer_failure_falls_back_to_str() -> None:
    def explode(_: Any) -> str:
        msg = "boom"
        raise RuntimeError(msg)

    assert format_argument(Opaque(Point(5, 6), render=explode)) == "'(5,6)'"


def test_broken_str_falls_back_to_default_repr() -> None:
    value = BrokenStr()
    assert format_argument(value) == escape_string(object.__repr__(value))


@pytest.mark.parametrize("value", [0, 1, -1, 10**30, -(10**30), 123456789])
def test_integers_are_plain_decimal(value: int) -> None:
    assert format_argument(value) == str(value)


def test_float_precision_from_config() -> None:
    assert format_argument(1.23, InterpolationConfig(float_precision=0)) == "1"
    assert format_argument(1.23, InterpolationConfig(float_precision=3)) == "1.230"


def test_float_precision_applies_to_nested_values() -> None:
    config = InterpolationConfig(float_precision=1)
    assert format_argument([1.25, 2.0], config) == "(1.2,2.0)"


def test_type_coercion_map_is_applied() -> None:
    config = InterpolationConfig(type_coercion_map={Decimal: float, Point: lambda p: [p.x, p.y]})

    assert format_argument(Decimal("2.5"), config) == "2.500000"
    assert format_argument(Point(1, 2), config) == "(1,2)"


def test_type_coercion_map_applies_to_subclasses() -> None:
    class Point3(Point):
        pass

    config = InterpolationConfig(type_coercion_map={Point: lambda p: p.x})
    assert format_argument(Point3(9, 0), config) == "9"


def test_type_coercion_runs_after_valuer() -> None:
    config = InterpolationConfig(type_coercion_map={Decimal: int})
    assert format_argument(CustomValuer(Decimal("7.9")), config) == "7"


def test_type_coercion_to_none_formats_as_null() -> None:
    config = InterpolationConfig(type_coercion_map={Point: lambda _: None})
    assert format_argument(Point(0, 0), config) == "NULL"


def test_formatting_does_not_mutate_input() -> None:
    value = ["a", [1, 2], {"k": 1}]
    snapshot = [list(item) if isinstance(item, list) else item for item in value]

    format_argument(value)

    assert value == snapshot
