"""
Test the parser catalog.
"""

import math
from datetime import timedelta

import pytest

from typedenv.parsers import (
    INT64_MAX,
    INT64_MIN,
    Parsers,
    format_duration,
    parse_bool,
    parse_duration,
    parse_float64,
    parse_identity,
    parse_int,
    parse_int64,
)


def test_identity():
    """Test identity parser returns input verbatim."""
    assert parse_identity("") == ""
    assert parse_identity(" a b ") == " a b "


@pytest.mark.parametrize("text,expected", [
    ("0", 0),
    ("42", 42),
    ("-17", -17),
    ("+5", 5),
    ("007", 7),
])
def test_parse_int_valid(text, expected):
    """Test parsing valid integers."""
    assert parse_int(text) == expected


@pytest.mark.parametrize("text", ["", " 1", "1 ", "1_000", "1.0", "0x10", "abc", "-"])
def test_parse_int_invalid(text):
    """Test integers with invalid syntax."""
    with pytest.raises(ValueError):
        parse_int(text)


def test_parse_int64_bounds():
    """Test int64 range limits."""
    assert parse_int64(str(INT64_MAX)) == INT64_MAX
    assert parse_int64(str(INT64_MIN)) == INT64_MIN
    with pytest.raises(ValueError):
        parse_int64(str(INT64_MAX + 1))
    with pytest.raises(ValueError):
        parse_int64(str(INT64_MIN - 1))


def test_parse_int_unbounded():
    """Test that plain int is not limited to 64 bits."""
    assert parse_int(str(INT64_MAX + 1)) == INT64_MAX + 1


@pytest.mark.parametrize("text,expected", [
    ("2", 2.0),
    ("-1.5", -1.5),
    ("1e3", 1000.0),
    (".5", 0.5),
    ("Inf", math.inf),
    ("-infinity", -math.inf),
])
def test_parse_float64_valid(text, expected):
    """Test parsing valid floats."""
    assert parse_float64(text) == expected


def test_parse_float64_nan():
    """Test parsing NaN."""
    assert math.isnan(parse_float64("NaN"))


@pytest.mark.parametrize("text", [
    "",
    " 1.0",
    "1_0",
    "abc",
    "1e400",
    "1.2.3",
    "\N{ARABIC-INDIC DIGIT ONE}\N{ARABIC-INDIC DIGIT TWO}",
    "\N{FULLWIDTH DIGIT ONE}\N{FULLWIDTH DIGIT TWO}",
    "+nan",
    "-NaN",
    "--inf",
    "0x10",
])
def test_parse_float64_invalid(text):
    """Test floats with invalid syntax or out of range."""
    with pytest.raises(ValueError):
        parse_float64(text)


@pytest.mark.parametrize("text", ["1", "t", "T", "true", "TRUE", "True"])
def test_parse_bool_true(text):
    """Test truthy literals."""
    assert parse_bool(text) is True


@pytest.mark.parametrize("text", ["0", "f", "F", "false", "FALSE", "False"])
def test_parse_bool_false(text):
    """Test falsy literals."""
    assert parse_bool(text) is False


@pytest.mark.parametrize("text", ["", "yes", "no", "on", "2", " true"])
def test_parse_bool_invalid(text):
    """Test literals outside the boolean grammar."""
    with pytest.raises(ValueError):
        parse_bool(text)


@pytest.mark.parametrize("text,expected", [
    ("0", timedelta(0)),
    ("-0", timedelta(0)),
    ("2s", timedelta(seconds=2)),
    ("300ms", timedelta(milliseconds=300)),
    ("2h45m", timedelta(hours=2, minutes=45)),
    ("1h15m30.5s", timedelta(hours=1, minutes=15, seconds=30.5)),
    ("-1.5h", timedelta(hours=-1.5)),
    ("+10m", timedelta(minutes=10)),
    (".5s", timedelta(milliseconds=500)),
    ("1.s", timedelta(seconds=1)),
    ("10us", timedelta(microseconds=10)),
    ("10µs", timedelta(microseconds=10)),
    ("10μs", timedelta(microseconds=10)),
    ("1500ns", timedelta(microseconds=2)),
    ("1499ns", timedelta(microseconds=1)),
    ("1m1m", timedelta(minutes=2)),
])
def test_parse_duration_valid(text, expected):
    """Test parsing valid durations."""
    assert parse_duration(text) == expected


@pytest.mark.parametrize("text", [
    "",
    "-",
    "+",
    "10",
    "00",
    ".s",
    "3d",
    "1h-2m",
    "1.5.5s",
    " 1s",
    "INVALID DURATION FORMAT",
    "9223372037s",
])
def test_parse_duration_invalid(text):
    """Test durations with invalid syntax or out of range."""
    with pytest.raises(ValueError):
        parse_duration(text)


@pytest.mark.parametrize("value,expected", [
    (timedelta(0), "0s"),
    (timedelta(microseconds=250), "250µs"),
    (timedelta(milliseconds=300), "300ms"),
    (timedelta(microseconds=1500), "1.5ms"),
    (timedelta(seconds=2), "2s"),
    (timedelta(seconds=90), "1m30s"),
    (timedelta(hours=2, minutes=45), "2h45m0s"),
    (timedelta(hours=1, seconds=0.25), "1h0m0.25s"),
    (timedelta(seconds=-1.5), "-1.5s"),
])
def test_format_duration(value, expected):
    """Test formatting durations."""
    assert format_duration(value) == expected


def test_format_duration_parses_back():
    """Test that formatted durations are accepted by the parser."""
    value = timedelta(days=3, hours=4, milliseconds=7)
    assert parse_duration(format_duration(value)) == value


def test_parsers_namespace():
    """Test that the namespace exposes the catalog."""
    assert Parsers.identity is parse_identity
    assert Parsers.int is parse_int
    assert Parsers.int64 is parse_int64
    assert Parsers.float64 is parse_float64
    assert Parsers.bool is parse_bool
    assert Parsers.duration is parse_duration
