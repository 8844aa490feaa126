"""
Tests for boolean and duration literals.
"""

from datetime import timedelta

import pytest

from loginsrv_config.config.values import format_duration, parse_bool, parse_duration, parse_int


@pytest.mark.parametrize("text", ["1", "t", "T", "TRUE", "true", "True"])
def test_true_literals(text: str) -> None:
    assert parse_bool(text) is True


@pytest.mark.parametrize("text", ["0", "f", "F", "FALSE", "false", "False"])
def test_false_literals(text: str) -> None:
    assert parse_bool(text) is False


@pytest.mark.parametrize("text", ["yes", "on", "42d", "", "tRuE"])
def test_invalid_bool(text: str) -> None:
    with pytest.raises(ValueError):
        parse_bool(text)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("24h", timedelta(hours=24)),
        ("23h23m", timedelta(hours=23, minutes=23)),
        ("5s", timedelta(seconds=5)),
        ("1.5h", timedelta(minutes=90)),
        ("300ms", timedelta(milliseconds=300)),
        ("10us", timedelta(microseconds=10)),
        ("-1m30s", -timedelta(minutes=1, seconds=30)),
        ("0", timedelta(0)),
    ],
)
def test_parse_duration(text: str, expected: timedelta) -> None:
    assert parse_duration(text) == expected


@pytest.mark.parametrize("text", ["42d", "42", "h", "", "1h 2m", "1.2.3s"])
def test_invalid_duration(text: str) -> None:
    with pytest.raises(ValueError):
        parse_duration(text)


def test_format_duration() -> None:
    assert format_duration(timedelta(hours=23, minutes=23)) == "23h23m"
    assert format_duration(timedelta(0)) == "0s"
    assert format_duration(timedelta(milliseconds=1500)) == "1.5s"


def test_largest_duration() -> None:
    assert parse_duration("2562047h") == timedelta(hours=2562047)


@pytest.mark.parametrize("text", ["99999999999h", "2562048h", "-99999999999h"])
def test_duration_out_of_range(text: str) -> None:
    with pytest.raises(ValueError, match="out of range"):
        parse_duration(text)


def test_nanoseconds_in_whole_microseconds() -> None:
    assert parse_duration("1000ns") == timedelta(microseconds=1)


@pytest.mark.parametrize("text", ["1ns", "1500ns", "0.5us"])
def test_sub_microsecond_duration(text: str) -> None:
    with pytest.raises(ValueError, match="finer than a microsecond"):
        parse_duration(text)


@pytest.mark.parametrize("text, expected", [("3", 3), ("-2", -2), ("+7", 7), ("007", 7)])
def test_parse_int(text: str, expected: int) -> None:
    assert parse_int(text) == expected


@pytest.mark.parametrize("text", ["1_000", " 3 ", "3.0", "", "٣", "0x10"])
def test_invalid_int(text: str) -> None:
    with pytest.raises(ValueError):
        parse_int(text)
