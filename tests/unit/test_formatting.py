"""Unit tests for duration formatting."""

from datetime import timedelta

import pytest

from lapwatch import format_duration
from lapwatch.utils.formatting import ns_to_timedelta, timedelta_to_ns, to_nanoseconds


@pytest.mark.parametrize(
    "ns, expected",
    [
        (0, "0.00ns"),
        (1, "1.00ns"),
        (500, "500.00ns"),
        (999, "999.00ns"),
        (1_000, "1.00µs"),
        (1_500, "1.50µs"),
        (12_345, "12.35µs"),
        (999_999, "1000.00µs"),
        (50_000_000, "50.00ms"),
        (80_004_999, "80.00ms"),
        (80_005_000, "80.01ms"),
        (1_000_000_000, "1.00s"),
        (1_500_000_000, "1.50s"),
        (90_000_000_000, "90.00s"),
    ],
)
def test_unit_scaling(ns, expected):
    assert format_duration(ns) == expected


def test_precision():
    assert format_duration(1_234_567, precision=0) == "1ms"
    assert format_duration(1_234_567, precision=3) == "1.235ms"
    assert format_duration(1_234_567, precision=6) == "1.234567ms"


def test_accepts_timedelta():
    assert format_duration(timedelta(milliseconds=80)) == "80.00ms"
    assert format_duration(timedelta(minutes=2)) == "120.00s"
    assert format_duration(timedelta(0)) == "0.00ns"


def test_rejects_negative():
    with pytest.raises(ValueError):
        format_duration(-1)
    with pytest.raises(ValueError):
        format_duration(timedelta(microseconds=-1))


@pytest.mark.parametrize("value", [1.5, "10", None, True])
def test_rejects_non_durations(value):
    with pytest.raises(TypeError):
        to_nanoseconds(value)


def test_timedelta_conversions():
    assert timedelta_to_ns(timedelta(days=1, seconds=2, microseconds=3)) == 86_402_000_003_000
    assert ns_to_timedelta(1_999) == timedelta(microseconds=1)
    assert ns_to_timedelta(timedelta_to_ns(timedelta(milliseconds=50))) == timedelta(milliseconds=50)
