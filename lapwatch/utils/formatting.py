"""
Human-readable duration formatting.

Durations are rendered in the largest unit that keeps the integer part
non-zero (s, ms, µs, ns) with a fixed number of decimals:

    >>> format_duration(50_000_000)
    '50.00ms'
    >>> format_duration(timedelta(seconds=1, milliseconds=500))
    '1.50s'
"""

from __future__ import annotations

from datetime import timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Tuple, Union

NANOS_PER_MICRO = 1_000
NANOS_PER_MILLI = 1_000_000
NANOS_PER_SEC = 1_000_000_000

DurationLike = Union[int, timedelta]

_UNITS: Tuple[Tuple[int, str], ...] = (
    (NANOS_PER_SEC, "s"),
    (NANOS_PER_MILLI, "ms"),
    (NANOS_PER_MICRO, "µs"),
    (1, "ns"),
)


def timedelta_to_ns(value: timedelta) -> int:
    """Exact integer nanoseconds for a timedelta (microsecond resolution)."""
    return ((value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds) * NANOS_PER_MICRO


def ns_to_timedelta(value: int) -> timedelta:
    # timedelta cannot hold sub-microsecond parts
    return timedelta(microseconds=value // NANOS_PER_MICRO)


def to_nanoseconds(value: DurationLike) -> int:
    if isinstance(value, timedelta):
        ns = timedelta_to_ns(value)
    elif isinstance(value, int) and not isinstance(value, bool):
        ns = value
    else:
        raise TypeError(f"Expected int nanoseconds or timedelta, got {type(value).__name__}")
    if ns < 0:
        raise ValueError(f"Duration must be non-negative, got {ns}ns")
    return ns


def format_duration(value: DurationLike, precision: int = 2) -> str:
    """
    Format a duration with a unit picked from its magnitude.

    The unit is chosen before rounding, so 999_999ns renders as
    '1000.00µs' rather than being promoted to milliseconds.
    """
    ns = to_nanoseconds(value)
    for scale, unit in _UNITS:
        if ns >= scale:
            break
    quantum = Decimal(1).scaleb(-precision)
    scaled = (Decimal(ns) / Decimal(scale)).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{scaled:f}{unit}"
