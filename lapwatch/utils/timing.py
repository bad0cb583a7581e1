"""
Checkpoint timer: measures the time between successive named checkpoints.

Usage:

    timer = start_timer()
    load()
    timer.checkpoint("load")
    transform()
    timer.checkpoint("transform")
    result = timer.finalize()
    print(result.summary(), end="")

Durations are read from a monotonic clock (time.perf_counter_ns) and kept
as integer nanoseconds; `duration` / `total_duration` expose them as
datetime.timedelta.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Callable, List, Optional

from lapwatch.config import settings
from lapwatch.logging.logger import bind_context, get_logger
from lapwatch.utils.exceptions import TimerFinalizedError
from lapwatch.utils.formatting import NANOS_PER_MILLI, format_duration, ns_to_timedelta

Clock = Callable[[], int]

TOTAL_LABEL = "Total Duration"


@dataclass(frozen=True)
class Record:
    """One measured interval between two checkpoints."""

    name: str
    duration_ns: int

    def __post_init__(self) -> None:
        if self.duration_ns < 0:
            raise ValueError(f"duration_ns cannot be negative, got {self.duration_ns}")

    @property
    def duration(self) -> timedelta:
        return ns_to_timedelta(self.duration_ns)

    @property
    def duration_ms(self) -> float:
        return self.duration_ns / NANOS_PER_MILLI


@dataclass(repr=False)
class TimerResult:
    """Records of a finalized Timer plus the creation-to-finalize total."""

    records: List[Record] = field(default_factory=list)
    total_duration_ns: int = 0

    @property
    def total_duration(self) -> timedelta:
        return ns_to_timedelta(self.total_duration_ns)

    @property
    def total_duration_ms(self) -> float:
        return self.total_duration_ns / NANOS_PER_MILLI

    def summary(self, precision: Optional[int] = None) -> str:
        """Return one "<name>: <duration>" line per record, then the total."""
        precision = settings.DURATION_PRECISION if precision is None else precision
        lines = [f"{r.name}: {format_duration(r.duration_ns, precision)}\n" for r in self.records]
        lines.append(f"{TOTAL_LABEL}: {format_duration(self.total_duration_ns, precision)}\n")
        return "".join(lines)

    def debug(self, multiline: bool = False, precision: Optional[int] = None) -> str:
        """
        Diagnostic rendering. Compact is a single line, multiline puts one
        entry per line indented by two spaces.
        """
        precision = settings.DURATION_PRECISION if precision is None else precision
        indent = "  " if multiline else ""
        open_sep = "\n" if multiline else " "
        entry_sep = "\n" if multiline else ", "

        out = [f"{type(self).__name__} {{{open_sep}"]
        for r in self.records:
            out.append(f"{indent}{r.name}: {format_duration(r.duration_ns, precision)}{entry_sep}")
        out.append(f"{indent}{TOTAL_LABEL}: {format_duration(self.total_duration_ns, precision)}{open_sep}")
        out.append("}")
        return "".join(out)

    def __repr__(self) -> str:
        return self.debug()

    def __format__(self, format_spec: str) -> str:
        if format_spec == "#":
            return self.debug(multiline=True)
        if format_spec == "":
            return self.debug()
        raise ValueError(f"Invalid format specifier {format_spec!r} for {type(self).__name__}")

    def log(
        self,
        logger: Optional[logging.Logger] = None,
        level: int = logging.INFO,
        precision: Optional[int] = None,
    ) -> None:
        """Write every summary line to the logger."""
        precision = settings.DURATION_PRECISION if precision is None else precision
        logger = logger or get_logger("lapwatch.timer")
        for r in self.records:
            logger.log(
                level,
                "%s: %s",
                r.name,
                format_duration(r.duration_ns, precision),
                extra=bind_context(checkpoint=r.name, duration_ms=r.duration_ms),
            )
        logger.log(
            level,
            "%s: %s",
            TOTAL_LABEL,
            format_duration(self.total_duration_ns, precision),
            extra=bind_context(duration_ms=self.total_duration_ms),
        )

    # ------------------------------------------------------------------
    # Serialization shortcuts (see lapwatch.schemas)
    # ------------------------------------------------------------------

    def to_dict(self) -> dict:
        from lapwatch.schemas import TimerResultSchema

        return TimerResultSchema.from_result(self).model_dump(mode="json")

    def to_json(self) -> str:
        from lapwatch.schemas import TimerResultSchema

        return TimerResultSchema.from_result(self).model_dump_json()

    @classmethod
    def from_json(cls, data: str) -> "TimerResult":
        from lapwatch.schemas import TimerResultSchema

        return TimerResultSchema.parse_payload(data).to_result()


class Timer:
    """
    Accumulates named interval measurements until finalize().

    A timer is single-use: once finalize() has returned, both checkpoint()
    and finalize() raise TimerFinalizedError. Not safe for concurrent
    checkpoint() calls on the same instance.
    """

    def __init__(self, name: Optional[str] = None, clock: Optional[Clock] = None) -> None:
        self.name = name
        self._clock: Clock = clock or time.perf_counter_ns
        self._logger = get_logger("lapwatch.timer")
        now = self._clock()
        self.created_at: int = now
        self.last_checkpoint_at: int = now
        self.records: List[Record] = []
        self.result: Optional[TimerResult] = None
        self._finalized = False

    @property
    def finalized(self) -> bool:
        return self._finalized

    @property
    def elapsed_ms(self) -> float:
        """Milliseconds since creation, or the final total once finalized."""
        if self.result is not None:
            return self.result.total_duration_ms
        return (self._clock() - self.created_at) / NANOS_PER_MILLI

    def checkpoint(self, name: str) -> None:
        """Record the time since the previous checkpoint (or creation) as `name`."""
        if self._finalized:
            raise TimerFinalizedError("checkpoint", self.name)

        now = self._clock()
        record = Record(name=name, duration_ns=max(0, now - self.last_checkpoint_at))
        self.records.append(record)
        self.last_checkpoint_at = now

        if settings.LOG_CHECKPOINTS:
            self._logger.debug(
                "checkpoint",
                extra=bind_context(timer=self.name, checkpoint=name, duration_ms=record.duration_ms),
            )

    def finalize(self) -> TimerResult:
        """End measurement; the timer cannot be used afterwards."""
        if self._finalized:
            raise TimerFinalizedError("finalize", self.name)

        total = max(0, self._clock() - self.created_at)
        records, self.records = self.records, []
        self._finalized = True
        self.result = TimerResult(records=records, total_duration_ns=total)

        self._logger.debug(
            "timer_finalized records=%d",
            len(records),
            extra=bind_context(timer=self.name, duration_ms=self.result.total_duration_ms),
        )
        return self.result

    def __enter__(self) -> "Timer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._finalized:
            self.finalize()

    def __repr__(self) -> str:
        state = "finalized" if self._finalized else "active"
        return f"Timer(name={self.name!r}, records={len(self.records)}, state={state})"


def start_timer(name: Optional[str] = None, clock: Optional[Clock] = None) -> Timer:
    """Return a started Timer instance."""
    return Timer(name=name, clock=clock)
