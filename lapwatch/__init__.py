"""
Re-export the timer API for easier imports.

Usage:
    from lapwatch import start_timer

    timer = start_timer()
    timer.checkpoint("load")
    print(timer.finalize().summary(), end="")
"""

from .utils.timing import Record, Timer, TimerResult, start_timer
from .utils.formatting import format_duration
from .utils.decorators import timed
from .utils.exceptions import LapwatchError, TimerFinalizedError, TimerStateError

__all__ = [
    "Record",
    "Timer",
    "TimerResult",
    "start_timer",
    "format_duration",
    "timed",
    "LapwatchError",
    "TimerFinalizedError",
    "TimerStateError",
]
