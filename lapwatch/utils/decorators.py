"""
Decorator that times a whole call with a Timer and logs the total.
"""

from __future__ import annotations

import functools
import inspect
import logging
from typing import Any, Callable, Optional, TypeVar

from lapwatch.logging.logger import bind_context, get_logger
from lapwatch.utils.timing import Timer

F = TypeVar("F", bound=Callable[..., Any])


def timed(name: Optional[str] = None, logger: Optional[logging.Logger] = None) -> Callable[[F], F]:
    """
    Log start/end and duration of a sync or async function.

    Usage:
        @timed("load_catalog")
        async def load(...):
            ...

    Produces:
    - span_start
    - span_end (with duration_ms)
    - span_exception (with duration_ms, exception re-raised)
    """

    def decorator(func: F) -> F:
        label = name or func.__qualname__
        log = logger or get_logger("lapwatch.decorators")

        def _finish(timer: Timer, failed: bool) -> None:
            result = timer.finalize()
            extra = bind_context(timer=label, duration_ms=result.total_duration_ms)
            if failed:
                log.exception("span_exception", extra=extra)
            else:
                log.info("span_end", extra=extra)

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                timer = Timer(name=label)
                log.debug("span_start", extra=bind_context(timer=label))
                try:
                    result = await func(*args, **kwargs)
                except BaseException:
                    _finish(timer, failed=True)
                    raise
                _finish(timer, failed=False)
                return result

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            timer = Timer(name=label)
            log.debug("span_start", extra=bind_context(timer=label))
            try:
                result = func(*args, **kwargs)
            except BaseException:
                _finish(timer, failed=True)
                raise
            _finish(timer, failed=False)
            return result

        return wrapper  # type: ignore[return-value]

    return decorator
