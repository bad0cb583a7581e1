"""
Shared exception hierarchy for lapwatch.

Everything raised by the package is a LapwatchError (or subclass) carrying an LW code.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from lapwatch.utils.error_codes import (
    CONFIG_NOT_FOUND,
    SERIALIZATION_FAILED,
    TIMER_FINALIZED,
    TIMER_STATE,
    ErrorInfo,
    get_error_info,
)


class LapwatchError(Exception):
    """Base exception for all lapwatch errors."""

    def __init__(
        self,
        code: str,
        message: Optional[str] = None,
        *,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.info: ErrorInfo = get_error_info(code)
        self.code: str = self.info.code
        self.detail: str = message or self.info.description
        self.details: Dict[str, Any] = details or {}
        super().__init__(f"{self.code}: {self.detail}")

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.detail,
                "details": self.details,
            }
        }


class TimerStateError(LapwatchError):
    """Timer used in a state that does not allow the operation."""

    def __init__(self, message: Optional[str] = None, *, code: str = TIMER_STATE, **details: Any) -> None:
        super().__init__(code, message, details=details)


class TimerFinalizedError(TimerStateError):
    """checkpoint() or finalize() called on a finalized timer."""

    def __init__(self, operation: str, timer: Optional[str] = None) -> None:
        details: Dict[str, Any] = {"operation": operation}
        if timer:
            details["timer"] = timer
        super().__init__(
            f"Cannot {operation}() a timer that has already been finalized",
            code=TIMER_FINALIZED,
            **details,
        )


class SerializationError(LapwatchError):
    """Payload could not be turned back into a TimerResult."""

    def __init__(self, message: Optional[str] = None, **details: Any) -> None:
        super().__init__(SERIALIZATION_FAILED, message, details=details)


class ConfigError(LapwatchError):
    """Configuration files missing or unreadable."""

    def __init__(self, message: Optional[str] = None, path: Optional[str] = None) -> None:
        super().__init__(CONFIG_NOT_FOUND, message, details={"path": path} if path else None)
