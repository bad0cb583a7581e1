"""
LW error code registry for lapwatch.

Each code has:
- description
- retriable flag
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class ErrorInfo:
    code: str
    description: str
    retriable: bool = False


TIMER_FINALIZED = "LW-TMR-0001"
TIMER_STATE = "LW-TMR-0002"
SERIALIZATION_FAILED = "LW-SER-0001"
CONFIG_NOT_FOUND = "LW-CFG-0001"
GENERIC = "LW-GEN-0001"


# Core registry
_LW_REGISTRY: Dict[str, ErrorInfo] = {
    # Timer lifecycle
    TIMER_FINALIZED: ErrorInfo(TIMER_FINALIZED, "Timer already finalized"),
    TIMER_STATE: ErrorInfo(TIMER_STATE, "Invalid timer state"),

    # Serialization
    SERIALIZATION_FAILED: ErrorInfo(SERIALIZATION_FAILED, "Invalid timer result payload"),

    # Config
    CONFIG_NOT_FOUND: ErrorInfo(CONFIG_NOT_FOUND, "Configuration file not found"),

    GENERIC: ErrorInfo(GENERIC, "Generic lapwatch error"),
}


def get_error_info(code: str) -> ErrorInfo:
    """Return ErrorInfo for a given LW code, or a generic one if not registered."""
    return _LW_REGISTRY.get(
        code,
        ErrorInfo(code=code, description="Unknown lapwatch error code", retriable=False),
    )
