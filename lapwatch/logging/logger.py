"""
Structured logging utilities for lapwatch.

Every lapwatch logger goes through get_logger() so log records are
consistent and carry the timer context.

Log fields always present:
- component (settings.COMPONENT_NAME unless overridden)
- timer (timer label, if any)
- checkpoint (checkpoint name, if any)
- duration_ms
"""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Any, Dict, Optional

from lapwatch.config import settings
from lapwatch.utils.exceptions import ConfigError

_LOGGER_INITIALIZED = False

ROOT_LOGGER = "lapwatch"
CONTEXT_ATTRS = ("component", "timer", "checkpoint", "duration_ms")


# -----------------------------------------------------------------------------
# 1. LOAD LOGGING.YAML
# -----------------------------------------------------------------------------
def _load_logging_yaml() -> None:
    global _LOGGER_INITIALIZED
    if _LOGGER_INITIALIZED:
        return

    cfg_path = Path(settings.LOGGING_YAML)
    try:
        config = settings.load_yaml(str(cfg_path))
    except ConfigError:
        # Root logger belongs to the host application
        package_logger = logging.getLogger(ROOT_LOGGER)
        if not any(isinstance(h, logging.NullHandler) for h in package_logger.handlers):
            package_logger.addHandler(logging.NullHandler())
    else:
        logging.config.dictConfig(config)

    _LOGGER_INITIALIZED = True


def reset_logging() -> None:
    """Force the next get_logger() call to reload logging config."""
    global _LOGGER_INITIALIZED
    _LOGGER_INITIALIZED = False


# -----------------------------------------------------------------------------
# 2. STANDARD CONTEXT FILTER
# -----------------------------------------------------------------------------
class LapwatchContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        # Formatters reference these fields unconditionally
        for a in CONTEXT_ATTRS:
            if not hasattr(record, a):
                setattr(record, a, None)
        if record.component is None:
            record.component = settings.COMPONENT_NAME
        return True


# -----------------------------------------------------------------------------
# 3. GET LOGGER
# -----------------------------------------------------------------------------
def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the lapwatch context filter attached.

    Parameters
    ----------
    name : str
        Logger name (e.g., "lapwatch.timer", "lapwatch.decorators")

    Returns
    -------
    logging.Logger
        Logger configured from logging.yaml, or basicConfig when it is missing.
    """
    _load_logging_yaml()
    logger = logging.getLogger(name)

    if not any(isinstance(f, LapwatchContextFilter) for f in logger.filters):
        logger.addFilter(LapwatchContextFilter())

    if logger.level == logging.NOTSET:
        logger.setLevel(settings.LOG_LEVEL.upper())

    return logger


# -----------------------------------------------------------------------------
# 4. bind_context(): build the extra= dict for a log call
# -----------------------------------------------------------------------------
def bind_context(
    timer: Optional[str] = None,
    checkpoint: Optional[str] = None,
    duration_ms: Optional[float] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    base: Dict[str, Any] = {
        "component": settings.COMPONENT_NAME,
        "timer": timer,
        "checkpoint": checkpoint,
        "duration_ms": duration_ms,
    }
    if extra:
        base.update(extra)
    return base
