"""Shared fixtures for lapwatch tests."""

import pytest

from lapwatch.config import settings


class FakeClock:
    """Monotonic nanosecond clock advanced by hand."""

    def __init__(self, start_ns: int = 1_000_000):
        self.now_ns = start_ns

    def __call__(self) -> int:
        return self.now_ns

    def advance(self, ms: float = 0, ns: int = 0) -> None:
        self.now_ns += int(ms * 1_000_000) + ns


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def lapwatch_settings(monkeypatch):
    """Settings singleton with defaults restored after the test."""
    monkeypatch.setattr(settings, "DURATION_PRECISION", 2)
    monkeypatch.setattr(settings, "DURATION_JSON_FORMAT", "iso8601")
    monkeypatch.setattr(settings, "LOG_CHECKPOINTS", False)
    return settings
