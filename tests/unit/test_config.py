"""Unit tests for settings and YAML loading."""

import pytest
from pydantic import ValidationError

from lapwatch.config import Settings, settings
from lapwatch.utils.exceptions import ConfigError


def test_defaults(monkeypatch):
    for var in ("LAPWATCH_DURATION_PRECISION", "LAPWATCH_LOG_CHECKPOINTS", "LAPWATCH_DURATION_JSON_FORMAT"):
        monkeypatch.delenv(var, raising=False)

    s = Settings(_env_file=None)

    assert s.COMPONENT_NAME == "lapwatch"
    assert s.DURATION_PRECISION == 2
    assert s.DURATION_JSON_FORMAT == "iso8601"
    assert s.LOG_CHECKPOINTS is False


def test_env_override(monkeypatch):
    monkeypatch.setenv("LAPWATCH_DURATION_PRECISION", "4")
    monkeypatch.setenv("LAPWATCH_LOG_CHECKPOINTS", "true")
    monkeypatch.setenv("LAPWATCH_DURATION_JSON_FORMAT", "float")

    s = Settings(_env_file=None)

    assert s.DURATION_PRECISION == 4
    assert s.LOG_CHECKPOINTS is True
    assert s.DURATION_JSON_FORMAT == "float"


def test_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("LAPWATCH_COMPONENT_NAME", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("LAPWATCH_COMPONENT_NAME=ingest\n", encoding="utf-8")

    assert Settings(_env_file=str(env_file)).COMPONENT_NAME == "ingest"


@pytest.mark.parametrize(
    "var, value",
    [
        ("LAPWATCH_DURATION_JSON_FORMAT", "xml"),
        ("LAPWATCH_DURATION_PRECISION", "-1"),
    ],
)
def test_invalid_values_rejected(monkeypatch, var, value):
    monkeypatch.setenv(var, value)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_load_yaml(tmp_path):
    path = tmp_path / "logging.yaml"
    path.write_text("version: 1\nroot:\n  level: INFO\n", encoding="utf-8")

    assert settings.load_yaml(str(path)) == {"version": 1, "root": {"level": "INFO"}}


def test_load_empty_yaml(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert settings.load_yaml(str(path)) == {}


def test_load_missing_yaml(tmp_path):
    missing = tmp_path / "nope.yaml"

    with pytest.raises(ConfigError) as exc_info:
        settings.load_yaml(str(missing))

    assert exc_info.value.code == "LW-CFG-0001"
    assert exc_info.value.details == {"path": str(missing)}
