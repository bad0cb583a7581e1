"""
Pydantic schemas for serializing timer results.

Field names: `name` / `duration` for a record, `records` / `total_duration`
for a result. Durations are timedelta values; their JSON form follows
settings.DURATION_JSON_FORMAT ("iso8601" or float seconds).
"""

from __future__ import annotations

from datetime import timedelta
from typing import List, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_serializer,
    field_validator,
)

from lapwatch.config import settings
from lapwatch.utils.exceptions import SerializationError
from lapwatch.utils.formatting import ns_to_timedelta, timedelta_to_ns
from lapwatch.utils.timing import Record, TimerResult

_ISO_ADAPTER: TypeAdapter[timedelta] = TypeAdapter(timedelta)


def _serialize_duration(value: timedelta) -> Union[str, float]:
    if settings.DURATION_JSON_FORMAT == "float":
        return value.total_seconds()
    # pydantic's own ISO 8601 rendering
    return _ISO_ADAPTER.dump_python(value, mode="json")


class RecordSchema(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    duration: timedelta

    @field_validator("duration")
    @classmethod
    def duration_not_negative(cls, v: timedelta) -> timedelta:
        if v < timedelta(0):
            raise ValueError("duration cannot be negative")
        return v

    @field_serializer("duration", when_used="json")
    def dump_duration(self, v: timedelta) -> Union[str, float]:
        return _serialize_duration(v)

    @classmethod
    def from_record(cls, record: Record) -> "RecordSchema":
        return cls(name=record.name, duration=record.duration)

    def to_record(self) -> Record:
        return Record(name=self.name, duration_ns=timedelta_to_ns(self.duration))


class TimerResultSchema(BaseModel):
    model_config = ConfigDict(frozen=True)

    records: List[RecordSchema] = Field(default_factory=list)
    total_duration: timedelta

    @field_validator("total_duration")
    @classmethod
    def total_not_negative(cls, v: timedelta) -> timedelta:
        if v < timedelta(0):
            raise ValueError("total_duration cannot be negative")
        return v

    @field_serializer("total_duration", when_used="json")
    def dump_total(self, v: timedelta) -> Union[str, float]:
        return _serialize_duration(v)

    @classmethod
    def from_result(cls, result: TimerResult) -> "TimerResultSchema":
        return cls(
            records=[RecordSchema.from_record(r) for r in result.records],
            total_duration=ns_to_timedelta(result.total_duration_ns),
        )

    @classmethod
    def parse_payload(cls, data: Union[str, bytes, dict]) -> "TimerResultSchema":
        """Validate a JSON string/bytes or a plain dict, raising SerializationError."""
        try:
            if isinstance(data, dict):
                return cls.model_validate(data)
            return cls.model_validate_json(data)
        except ValidationError as e:
            raise SerializationError(
                f"Invalid timer result payload: {e.error_count()} error(s)",
                errors=e.errors(include_url=False, include_context=False),
            ) from e

    def to_result(self) -> TimerResult:
        return TimerResult(
            records=[r.to_record() for r in self.records],
            total_duration_ns=timedelta_to_ns(self.total_duration),
        )
