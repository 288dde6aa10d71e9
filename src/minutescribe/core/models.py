"""Meeting minutes record"""

from datetime import datetime, timezone
from typing import Any, Dict, Tuple
from uuid import UUID, uuid4
from pydantic import BaseModel, ConfigDict, Field, field_validator


def utc_now() -> datetime:
    """Current wall-clock time as an aware UTC datetime"""
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Format a timestamp as a medium date with short time in local time.

    Example: ``Oct 19, 2026 at 3:04 PM``
    """
    local = moment.astimezone()
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return f"{local:%b} {local.day}, {local.year} at {hour}:{local:%M} {meridiem}"


class MeetingMinutes(BaseModel):
    """Structured minutes produced from one transcript.

    Attribute names are snake_case; the JSON names (``date``, ``duration``,
    ``transcription``, ``actionItems``, ``keyTopics``) are field aliases.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: UUID = Field(default_factory=uuid4)
    title: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=utc_now, alias="date")
    duration_minutes: int = Field(default=0, ge=0, alias="duration")
    transcript: str = Field(default="", alias="transcription")
    summary: str = Field(min_length=1)
    action_items: Tuple[str, ...] = Field(default=(), alias="actionItems")
    key_topics: Tuple[str, ...] = Field(default=(), alias="keyTopics")

    @field_validator("created_at")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        # Naive values are local wall-clock time
        try:
            return value.astimezone(timezone.utc)
        except OverflowError as e:
            raise ValueError(f"timestamp out of range: {value!r}") from e

    @field_validator("key_topics")
    @classmethod
    def _unique_topics(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if len(set(value)) != len(value):
            raise ValueError("key topics must not repeat")
        return value

    @property
    def formatted_date(self) -> str:
        return format_timestamp(self.created_at)

    def to_wire(self) -> Dict[str, Any]:
        """JSON-compatible dict using the wire field names"""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "MeetingMinutes":
        return cls.model_validate(data)
