"""Meeting and date option models."""

from datetime import datetime, timezone
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, computed_field, field_validator


def as_utc(value: datetime) -> datetime:
    """Treat naive timestamps as UTC so comparisons never mix the two kinds."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Place(BaseModel):
    """Where the meeting happens. Every part is optional."""

    name: Optional[str] = None
    lat: Optional[float] = Field(None, ge=-90, le=90)
    lng: Optional[float] = Field(None, ge=-180, le=180)


class MeetingCreate(BaseModel):
    """Schema for creating a meeting."""

    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    place: Place = Field(default_factory=Place)
    password: str = Field(..., min_length=1)
    deadline: datetime
    date_options: list[datetime] = Field(..., min_length=1)

    @field_validator("deadline")
    @classmethod
    def _deadline_utc(cls, value: datetime) -> datetime:
        return as_utc(value)

    @field_validator("date_options")
    @classmethod
    def _dates_utc(cls, value: list[datetime]) -> list[datetime]:
        return [as_utc(v) for v in value]


class MeetingUpdate(BaseModel):
    """Owner edit. Only supplied fields are written."""

    password: str = Field(..., min_length=1)
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    deadline: Optional[datetime] = None

    @field_validator("deadline")
    @classmethod
    def _deadline_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value) if value is not None else None

    def changes(self) -> dict[str, Any]:
        """Fields to write, password excluded."""
        return {
            k: v
            for k, v in self.model_dump(exclude={"password"}).items()
            if v is not None
        }


class OwnerCredentials(BaseModel):
    """Owner password for auth and delete."""

    password: str = Field(..., min_length=1)


class DateOption(BaseModel):
    """One candidate date and the ids of participants who voted for it."""

    id: UUID = Field(default_factory=uuid4)
    date: datetime
    votes: list[UUID] = Field(default_factory=list)

    @field_validator("date")
    @classmethod
    def _date_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class ParticipantPublic(BaseModel):
    """Participant as exposed in meeting details."""

    id: UUID
    nickname: str


class MeetingSummary(BaseModel):
    """Meeting fields safe to show to anyone."""

    id: UUID
    title: str
    description: Optional[str] = None
    place: Place = Field(default_factory=Place)
    deadline: datetime
    created_at: datetime

    @field_validator("deadline", "created_at")
    @classmethod
    def _timestamps_utc(cls, value: datetime) -> datetime:
        return as_utc(value)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_expired(self) -> bool:
        return utcnow() > self.deadline


class Meeting(MeetingSummary):
    """Complete meeting as returned by get."""

    date_options: list[DateOption] = Field(default_factory=list)
    participants: list[ParticipantPublic] = Field(default_factory=list)


class MeetingCreated(BaseModel):
    meeting_id: UUID
