"""Participant models."""

from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from .meeting import utcnow


class ParticipantCredentials(BaseModel):
    """Nickname and password identifying an invitee within one meeting."""

    nickname: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1)


class Participant(BaseModel):
    """Stored participant, including the secret digest."""

    id: UUID = Field(default_factory=uuid4)
    meeting_id: UUID
    nickname: str
    secret_hash: str
    joined_at: datetime = Field(default_factory=utcnow)


class ParticipantLookup(BaseModel):
    """Result of looking a nickname up inside a meeting."""

    meeting_found: bool
    participant: Optional[Participant] = None


class RegistrationStatus(str, Enum):
    """Result of the conditional participant insert."""

    CREATED = "created"
    NICKNAME_TAKEN = "nickname_taken"
    MEETING_NOT_FOUND = "meeting_not_found"


class Voter(BaseModel):
    """A participant who voted for a date option."""

    participant_id: UUID
    nickname: str


class ParticipantJoined(BaseModel):
    participant_id: UUID
