"""Vote submission models."""

from uuid import UUID

from pydantic import BaseModel, Field

from .participant import ParticipantCredentials


class VoteRequest(ParticipantCredentials):
    """Replace the caller's votes with exactly these date options."""

    date_option_ids: list[UUID] = Field(...)


class VoteAccepted(BaseModel):
    message: str
    participant_id: UUID
