"""Business outcomes returned by services instead of exceptions."""

from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from .participant import Voter


class Outcome(str, Enum):
    """Result kinds of core operations."""

    OK = "ok"
    NOT_FOUND = "not_found"
    AUTH_FAILED = "auth_failed"
    CONFLICT = "conflict"


class ResolveResult(BaseModel):
    """Participant identity resolution result."""

    outcome: Outcome
    participant_id: Optional[UUID] = None
    created: bool = False


class VotersResult(BaseModel):
    """Voter lookup result. The two flags tell which lookup missed."""

    outcome: Outcome
    meeting_found: bool = False
    option_found: bool = False
    voters: list[Voter] = Field(default_factory=list)
