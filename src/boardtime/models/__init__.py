"""Pydantic models for meetings, participants and votes."""

from .meeting import (
    DateOption,
    Meeting,
    MeetingCreate,
    MeetingCreated,
    MeetingSummary,
    MeetingUpdate,
    OwnerCredentials,
    ParticipantPublic,
    Place,
)
from .participant import (
    Participant,
    ParticipantCredentials,
    ParticipantJoined,
    ParticipantLookup,
    RegistrationStatus,
    Voter,
)
from .vote import VoteAccepted, VoteRequest
from .outcome import Outcome, ResolveResult, VotersResult

__all__ = [
    "DateOption",
    "Meeting",
    "MeetingCreate",
    "MeetingCreated",
    "MeetingSummary",
    "MeetingUpdate",
    "OwnerCredentials",
    "ParticipantPublic",
    "Place",
    "Participant",
    "ParticipantCredentials",
    "ParticipantJoined",
    "ParticipantLookup",
    "RegistrationStatus",
    "Voter",
    "VoteAccepted",
    "VoteRequest",
    "Outcome",
    "ResolveResult",
    "VotersResult",
]
