"""Core services: meetings, participant resolution, votes and tallies."""

from .meetings import MeetingService
from .participants import ParticipantResolver
from .votes import VoteReconciler
from .tally import VoteTally

__all__ = [
    "MeetingService",
    "ParticipantResolver",
    "VoteReconciler",
    "VoteTally",
]
