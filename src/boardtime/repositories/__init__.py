"""Repository modules for Neo4j operations."""

from .meeting_repo import MeetingRepository
from .participant_repo import ParticipantRepository
from .vote_repo import VoteRepository

__all__ = [
    "MeetingRepository",
    "ParticipantRepository",
    "VoteRepository",
]
