"""Pytest configuration and fixtures."""

import os

# Fast digests for tests; must be set before settings are first read
os.environ.setdefault("PASSWORD_HASH_METHOD", "pbkdf2:sha256:1000")

import asyncio
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Any, Optional
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest
import pytest_asyncio

from boardtime.database import Neo4jDatabase
from boardtime.models.meeting import (
    DateOption,
    Meeting,
    MeetingCreate,
    MeetingSummary,
    ParticipantPublic,
    utcnow,
)
from boardtime.models.participant import (
    Participant,
    ParticipantLookup,
    RegistrationStatus,
)
from boardtime.repositories import (
    MeetingRepository,
    ParticipantRepository,
    VoteRepository,
)
from boardtime.services.meetings import MeetingService


@pytest.fixture
def neo4j_session(monkeypatch):
    """Mock Neo4j session patched into Neo4jDatabase.get_session."""
    session = AsyncMock()
    session.run.return_value = AsyncMock()

    @asynccontextmanager
    async def get_session():
        yield session

    monkeypatch.setattr(Neo4jDatabase, "get_session", get_session)
    return session


class InMemoryStore:
    """Stand-in for the repositories, one Python dict per meeting.

    Each method mutates state without awaiting in between, which mirrors a
    single atomic statement against the database. `find_by_nickname` yields
    to the event loop before returning so concurrent callers interleave
    between lookup and insert.
    """

    def __init__(self) -> None:
        self.meetings: dict[UUID, dict[str, Any]] = {}
        self.lookups = 0
        self.inserts = 0

    # MeetingRepository

    async def create(self, data: MeetingCreate, secret_hash: str) -> UUID:
        meeting_id = uuid4()
        self.meetings[meeting_id] = {
            "id": meeting_id,
            "title": data.title,
            "description": data.description,
            "place": data.place,
            "owner_secret_hash": secret_hash,
            "deadline": data.deadline,
            "created_at": utcnow(),
            "options": [{"id": uuid4(), "date": d, "votes": []} for d in data.date_options],
            "participants": [],
        }
        return meeting_id

    def _summary(self, doc: dict[str, Any]) -> dict[str, Any]:
        return {
            k: doc[k]
            for k in ("id", "title", "description", "place", "deadline", "created_at")
        }

    async def get_by_id(self, meeting_id: UUID) -> Optional[Meeting]:
        doc = self.meetings.get(meeting_id)
        if doc is None:
            return None
        return Meeting(
            **self._summary(doc),
            date_options=[
                DateOption(id=o["id"], date=o["date"], votes=list(o["votes"]))
                for o in doc["options"]
            ],
            participants=[
                ParticipantPublic(id=p.id, nickname=p.nickname)
                for p in doc["participants"]
            ],
        )

    async def get_owner_hash(self, meeting_id: UUID) -> Optional[str]:
        doc = self.meetings.get(meeting_id)
        return doc["owner_secret_hash"] if doc else None

    async def update_fields(self, meeting_id: UUID, changes: dict[str, Any]) -> bool:
        doc = self.meetings.get(meeting_id)
        if doc is None:
            return False
        doc.update(changes)
        return True

    async def delete(self, meeting_id: UUID) -> bool:
        return self.meetings.pop(meeting_id, None) is not None

    async def search(self, query_text: str, limit: int = 20) -> list[MeetingSummary]:
        docs = [
            d for d in self.meetings.values()
            if query_text.lower() in d["title"].lower()
        ]
        docs.sort(key=lambda d: d["created_at"], reverse=True)
        return [MeetingSummary(**self._summary(d)) for d in docs[:limit]]

    # ParticipantRepository

    async def find_by_nickname(self, meeting_id: UUID, nickname: str) -> ParticipantLookup:
        self.lookups += 1
        doc = self.meetings.get(meeting_id)
        if doc is None:
            lookup = ParticipantLookup(meeting_found=False)
        else:
            found = next((p for p in doc["participants"] if p.nickname == nickname), None)
            lookup = ParticipantLookup(meeting_found=True, participant=found)
        await asyncio.sleep(0)
        return lookup

    async def insert_if_absent(self, participant: Participant) -> RegistrationStatus:
        self.inserts += 1
        doc = self.meetings.get(participant.meeting_id)
        if doc is None:
            return RegistrationStatus.MEETING_NOT_FOUND
        if any(p.nickname == participant.nickname for p in doc["participants"]):
            return RegistrationStatus.NICKNAME_TAKEN
        doc["participants"].append(participant)
        return RegistrationStatus.CREATED

    # VoteRepository

    async def clear_votes(self, meeting_id: UUID, participant_id: UUID) -> int:
        doc = self.meetings.get(meeting_id)
        if doc is None:
            return 0
        for option in doc["options"]:
            option["votes"] = [v for v in option["votes"] if v != participant_id]
        return len(doc["options"])

    async def add_votes(
        self, meeting_id: UUID, participant_id: UUID, date_option_ids: list[UUID]
    ) -> int:
        doc = self.meetings.get(meeting_id)
        if doc is None or not any(p.id == participant_id for p in doc["participants"]):
            return 0
        matched = 0
        for option in doc["options"]:
            if option["id"] in date_option_ids:
                matched += 1
                if participant_id not in option["votes"]:
                    option["votes"].append(participant_id)
        return matched

    async def vote_counts(self, meeting_id: UUID) -> Optional[list[tuple[UUID, int]]]:
        doc = self.meetings.get(meeting_id)
        if doc is None:
            return None
        return [(o["id"], len(o["votes"])) for o in doc["options"]]

    async def option_voters(self, meeting_id: UUID, date_option_id: UUID):
        doc = self.meetings.get(meeting_id)
        if doc is None:
            return None
        option = next((o for o in doc["options"] if o["id"] == date_option_id), None)
        if option is None:
            return False, [], {}
        return (
            True,
            list(option["votes"]),
            {p.id: p.nickname for p in doc["participants"] if p.id in option["votes"]},
        )

    # Helpers for assertions

    def votes_of(self, meeting_id: UUID) -> dict[UUID, set[UUID]]:
        return {o["id"]: set(o["votes"]) for o in self.meetings[meeting_id]["options"]}

    def option_ids(self, meeting_id: UUID) -> list[UUID]:
        return [o["id"] for o in self.meetings[meeting_id]["options"]]


@pytest.fixture
def store(monkeypatch) -> InMemoryStore:
    """In-memory store patched over all repository methods."""
    memory = InMemoryStore()
    for name in ("create", "get_by_id", "get_owner_hash", "update_fields", "delete", "search"):
        monkeypatch.setattr(MeetingRepository, name, getattr(memory, name))
    for name in ("find_by_nickname", "insert_if_absent"):
        monkeypatch.setattr(ParticipantRepository, name, getattr(memory, name))
    for name in ("clear_votes", "add_votes", "vote_counts", "option_voters"):
        monkeypatch.setattr(VoteRepository, name, getattr(memory, name))
    return memory


@pytest_asyncio.fixture
async def meeting_id(store) -> UUID:
    """A meeting with two future date options, owner password 'owner-pw'."""
    now = utcnow()
    data = MeetingCreate(
        title="Board game night",
        description="Bring snacks",
        password="owner-pw",
        deadline=now + timedelta(days=7),
        date_options=[now + timedelta(days=10), now + timedelta(days=11)],
    )
    return await MeetingService.create(data)
