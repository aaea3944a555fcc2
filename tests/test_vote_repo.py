"""Tests for vote set repository."""

from uuid import uuid4

import pytest

from boardtime.repositories.vote_repo import VoteRepository


@pytest.mark.asyncio
async def test_clear_votes(neo4j_session):
    meeting_id, participant_id = uuid4(), uuid4()
    neo4j_session.run.return_value.single.return_value = {"matched": 2}

    visited = await VoteRepository.clear_votes(meeting_id, participant_id)

    assert visited == 2
    assert neo4j_session.run.call_args.kwargs == {
        "meeting_id": str(meeting_id),
        "participant_id": str(participant_id),
    }


@pytest.mark.asyncio
async def test_add_votes_passes_string_ids(neo4j_session):
    option_ids = [uuid4(), uuid4()]
    neo4j_session.run.return_value.single.return_value = {"matched": 1}

    matched = await VoteRepository.add_votes(uuid4(), uuid4(), option_ids)

    assert matched == 1
    query = neo4j_session.run.call_args.args[0]
    assert "HAS_PARTICIPANT" in query
    assert neo4j_session.run.call_args.kwargs["date_option_ids"] == [
        str(i) for i in option_ids
    ]


@pytest.mark.asyncio
async def test_vote_counts(neo4j_session):
    first, second = uuid4(), uuid4()
    neo4j_session.run.return_value.data.return_value = [
        {"id": str(first), "votes": 0},
        {"id": str(second), "votes": 3},
    ]

    counts = await VoteRepository.vote_counts(uuid4())

    assert counts == [(first, 0), (second, 3)]


@pytest.mark.asyncio
async def test_vote_counts_missing_meeting(neo4j_session):
    neo4j_session.run.return_value.data.return_value = []

    assert await VoteRepository.vote_counts(uuid4()) is None


@pytest.mark.asyncio
async def test_option_voters(neo4j_session):
    alice, ghost = uuid4(), uuid4()
    neo4j_session.run.return_value.single.return_value = {
        "option_found": True,
        "votes": [str(alice), str(ghost)],
        "participants": [{"id": str(alice), "nickname": "alice"}],
    }

    option_found, votes, nicknames = await VoteRepository.option_voters(uuid4(), uuid4())

    assert "ORDER BY p.joined_at" in neo4j_session.run.call_args.args[0]
    assert option_found is True
    assert votes == [alice, ghost]
    assert nicknames == {alice: "alice"}


@pytest.mark.asyncio
async def test_option_voters_missing_meeting(neo4j_session):
    neo4j_session.run.return_value.single.return_value = None

    assert await VoteRepository.option_voters(uuid4(), uuid4()) is None
