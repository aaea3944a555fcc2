"""Participant and vote API endpoints."""

from uuid import UUID

from fastapi import APIRouter, HTTPException, Request

from ..models.outcome import Outcome
from ..models.participant import ParticipantCredentials, ParticipantJoined, Voter
from ..models.vote import VoteAccepted, VoteRequest
from ..services.participants import ParticipantResolver
from ..services.tally import VoteTally
from ..services.votes import VoteReconciler
from .errors import raise_for_outcome

router = APIRouter(prefix="/meetings", tags=["Votes"])


@router.post(
    "/{meeting_id}/participants", response_model=ParticipantJoined, status_code=201
)
async def join_meeting(
    meeting_id: UUID, data: ParticipantCredentials
) -> ParticipantJoined:
    """Register a new nickname in a meeting."""
    result = await ParticipantResolver.join(meeting_id, data.nickname, data.password)
    raise_for_outcome(
        result.outcome,
        {
            Outcome.NOT_FOUND: "Meeting not found",
            Outcome.CONFLICT: "Nickname already taken",
        },
    )
    return ParticipantJoined(participant_id=result.participant_id)


@router.api_route(
    "/{meeting_id}/votes", methods=["POST", "PUT"], response_model=VoteAccepted
)
async def submit_votes(
    meeting_id: UUID, data: VoteRequest, request: Request
) -> VoteAccepted:
    """Replace the caller's votes. Unknown nicknames are registered first."""
    result = await VoteReconciler.submit(meeting_id, data)
    raise_for_outcome(
        result.outcome,
        {
            Outcome.NOT_FOUND: "Meeting or date options not found",
            Outcome.AUTH_FAILED: "Password does not match",
            Outcome.CONFLICT: "Nickname was just taken by someone else",
        },
    )
    message = "Votes saved" if request.method == "POST" else "Votes updated"
    return VoteAccepted(message=message, participant_id=result.participant_id)


@router.get("/{meeting_id}/votes", response_model=dict[UUID, int])
async def get_vote_counts(meeting_id: UUID) -> dict[UUID, int]:
    """Number of votes per date option."""
    counts = await VoteTally.tally(meeting_id)
    if counts is None:
        raise HTTPException(status_code=404, detail="Meeting not found")
    return counts


@router.get("/{meeting_id}/votes/{date_option_id}", response_model=list[Voter])
async def get_voters(meeting_id: UUID, date_option_id: UUID) -> list[Voter]:
    """Participants who voted for one date option."""
    result = await VoteTally.voters_for(meeting_id, date_option_id)
    if result.outcome is Outcome.NOT_FOUND:
        detail = "Date option not found" if result.meeting_found else "Meeting not found"
        raise HTTPException(status_code=404, detail=detail)
    return result.voters
