"""Meeting API endpoints."""

from uuid import UUID

from fastapi import APIRouter, HTTPException, Query

from ..config import get_settings
from ..models.meeting import (
    Meeting,
    MeetingCreate,
    MeetingCreated,
    MeetingSummary,
    MeetingUpdate,
    OwnerCredentials,
)
from ..models.outcome import Outcome
from ..services.meetings import MeetingService
from .errors import raise_for_outcome

router = APIRouter(prefix="/meetings", tags=["Meetings"])


@router.post("", response_model=MeetingCreated, status_code=201)
async def create_meeting(data: MeetingCreate) -> MeetingCreated:
    """Create a meeting with its candidate dates."""
    meeting_id = await MeetingService.create(data)
    return MeetingCreated(meeting_id=meeting_id)


@router.get("/search", response_model=list[MeetingSummary])
async def search_meetings(
    q: str = Query(..., min_length=1),
    limit: int = Query(20, ge=1),
) -> list[MeetingSummary]:
    """Search meetings by title."""
    limit = min(limit, get_settings().search_limit_max)
    return await MeetingService.search(q, limit=limit)


@router.get("/{meeting_id}", response_model=Meeting)
async def get_meeting(meeting_id: UUID) -> Meeting:
    """Get a meeting with date options, votes and participants."""
    meeting = await MeetingService.get(meeting_id)
    if not meeting:
        raise HTTPException(status_code=404, detail="Meeting not found")
    return meeting


@router.post("/{meeting_id}/auth")
async def authenticate_owner(meeting_id: UUID, data: OwnerCredentials) -> dict:
    """Check the organizer password."""
    outcome = await MeetingService.authenticate_owner(meeting_id, data.password)
    raise_for_outcome(
        outcome,
        {
            Outcome.NOT_FOUND: "Meeting not found",
            Outcome.AUTH_FAILED: "Password does not match",
        },
    )
    return {"authenticated": True}


@router.put("/{meeting_id}")
async def update_meeting(meeting_id: UUID, data: MeetingUpdate) -> dict:
    """Edit title, description or deadline. Owner only."""
    outcome = await MeetingService.update(meeting_id, data)
    raise_for_outcome(
        outcome,
        {
            Outcome.NOT_FOUND: "Meeting not found",
            Outcome.AUTH_FAILED: "Password does not match, meeting not updated",
        },
    )
    return {"message": "Meeting updated"}


@router.delete("/{meeting_id}")
async def delete_meeting(meeting_id: UUID, data: OwnerCredentials) -> dict:
    """Delete a meeting. Owner only."""
    outcome = await MeetingService.delete(meeting_id, data.password)
    raise_for_outcome(
        outcome,
        {
            Outcome.NOT_FOUND: "Meeting not found",
            Outcome.AUTH_FAILED: "Password does not match, meeting not deleted",
        },
    )
    return {"message": "Meeting deleted"}
