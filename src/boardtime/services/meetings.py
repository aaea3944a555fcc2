"""Meeting lifecycle and owner-gated mutations."""

import logging
from typing import Optional
from uuid import UUID

from ..models.meeting import Meeting, MeetingCreate, MeetingSummary, MeetingUpdate
from ..models.outcome import Outcome
from ..repositories.meeting_repo import MeetingRepository
from ..security import hash_secret, verify_secret

logger = logging.getLogger("boardtime.meetings")


class MeetingService:
    """Create, read, search, and owner edit/delete of meetings."""

    @staticmethod
    async def create(data: MeetingCreate) -> UUID:
        meeting_id = await MeetingRepository.create(
            data, await hash_secret(data.password)
        )
        logger.info(
            f"Created meeting {meeting_id} with {len(data.date_options)} date options"
        )
        return meeting_id

    @staticmethod
    async def get(meeting_id: UUID) -> Optional[Meeting]:
        return await MeetingRepository.get_by_id(meeting_id)

    @staticmethod
    async def search(query_text: str, limit: int = 20) -> list[MeetingSummary]:
        return await MeetingRepository.search(query_text, limit=limit)

    @staticmethod
    async def authenticate_owner(meeting_id: UUID, password: str) -> Outcome:
        """Check the owner password against the stored digest."""
        digest = await MeetingRepository.get_owner_hash(meeting_id)
        if digest is None:
            return Outcome.NOT_FOUND
        if not await verify_secret(password, digest):
            logger.warning(f"Owner authentication failed for meeting {meeting_id}")
            return Outcome.AUTH_FAILED
        return Outcome.OK

    @staticmethod
    async def update(meeting_id: UUID, data: MeetingUpdate) -> Outcome:
        """Apply a partial edit after owner authentication."""
        outcome = await MeetingService.authenticate_owner(meeting_id, data.password)
        if outcome is not Outcome.OK:
            return outcome

        changes = data.changes()
        if changes and not await MeetingRepository.update_fields(meeting_id, changes):
            # Deleted between authentication and write
            return Outcome.NOT_FOUND

        logger.info(f"Updated meeting {meeting_id}: {sorted(changes)}")
        return Outcome.OK

    @staticmethod
    async def delete(meeting_id: UUID, password: str) -> Outcome:
        """Delete a meeting, its date options and participants."""
        outcome = await MeetingService.authenticate_owner(meeting_id, password)
        if outcome is not Outcome.OK:
            return outcome

        if not await MeetingRepository.delete(meeting_id):
            return Outcome.NOT_FOUND

        logger.info(f"Deleted meeting {meeting_id}")
        return Outcome.OK
