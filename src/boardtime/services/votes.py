"""Vote replacement.

A participant's votes are replaced in two statements against the meeting:
first the participant is removed from every date option, then added to the
selected ones. Both statements are idempotent, so a retried request converges
on the same state. Between the two statements the participant is visible as
having voted for nothing; readers may observe that window, never a stale or
extra vote.
"""

import logging
from typing import Iterable
from uuid import UUID

from ..models.outcome import Outcome, ResolveResult
from ..models.vote import VoteRequest
from ..repositories.vote_repo import VoteRepository
from .participants import ParticipantResolver

logger = logging.getLogger("boardtime.votes")


class VoteReconciler:
    """Full-replace of one participant's vote set."""

    @staticmethod
    async def set_votes(
        meeting_id: UUID, participant_id: UUID, date_option_ids: Iterable[UUID]
    ) -> Outcome:
        """Make the participant's votes exactly `date_option_ids`.

        Unknown option ids are ignored. If options were requested and none of
        them matched, the result is NOT_FOUND.
        """
        targets = list(dict.fromkeys(date_option_ids))

        visited = await VoteRepository.clear_votes(meeting_id, participant_id)
        if visited == 0:
            return Outcome.NOT_FOUND

        if not targets:
            logger.info(f"Cleared votes of {participant_id} in meeting {meeting_id}")
            return Outcome.OK

        matched = await VoteRepository.add_votes(meeting_id, participant_id, targets)
        if matched == 0:
            logger.warning(
                f"No date options matched for {participant_id} in meeting {meeting_id}"
            )
            return Outcome.NOT_FOUND
        if matched < len(targets):
            logger.info(
                f"Ignored {len(targets) - matched} unknown date options in meeting {meeting_id}"
            )

        logger.info(
            f"Set {matched} votes for {participant_id} in meeting {meeting_id}"
        )
        return Outcome.OK

    @staticmethod
    async def submit(meeting_id: UUID, request: VoteRequest) -> ResolveResult:
        """Resolve the voter by nickname, then replace their votes."""
        resolved = await ParticipantResolver.resolve(
            meeting_id, request.nickname, request.password
        )
        if resolved.outcome is not Outcome.OK:
            return resolved

        outcome = await VoteReconciler.set_votes(
            meeting_id, resolved.participant_id, request.date_option_ids
        )
        if outcome is not Outcome.OK:
            return ResolveResult(
                outcome=outcome,
                participant_id=resolved.participant_id,
                created=resolved.created,
            )
        return resolved
