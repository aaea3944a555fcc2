"""Read-only vote aggregation."""

import logging
from typing import Optional
from uuid import UUID

from ..models.outcome import Outcome, VotersResult
from ..models.participant import Voter
from ..repositories.vote_repo import VoteRepository

logger = logging.getLogger("boardtime.tally")


class VoteTally:
    """Vote counts and voter lists per date option."""

    @staticmethod
    async def tally(meeting_id: UUID) -> Optional[dict[UUID, int]]:
        """Votes per date option, None if the meeting does not exist."""
        counts = await VoteRepository.vote_counts(meeting_id)
        if counts is None:
            return None
        return dict(counts)

    @staticmethod
    async def voters_for(meeting_id: UUID, date_option_id: UUID) -> VotersResult:
        """Participants who voted for one date option, in join order.

        A vote id with no matching participant is an integrity fault: it is
        logged and left out of the result.
        """
        raw = await VoteRepository.option_voters(meeting_id, date_option_id)
        if raw is None:
            return VotersResult(outcome=Outcome.NOT_FOUND)

        option_found, vote_ids, nicknames = raw
        if not option_found:
            return VotersResult(outcome=Outcome.NOT_FOUND, meeting_found=True)

        for participant_id in vote_ids:
            if participant_id not in nicknames:
                logger.error(
                    f"Integrity fault: date option {date_option_id} in meeting {meeting_id} "
                    f"references unknown participant {participant_id}"
                )

        voters = [
            Voter(participant_id=participant_id, nickname=nickname)
            for participant_id, nickname in nicknames.items()
        ]

        return VotersResult(
            outcome=Outcome.OK, meeting_found=True, option_found=True, voters=voters
        )
