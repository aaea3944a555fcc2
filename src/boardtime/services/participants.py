"""Participant identity resolution.

Nicknames are unique per meeting. Registration never checks and then appends;
it issues one conditional insert and lets the store decide. A vote from an
unknown nickname registers it, a vote from a known nickname authenticates it.
"""

import logging
from uuid import UUID

from ..models.outcome import Outcome, ResolveResult
from ..models.participant import Participant, RegistrationStatus
from ..repositories.participant_repo import ParticipantRepository
from ..security import hash_secret, verify_secret

logger = logging.getLogger("boardtime.participants")


async def _authenticate(
    participant: Participant, password: str, on_mismatch: Outcome
) -> ResolveResult:
    if not await verify_secret(password, participant.secret_hash):
        return ResolveResult(outcome=on_mismatch)
    return ResolveResult(outcome=Outcome.OK, participant_id=participant.id)


class ParticipantResolver:
    """Get-or-create of participants under concurrent requests."""

    @staticmethod
    async def _register(
        meeting_id: UUID, nickname: str, password: str
    ) -> tuple[RegistrationStatus, Participant]:
        participant = Participant(
            meeting_id=meeting_id,
            nickname=nickname,
            secret_hash=await hash_secret(password),
        )
        status = await ParticipantRepository.insert_if_absent(participant)
        if status is RegistrationStatus.CREATED:
            logger.info(
                f"Registered participant {participant.id} as '{nickname}' in meeting {meeting_id}"
            )
        return status, participant

    @staticmethod
    async def resolve(meeting_id: UUID, nickname: str, password: str) -> ResolveResult:
        """Authenticate `nickname`, registering it first if it is new."""
        lookup = await ParticipantRepository.find_by_nickname(meeting_id, nickname)
        if not lookup.meeting_found:
            return ResolveResult(outcome=Outcome.NOT_FOUND)

        if lookup.participant is not None:
            result = await _authenticate(
                lookup.participant, password, Outcome.AUTH_FAILED
            )
            if result.outcome is Outcome.AUTH_FAILED:
                logger.warning(
                    f"Password mismatch for '{nickname}' in meeting {meeting_id}"
                )
            return result

        status, participant = await ParticipantResolver._register(
            meeting_id, nickname, password
        )
        if status is RegistrationStatus.CREATED:
            return ResolveResult(
                outcome=Outcome.OK, participant_id=participant.id, created=True
            )
        if status is RegistrationStatus.MEETING_NOT_FOUND:
            return ResolveResult(outcome=Outcome.NOT_FOUND)

        # Another request registered the nickname after our lookup; treat ours
        # as a login against the winner.
        logger.info(
            f"Lost registration race for '{nickname}' in meeting {meeting_id}, retrying as login"
        )
        lookup = await ParticipantRepository.find_by_nickname(meeting_id, nickname)
        if not lookup.meeting_found:
            return ResolveResult(outcome=Outcome.NOT_FOUND)
        if lookup.participant is None:
            logger.error(
                f"Nickname '{nickname}' reported taken but not found in meeting {meeting_id}"
            )
            return ResolveResult(outcome=Outcome.CONFLICT)

        result = await _authenticate(lookup.participant, password, Outcome.CONFLICT)
        if result.outcome is Outcome.CONFLICT:
            logger.warning(
                f"Concurrent registration conflict for '{nickname}' in meeting {meeting_id}"
            )
        return result

    @staticmethod
    async def join(meeting_id: UUID, nickname: str, password: str) -> ResolveResult:
        """Explicit registration. A taken nickname is a conflict, never a login."""
        status, participant = await ParticipantResolver._register(
            meeting_id, nickname, password
        )
        if status is RegistrationStatus.MEETING_NOT_FOUND:
            return ResolveResult(outcome=Outcome.NOT_FOUND)
        if status is RegistrationStatus.NICKNAME_TAKEN:
            return ResolveResult(outcome=Outcome.CONFLICT)
        return ResolveResult(
            outcome=Outcome.OK, participant_id=participant.id, created=True
        )
