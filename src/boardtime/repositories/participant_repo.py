"""Participant repository for Neo4j operations."""

from datetime import datetime
from uuid import UUID

from ..database import Neo4jDatabase
from ..models.participant import Participant, ParticipantLookup, RegistrationStatus


class ParticipantRepository:
    """Repository for Participant node operations."""

    @staticmethod
    async def find_by_nickname(meeting_id: UUID, nickname: str) -> ParticipantLookup:
        """Look a nickname up inside one Meeting (exact, case-sensitive)."""
        query = """
        MATCH (m:Meeting {id: $meeting_id})
        OPTIONAL MATCH (m)-[:HAS_PARTICIPANT]->(p:Participant {nickname: $nickname})
        RETURN m.id AS meeting_id, p
        """

        async with Neo4jDatabase.get_session() as session:
            result = await session.run(
                query, meeting_id=str(meeting_id), nickname=nickname
            )
            record = await result.single()

            if not record:
                return ParticipantLookup(meeting_found=False)

            node = record["p"]
            if node is None:
                return ParticipantLookup(meeting_found=True)

            return ParticipantLookup(
                meeting_found=True,
                participant=Participant(
                    id=UUID(node["id"]),
                    meeting_id=meeting_id,
                    nickname=node["nickname"],
                    secret_hash=node["secret_hash"],
                    joined_at=datetime.fromisoformat(node["joined_at"]),
                ),
            )

    @staticmethod
    async def insert_if_absent(participant: Participant) -> RegistrationStatus:
        """Attach `participant` to its Meeting unless the nickname is taken.

        The MERGE runs on the (meeting_id, nickname) uniqueness constraint, so
        the existence check and the insert are one atomic step. When another
        request already holds the nickname the existing node is returned
        untouched and its id differs from ours.
        """
        query = """
        MATCH (m:Meeting {id: $meeting_id})
        MERGE (p:Participant {meeting_id: $meeting_id, nickname: $nickname})
        ON CREATE SET p.id = $id,
                      p.secret_hash = $secret_hash,
                      p.joined_at = $joined_at
        MERGE (m)-[:HAS_PARTICIPANT]->(p)
        RETURN p.id AS id
        """

        async with Neo4jDatabase.get_session() as session:
            result = await session.run(
                query,
                meeting_id=str(participant.meeting_id),
                nickname=participant.nickname,
                id=str(participant.id),
                secret_hash=participant.secret_hash,
                joined_at=participant.joined_at.isoformat(),
            )
            record = await result.single()

            if not record:
                return RegistrationStatus.MEETING_NOT_FOUND
            if record["id"] != str(participant.id):
                return RegistrationStatus.NICKNAME_TAKEN
            return RegistrationStatus.CREATED
