"""Vote set repository for Neo4j operations.

Vote sets are list properties on DateOption nodes. Every statement here reads
and writes `d.votes` inside a single SET expression, so the write lock on the
node is taken before the read and concurrent writers are serialized.
"""

from typing import Optional
from uuid import UUID

from ..database import Neo4jDatabase


class VoteRepository:
    """Repository for DateOption vote set operations."""

    @staticmethod
    async def clear_votes(meeting_id: UUID, participant_id: UUID) -> int:
        """Remove the participant from every DateOption of the Meeting.

        Returns the number of DateOptions visited; 0 means no such Meeting.
        """
        query = """
        MATCH (m:Meeting {id: $meeting_id})-[:HAS_OPTION]->(d:DateOption)
        SET d.votes = [v IN coalesce(d.votes, []) WHERE v <> $participant_id]
        RETURN count(d) AS matched
        """

        async with Neo4jDatabase.get_session() as session:
            result = await session.run(
                query,
                meeting_id=str(meeting_id),
                participant_id=str(participant_id),
            )
            record = await result.single()
            return record["matched"] if record else 0

    @staticmethod
    async def add_votes(
        meeting_id: UUID, participant_id: UUID, date_option_ids: list[UUID]
    ) -> int:
        """Add the participant to the selected DateOptions, set semantics.

        Only matches when the participant belongs to the Meeting, so no vote
        can point at an unknown participant. Returns the number of DateOptions
        matched; unknown option ids match nothing.
        """
        query = """
        MATCH (m:Meeting {id: $meeting_id})-[:HAS_PARTICIPANT]->(:Participant {id: $participant_id})
        MATCH (m)-[:HAS_OPTION]->(d:DateOption)
        WHERE d.id IN $date_option_ids
        SET d.votes = CASE
            WHEN $participant_id IN coalesce(d.votes, []) THEN d.votes
            ELSE coalesce(d.votes, []) + $participant_id
        END
        RETURN count(d) AS matched
        """

        async with Neo4jDatabase.get_session() as session:
            result = await session.run(
                query,
                meeting_id=str(meeting_id),
                participant_id=str(participant_id),
                date_option_ids=[str(i) for i in date_option_ids],
            )
            record = await result.single()
            return record["matched"] if record else 0

    @staticmethod
    async def vote_counts(meeting_id: UUID) -> Optional[list[tuple[UUID, int]]]:
        """Vote set sizes per DateOption in creation order, None if no Meeting."""
        query = """
        MATCH (m:Meeting {id: $meeting_id})-[:HAS_OPTION]->(d:DateOption)
        RETURN d.id AS id, size(coalesce(d.votes, [])) AS votes
        ORDER BY d.position
        """

        async with Neo4jDatabase.get_session() as session:
            result = await session.run(query, meeting_id=str(meeting_id))
            records = await result.data()

            if not records:
                return None
            return [(UUID(r["id"]), r["votes"]) for r in records]

    @staticmethod
    async def option_voters(
        meeting_id: UUID, date_option_id: UUID
    ) -> Optional[tuple[bool, list[UUID], dict[UUID, str]]]:
        """Raw voter data for one DateOption.

        Returns None if the Meeting is missing, otherwise
        (option_found, vote ids, {participant id: nickname}) where the mapping
        holds the Meeting's participants that appear in the vote set, in join
        order.
        """
        query = """
        MATCH (m:Meeting {id: $meeting_id})
        OPTIONAL MATCH (m)-[:HAS_OPTION]->(d:DateOption {id: $date_option_id})
        OPTIONAL MATCH (m)-[:HAS_PARTICIPANT]->(p:Participant)
        WHERE p.id IN d.votes
        WITH d, p
        ORDER BY p.joined_at
        RETURN d IS NOT NULL AS option_found,
               coalesce(d.votes, []) AS votes,
               collect(p {.id, .nickname}) AS participants
        """

        async with Neo4jDatabase.get_session() as session:
            result = await session.run(
                query,
                meeting_id=str(meeting_id),
                date_option_id=str(date_option_id),
            )
            record = await result.single()

            if not record:
                return None

            return (
                record["option_found"],
                [UUID(v) for v in record["votes"]],
                {UUID(p["id"]): p["nickname"] for p in record["participants"]},
            )
