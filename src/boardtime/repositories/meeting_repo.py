"""Meeting repository for Neo4j operations."""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

from ..database import Neo4jDatabase
from ..models.meeting import (
    DateOption,
    Meeting,
    MeetingCreate,
    MeetingSummary,
    ParticipantPublic,
    Place,
    utcnow,
)


def _summary_fields(node: Any) -> dict[str, Any]:
    return {
        "id": UUID(node["id"]),
        "title": node["title"],
        "description": node.get("description"),
        "place": Place(
            name=node.get("place_name"),
            lat=node.get("place_lat"),
            lng=node.get("place_lng"),
        ),
        "deadline": datetime.fromisoformat(node["deadline"]),
        "created_at": datetime.fromisoformat(node["created_at"]),
    }


class MeetingRepository:
    """Repository for Meeting node operations."""

    @staticmethod
    async def create(data: MeetingCreate, secret_hash: str) -> UUID:
        """Create a Meeting with its DateOptions in one statement."""
        meeting_id = uuid4()
        options = [
            {"id": str(uuid4()), "date": date.isoformat(), "position": position}
            for position, date in enumerate(data.date_options)
        ]

        query = """
        CREATE (m:Meeting {
            id: $id,
            title: $title,
            description: $description,
            place_name: $place_name,
            place_lat: $place_lat,
            place_lng: $place_lng,
            owner_secret_hash: $owner_secret_hash,
            deadline: $deadline,
            created_at: $created_at
        })
        WITH m
        UNWIND $options AS opt
        CREATE (m)-[:HAS_OPTION]->(:DateOption {
            id: opt.id,
            meeting_id: $id,
            date: opt.date,
            position: opt.position,
            votes: []
        })
        RETURN count(*) AS options
        """

        async with Neo4jDatabase.get_session() as session:
            result = await session.run(
                query,
                id=str(meeting_id),
                title=data.title,
                description=data.description,
                place_name=data.place.name,
                place_lat=data.place.lat,
                place_lng=data.place.lng,
                owner_secret_hash=secret_hash,
                deadline=data.deadline.isoformat(),
                created_at=utcnow().isoformat(),
                options=options,
            )
            await result.consume()

        return meeting_id

    @staticmethod
    async def get_by_id(meeting_id: UUID) -> Optional[Meeting]:
        """Get a Meeting with ordered DateOptions and its Participants."""
        query = """
        MATCH (m:Meeting {id: $id})
        OPTIONAL MATCH (m)-[:HAS_OPTION]->(d:DateOption)
        WITH m, d
        ORDER BY d.position
        WITH m, collect(d {.id, .date, .votes}) AS date_options
        OPTIONAL MATCH (m)-[:HAS_PARTICIPANT]->(p:Participant)
        WITH m, date_options, p
        ORDER BY p.joined_at
        RETURN m, date_options, collect(p {.id, .nickname}) AS participants
        """

        async with Neo4jDatabase.get_session() as session:
            result = await session.run(query, id=str(meeting_id))
            record = await result.single()

            if not record:
                return None

            return Meeting(
                **_summary_fields(record["m"]),
                date_options=[
                    DateOption(
                        id=UUID(d["id"]),
                        date=datetime.fromisoformat(d["date"]),
                        votes=[UUID(v) for v in d.get("votes") or []],
                    )
                    for d in record["date_options"]
                ],
                participants=[
                    ParticipantPublic(id=UUID(p["id"]), nickname=p["nickname"])
                    for p in record["participants"]
                ],
            )

    @staticmethod
    async def get_owner_hash(meeting_id: UUID) -> Optional[str]:
        """Get the owner's secret digest. Only for owner authentication."""
        query = """
        MATCH (m:Meeting {id: $id})
        RETURN m.owner_secret_hash AS owner_secret_hash
        """

        async with Neo4jDatabase.get_session() as session:
            result = await session.run(query, id=str(meeting_id))
            record = await result.single()
            return record["owner_secret_hash"] if record else None

    @staticmethod
    async def update_fields(meeting_id: UUID, changes: dict[str, Any]) -> bool:
        """Set only the supplied fields. Returns False if the Meeting is missing."""
        updates = {
            k: v.isoformat() if isinstance(v, datetime) else v
            for k, v in changes.items()
        }

        set_clause = ", ".join([f"m.{k} = ${k}" for k in updates.keys()])
        query = f"""
        MATCH (m:Meeting {{id: $id}})
        {"SET " + set_clause if set_clause else ""}
        RETURN m.id AS id
        """

        async with Neo4jDatabase.get_session() as session:
            result = await session.run(query, id=str(meeting_id), **updates)
            record = await result.single()
            return record is not None

    @staticmethod
    async def delete(meeting_id: UUID) -> bool:
        """Delete a Meeting together with its DateOptions and Participants."""
        query = """
        MATCH (m:Meeting {id: $id})
        OPTIONAL MATCH (m)-[:HAS_OPTION|HAS_PARTICIPANT]->(child)
        WITH m, collect(child) AS children
        FOREACH (c IN children | DETACH DELETE c)
        DETACH DELETE m
        RETURN count(*) AS deleted
        """

        async with Neo4jDatabase.get_session() as session:
            result = await session.run(query, id=str(meeting_id))
            record = await result.single()
            return record["deleted"] > 0 if record else False

    @staticmethod
    async def search(query_text: str, limit: int = 20) -> list[MeetingSummary]:
        """Search Meetings by title, case-insensitive, newest first."""
        query = """
        MATCH (m:Meeting)
        WHERE toLower(m.title) CONTAINS toLower($query)
        RETURN m
        ORDER BY m.created_at DESC
        LIMIT $limit
        """

        async with Neo4jDatabase.get_session() as session:
            result = await session.run(query, query=query_text, limit=limit)
            records = await result.data()

            return [MeetingSummary(**_summary_fields(r["m"])) for r in records]
