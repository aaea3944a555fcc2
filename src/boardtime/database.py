"""Neo4j database connection and session management."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from neo4j import AsyncGraphDatabase, AsyncDriver, AsyncSession

from .config import get_settings

logger = logging.getLogger("boardtime.database")


class Neo4jDatabase:
    """Neo4j database connection manager."""

    _driver: AsyncDriver | None = None

    @classmethod
    async def connect(cls) -> None:
        """Establish connection to Neo4j."""
        settings = get_settings()
        cls._driver = AsyncGraphDatabase.driver(
            settings.neo4j_uri,
            auth=(settings.neo4j_user, settings.neo4j_password),
        )
        # Verify connection
        await cls._driver.verify_connectivity()

    @classmethod
    async def disconnect(cls) -> None:
        """Close Neo4j connection."""
        if cls._driver:
            await cls._driver.close()
            cls._driver = None

    @classmethod
    def get_driver(cls) -> AsyncDriver:
        """Get Neo4j driver instance."""
        if not cls._driver:
            raise RuntimeError("Database not connected. Call connect() first.")
        return cls._driver

    @classmethod
    @asynccontextmanager
    async def get_session(cls) -> AsyncGenerator[AsyncSession, None]:
        """Get a Neo4j session as async context manager."""
        driver = cls.get_driver()
        session = driver.session()
        try:
            yield session
        finally:
            await session.close()


async def init_constraints() -> None:
    """Initialize database constraints and indexes."""
    async with Neo4jDatabase.get_session() as session:
        constraints = [
            "CREATE CONSTRAINT meeting_id IF NOT EXISTS FOR (m:Meeting) REQUIRE m.id IS UNIQUE",
            "CREATE CONSTRAINT date_option_id IF NOT EXISTS FOR (d:DateOption) REQUIRE d.id IS UNIQUE",
            "CREATE CONSTRAINT participant_id IF NOT EXISTS FOR (p:Participant) REQUIRE p.id IS UNIQUE",
            # Registration MERGEs on this key; the constraint makes it insert-if-absent
            "CREATE CONSTRAINT participant_nickname IF NOT EXISTS "
            "FOR (p:Participant) REQUIRE (p.meeting_id, p.nickname) IS UNIQUE",
        ]

        for constraint in constraints:
            await session.run(constraint)

        indexes = [
            "CREATE INDEX meeting_title IF NOT EXISTS FOR (m:Meeting) ON (m.title)",
            "CREATE INDEX meeting_created_at IF NOT EXISTS FOR (m:Meeting) ON (m.created_at)",
        ]

        for index in indexes:
            await session.run(index)

    logger.info(f"Initialized {len(constraints)} constraints and {len(indexes)} indexes")
