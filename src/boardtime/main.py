"""BoardTime - FastAPI Application."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, get_settings
from .database import Neo4jDatabase, init_constraints
from .routers import meetings_router, votes_router

logger = logging.getLogger("boardtime")


def configure_logging(settings: Settings) -> None:
    """Root logger setup for the service process."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="[%(asctime)s] %(levelname)s in %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup
    settings = get_settings()
    configure_logging(settings)
    logger.info(f"Starting {settings.service_name} v{settings.service_version}")

    await Neo4jDatabase.connect()
    logger.info("Connected to Neo4j")

    await init_constraints()

    yield

    # Shutdown
    await Neo4jDatabase.disconnect()
    logger.info("Disconnected from Neo4j")


settings = get_settings()

app = FastAPI(
    title="BoardTime",
    description="Meeting date polls with nickname-based voting",
    version=settings.service_version,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(meetings_router, prefix="/api")
app.include_router(votes_router, prefix="/api")


@app.get("/")
async def root() -> dict:
    """Root endpoint."""
    return {
        "service": settings.service_name,
        "version": settings.service_version,
        "docs": "/docs",
    }


@app.get("/health")
async def health() -> dict:
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "boardtime.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
