"""Configuration settings for BoardTime."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Neo4j
    neo4j_uri: str = "bolt://localhost:7687"
    neo4j_user: str = "neo4j"
    neo4j_password: str = "password"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 3001
    debug: bool = False

    # Service
    service_name: str = "boardtime"
    service_version: str = "0.1.0"
    log_level: str = "INFO"

    # Credentials
    password_hash_method: str = "scrypt"

    # Search
    search_limit_max: int = 100

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
