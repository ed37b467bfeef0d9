"""Configuration management for the support desk answer engine."""

from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _sanitize_value(value: str) -> str:
    """Remove BOM characters and whitespace from string settings.

    Values copied from dashboards or secret managers may carry a BOM that
    breaks file paths and log output.
    """
    if not value:
        return value
    return value.lstrip("\ufeff").strip()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Storage
    data_dir: Path = Path("./data")
    database_path: Path = Path("./data/documents.db")
    store_backend: Literal["sqlite", "memory"] = "sqlite"

    # Retrieval settings
    max_candidates: int = 10
    max_query_length: int = 1000

    # Synthesis settings
    top_documents: int = 3
    max_sentences_per_document: int = 2
    max_sentences: int = 3
    min_sentence_length: int = 20
    min_keyword_length: int = 3
    max_sources: int = 2

    # Ingestion
    chunk_size: int = 1000

    # API
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    @field_validator("store_backend", "log_level", mode="before")
    @classmethod
    def sanitize_strings(cls, value: str) -> str:
        """Remove BOM and whitespace from string values."""
        return _sanitize_value(value) if isinstance(value, str) else value

    def ensure_directories(self) -> None:
        """Create all required directories if they don't exist."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.database_path.parent.mkdir(parents=True, exist_ok=True)


# Global settings instance
settings = Settings()
