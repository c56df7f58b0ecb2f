"""Application configuration."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_BACKEND_DIR = Path(__file__).resolve().parents[1]

AnnotatorBackend = Literal["rules", "spacy"]


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables."""

    app_name: str = "Braindump Organizer API"
    annotator_backend: AnnotatorBackend = "rules"
    spacy_model: str = "en_core_web_sm"
    cors_allow_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    model_config = SettingsConfigDict(
        env_file=str(_BACKEND_DIR / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()
