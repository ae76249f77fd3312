"""Application configuration from environment variables."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from voicelift.core.constants import MEDIA_DIRECTORY_NAME


class Settings(BaseSettings):
    """Settings loaded from environment (and .env file). Variables use the VOICELIFT_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="VOICELIFT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "VoiceLift API"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # API
    api_v1_prefix: str = "/api/v1"

    # Storage. documents_dir overrides the default ~/Documents/VoiceLift root.
    documents_dir: Path | None = None
    media_dir_name: str = MEDIA_DIRECTORY_NAME
    database_url: str | None = None  # Defaults to SQLite inside the documents root
    app_state_filename: str = "app_state.json"
    exercise_catalog_path: Path | None = None  # Defaults to the bundled catalog

    def resolve_documents_dir(self) -> Path | None:
        """Documents root, or None when no home directory can be determined."""
        if self.documents_dir is not None:
            return self.documents_dir
        try:
            return Path.home() / "Documents" / "VoiceLift"
        except RuntimeError:
            return None

    @property
    def media_dir(self) -> Path | None:
        root = self.resolve_documents_dir()
        return root / self.media_dir_name if root is not None else None

    @property
    def app_state_path(self) -> Path | None:
        root = self.resolve_documents_dir()
        return root / self.app_state_filename if root is not None else None

    @property
    def sqlalchemy_url(self) -> str:
        """Database URL for the engine and Alembic."""
        if self.database_url:
            return self.database_url
        root = self.resolve_documents_dir()
        if root is None:
            return "sqlite://"
        return f"sqlite:///{root / 'voicelift.db'}"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
