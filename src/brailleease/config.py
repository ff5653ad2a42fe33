"""Configuration management using Pydantic Settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from brailleease.models.direction import Direction


class HistoryConfig(BaseSettings):
    """Translation history (ledger) configuration."""

    model_config = SettingsConfigDict(env_prefix="BRAILLEEASE_HISTORY_")

    storage_path: str = Field(
        default="~/.local/share/brailleease/storage.json",
        description="JSON file backing the local key-value store",
    )
    slot: str = Field(default="translations", description="Storage slot holding the history")
    max_entries: int = Field(default=10, ge=1, description="Maximum number of translations kept")
    timestamp_format: str = Field(default="%d/%m/%Y, %H:%M:%S", description="strftime pattern for record timestamps")

    @property
    def resolved_storage_path(self) -> Path:
        return Path(self.storage_path).expanduser()


class SessionConfig(BaseSettings):
    """Translator session configuration."""

    model_config = SettingsConfigDict(env_prefix="BRAILLEEASE_SESSION_")

    default_direction: Direction = Field(
        default=Direction.SPANISH_TO_BRAILLE,
        description="Direction selected when the service starts",
    )
    image_max_bytes: int = Field(default=10 * 1024 * 1024, description="Largest accepted image upload (bytes)")


class CORSConfig(BaseSettings):
    """CORS configuration."""

    model_config = SettingsConfigDict(env_prefix="BRAILLEEASE_CORS_")

    allow_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")
    allow_credentials: bool = Field(default=True, description="Allow credentials")
    allow_methods: list[str] = Field(default=["*"], description="Allowed HTTP methods")
    allow_headers: list[str] = Field(default=["*"], description="Allowed HTTP headers")


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="BRAILLEEASE_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Nested configuration objects
    history: HistoryConfig = Field(default_factory=HistoryConfig)
    session: SessionConfig = Field(default_factory=SessionConfig)
    cors: CORSConfig = Field(default_factory=CORSConfig)

    # Application metadata
    app_title: str = Field(default="BrailleEase API", description="Application title")
    app_description: str = Field(
        default="Spanish to Braille transliteration with keypad, history and printing",
        description="Application description",
    )
    app_version: str = Field(default="0.1.0", description="Application version")
    log_level: str = Field(default="INFO", description="Root logging level")
