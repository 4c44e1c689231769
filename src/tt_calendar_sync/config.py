"""Centralized configuration for tt-calendar-sync using Pydantic Settings."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strictly typed configuration loaded from ``TT_SYNC_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TT_SYNC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    # Storage
    data_dir: Path = Field(default=Path("data"), description="Directory holding the repository files")
    team_leads_file: str = Field(default="team_leads.json", min_length=1, description="Team lead file name")
    sports_halls_file: str = Field(default="sports_halls.json", min_length=1, description="Sports hall file name")
    file_encoding: str = Field(default="utf-8", description="Text encoding of the repository files")

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        if value.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return value.lower()

    def resolved_data_dir(self) -> Path:
        return self.data_dir.expanduser().resolve(strict=False)

    def team_leads_path(self) -> Path:
        return self.resolved_data_dir() / self.team_leads_file

    def sports_halls_path(self) -> Path:
        return self.resolved_data_dir() / self.sports_halls_file
