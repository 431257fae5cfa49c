# FavSync Configuration Schema
# Pydantic models for YAML configuration validation

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class ExportFormat(str, Enum):
    """Serialization used for export artifacts."""

    JSON = "json"
    YAML = "yaml"


class HostConfig(BaseModel):
    """Settings for reaching the host application's favorites."""

    store_path: str = Field(description="Path to the YAML host store read by the store connector")
    navigation_group: str = Field(default="Favorites", description="Navigation group holding the favorites")
    host_id: str | None = Field(default=None, description="Host identity override (default: machine name)")
    user_id: str | None = Field(default=None, description="User identity override (default: login name)")

    @field_validator("store_path")
    @classmethod
    def expand_path(cls, v: str) -> str:
        """Expand ~ in path."""
        return str(Path(v).expanduser())


class JournalConfig(BaseModel):
    """Rollback journal location."""

    path: str = Field(
        default="~/.config/favsync/rollback_journal.json",
        description="Single rollback journal, overwritten by every import",
    )

    @field_validator("path")
    @classmethod
    def expand_path(cls, v: str) -> str:
        """Expand ~ in path."""
        return str(Path(v).expanduser())


class ExportConfig(BaseModel):
    """Export artifact settings."""

    directory: str = Field(default=".", description="Directory for exports without an explicit output file")
    format: ExportFormat = Field(default=ExportFormat.JSON, description="Default artifact format")
    filename_prefix: str = Field(default="favorites", description="Prefix of generated export file names")

    @field_validator("directory")
    @classmethod
    def expand_path(cls, v: str) -> str:
        """Expand ~ in path."""
        return str(Path(v).expanduser())


class OutputConfig(BaseModel):
    """Output and logging configuration."""

    verbose: bool = Field(default=False, description="Enable verbose output")
    colored: bool = Field(default=True, description="Enable colored output")
    log_file: str | None = Field(default=None, description="Path to log file")

    @field_validator("log_file")
    @classmethod
    def expand_optional_path(cls, v: str | None) -> str | None:
        """Expand ~ in optional path."""
        if v is None:
            return None
        return str(Path(v).expanduser())


class FavSyncConfig(BaseModel):
    """Root configuration model for FavSync."""

    host: HostConfig = Field(description="Host connector settings")
    journal: JournalConfig = Field(default_factory=JournalConfig, description="Rollback journal settings")
    export: ExportConfig = Field(default_factory=ExportConfig, description="Export settings")
    output: OutputConfig = Field(default_factory=OutputConfig, description="Output settings")

    @property
    def journal_path(self) -> Path:
        return Path(self.journal.path)

    @property
    def store_path(self) -> Path:
        return Path(self.host.store_path)

    @property
    def log_file(self) -> Path | None:
        return Path(self.output.log_file) if self.output.log_file else None
