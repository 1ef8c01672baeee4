"""Configuration models for bwcurve."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from bwcurve.core.formats.bitwig.revision import FormatRevision


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON log records")
    filename: str | None = Field(default=None, description="Log file (stdout if unset)")


class AppConfig(BaseModel):
    """Application-level configuration.

    Attributes:
        logging: Logging setup.
        format_revision: Host format revision used by encode/decode.
    """

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    logging: LoggingConfig = LoggingConfig()
    format_revision: FormatRevision = FormatRevision()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("bwcurve.yaml")
