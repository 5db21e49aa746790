"""Settings for the flattoml command line and logging."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .binding import SectionModel
from .data import get_string
from .loader import load_file


class LoggingConfig(SectionModel):
    """Logging configuration settings, read from the ``[logging]`` section."""

    section_name = "logging"

    # Logging severity threshold (INFO/DEBUG/etc.).
    level: str = Field(default="WARNING", description="Logging level")
    # Emit JSON if True; otherwise emit a human-readable format.
    json_format: bool = Field(default=False, description="Emit JSON logs")
    # Optional file path for log output; if None, logs go to stderr.
    log_file: str | None = Field(default=None, description="Optional log file path")
    # Maximum size (bytes) before log rotation.
    max_bytes: int = Field(default=1_000_000, description="Max log file size before rotation")
    # Number of backup files to retain.
    backup_count: int = Field(default=3, description="Number of rotated log files to keep")


class ReaderSettings(BaseSettings):
    """Settings loaded from env or an optional flattoml file."""

    # Environment keys use FLATTOML_ prefix and "__" nesting.
    model_config = SettingsConfigDict(env_prefix="FLATTOML_", env_nested_delimiter="__", extra="ignore")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    # Codec for decoding configuration files.
    encoding: str = Field(default="utf-8", description="Configuration file encoding")

    @classmethod
    def from_file(cls, path: str | Path) -> "ReaderSettings":
        """Read ``[logging]`` and ``[reader]`` sections from ``path``."""

        config = load_file(path)
        data: dict[str, object] = {}
        # Only keys present in the file; env values fill in the rest.
        logging_values = LoggingConfig.values_from(config)
        if logging_values:
            data["logging"] = logging_values
        encoding = get_string(config, "reader", "encoding")
        if encoding:
            data["encoding"] = encoding
        return cls(**data)
