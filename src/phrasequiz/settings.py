from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Quiz settings, merged from CLI flags, environment, .env and defaults."""

    model_config = SettingsConfigDict(
        env_prefix="PHRASEQUIZ_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        cli_prog_name="phrasequiz",
    )

    phrases_file: Path = Field(
        default=Path("phrases.txt"),
        description="Phrase file with one 'source=translation' pair per line",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the question order, for a reproducible quiz",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Log level",
    )
