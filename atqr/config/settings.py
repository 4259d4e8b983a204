from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
_LOG_LEVEL_ALIASES = {"INFORMATION": "INFO"}


class Settings(BaseSettings):
    """Extractor configuration loaded from environment variables (ATQR_*)."""

    model_config = SettingsConfigDict(env_prefix="ATQR_", env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"
    log_file: Path | None = None

    detector_engine: str = "jsonl"
    detections_path: Path = Path("detections.jsonl")

    report_sink: str = "log"
    max_displayed_issues: int = 5

    fail_on_noncompliant: bool = False

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        level = _LOG_LEVEL_ALIASES.get(level, level)
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {list(LOG_LEVELS)}, got {value!r}")
        return level
