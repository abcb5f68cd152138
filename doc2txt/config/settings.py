from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Converter configuration loaded from DOC2TXT_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="DOC2TXT_", env_file=".env", extra="ignore")

    log_level: str = "INFO"

    source_dir: Path | None = None
    output_suffix: str = ".txt"

    remove_converted: bool = False
    remove_trash: bool = False
    trash_extensions: list[str] = [
        "djvu",
        "djv",
        "doc",
        "chm",
        "xls",
        "jpg",
        "jpeg",
        "gif",
        "png",
        "zip",
        "rar",
        "diz",
    ]

    cleanup_empty: bool = False
    fail_fast: bool = False

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {list(_LOG_LEVELS)}")
        return level

    @field_validator("trash_extensions")
    @classmethod
    def _normalize_extensions(cls, value: list[str]) -> list[str]:
        return [ext.lower().lstrip(".") for ext in value if ext.strip()]

    @field_validator("output_suffix")
    @classmethod
    def _require_leading_dot(cls, value: str) -> str:
        if not value.startswith("."):
            raise ValueError("output_suffix must start with '.'")
        return value.lower()
