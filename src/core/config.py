"""Core configuration.

Notes:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Demo modules never read settings; only the runner, exporters and CLI do.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


APP_NAME = "patternbook"


class OutputFormat(str, Enum):
    """How transcripts are rendered on the terminal."""

    RICH = "rich"
    PLAIN = "plain"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Write or update variables in the user's global .env file."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# patternbook user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    Resolution order: init kwargs, environment (`PATTERNBOOK_*`), the project
    `.env`, then the user `.env`. The user `.env` path is looked up when the
    settings are built, not when this module is imported.
    """

    model_config = SettingsConfigDict(
        env_prefix="PATTERNBOOK_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    log_level: str = Field(
        default="WARNING",
        description="Root log level for the CLI (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )
    output_format: OutputFormat = Field(
        default=OutputFormat.RICH,
        description="Terminal rendering of transcripts (rich panels or raw lines).",
    )
    show_banner: bool = Field(
        default=True,
        description="Print the banner before interactive commands.",
    )
    reports_dir: Path = Field(
        default=Path("reports"),
        description="Default directory for exported reports.",
    )
    fail_fast: bool = Field(
        default=False,
        description="Stop `run-all` after the first failing demo.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"invalid log level: {value}")
        return level

    def __init__(self, **values: Any) -> None:
        values.setdefault("_env_file", (".env", str(get_user_env_file())))
        super().__init__(**values)
