"""Tests for core.config."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import AppSettings, OutputFormat, get_user_config_dir, get_user_env_file, write_user_env_vars


def test_defaults(settings):
    assert settings.log_level == "WARNING"
    assert settings.output_format is OutputFormat.RICH
    assert settings.show_banner is True
    assert settings.reports_dir == Path("reports")
    assert settings.fail_fast is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PATTERNBOOK_LOG_LEVEL", "debug")
    monkeypatch.setenv("PATTERNBOOK_OUTPUT_FORMAT", "plain")
    monkeypatch.setenv("PATTERNBOOK_FAIL_FAST", "true")

    settings = AppSettings(_env_file=None)

    assert settings.log_level == "DEBUG"
    assert settings.output_format is OutputFormat.PLAIN
    assert settings.fail_fast is True


def test_invalid_log_level():
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, log_level="LOUD")


def test_project_env_file_is_read(tmp_path):
    env = tmp_path / ".env"
    env.write_text("PATTERNBOOK_SHOW_BANNER=false\n", encoding="utf-8")

    settings = AppSettings(_env_file=env)

    assert settings.show_banner is False


def test_user_config_dir_follows_xdg(tmp_path, monkeypatch):
    if not get_user_config_dir().is_relative_to(tmp_path):
        pytest.skip("XDG_CONFIG_HOME only applies on Linux")
    assert get_user_config_dir() == tmp_path / "xdg" / "patternbook"


def test_user_env_file_is_looked_up_per_instance(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "later-xdg"))
    monkeypatch.setenv("HOME", str(tmp_path / "later-home"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "later-appdata"))
    written = write_user_env_vars({"PATTERNBOOK_OUTPUT_FORMAT": "plain"})

    assert written == get_user_env_file()
    assert written.is_relative_to(tmp_path)
    assert AppSettings().output_format is OutputFormat.PLAIN


def test_explicit_env_file_skips_user_env():
    write_user_env_vars({"PATTERNBOOK_SHOW_BANNER": "false"})

    assert AppSettings().show_banner is False
    assert AppSettings(_env_file=None).show_banner is True


def test_write_user_env_vars_merges(tmp_path):
    env_path = tmp_path / "cfg" / ".env"
    env_path.parent.mkdir()
    env_path.write_text('# existing\nPATTERNBOOK_LOG_LEVEL="INFO"\nOTHER=1\n', encoding="utf-8")

    written = write_user_env_vars(
        {"PATTERNBOOK_OUTPUT_FORMAT": "plain", "PATTERNBOOK_REPORTS_DIR": None},
        env_path=env_path,
    )

    assert written == env_path
    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert lines[1:] == [
        "OTHER=1",
        "PATTERNBOOK_LOG_LEVEL=INFO",
        "PATTERNBOOK_OUTPUT_FORMAT=plain",
    ]
