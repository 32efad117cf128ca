"""Tests for the patternbook CLI using typer's CliRunner."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from cli.main import app
from core.config import write_user_env_vars


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def plain(monkeypatch):
    monkeypatch.setenv("PATTERNBOOK_OUTPUT_FORMAT", "plain")


def test_version(runner):
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.startswith("patternbook ")


def test_help(runner):
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for command in ("list", "show", "source", "run-all", "doctor"):
        assert command in result.output


class TestList:
    def test_plain(self, runner, plain):
        result = runner.invoke(app, ["list", "--category", "solid"])
        assert result.exit_code == 0
        slugs = [line.split("\t")[0] for line in result.output.splitlines()]
        assert slugs == [
            "solid/single-responsibility",
            "solid/open-closed",
            "solid/liskov-substitution",
            "solid/interface-segregation",
            "solid/dependency-inversion",
        ]

    def test_rich_table(self, runner):
        result = runner.invoke(app, ["list", "-c", "oop"])
        assert result.exit_code == 0
        assert "Catalogue" in result.output
        assert "oop/abstraction" in result.output

    def test_user_config_follows_active_config_dir(self, runner, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "other-xdg"))
        monkeypatch.setenv("HOME", str(tmp_path / "other-home"))
        monkeypatch.setenv("APPDATA", str(tmp_path / "other-appdata"))
        write_user_env_vars({"PATTERNBOOK_OUTPUT_FORMAT": "plain"})

        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
        monkeypatch.setenv("HOME", str(tmp_path / "home"))
        monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
        result = runner.invoke(app, ["list", "-c", "oop"])

        assert result.exit_code == 0
        assert "Catalogue" in result.output

    def test_unknown_category(self, runner):
        result = runner.invoke(app, ["list", "--category", "functional"])
        assert result.exit_code == 2


class TestShow:
    def test_plain_prints_trace(self, runner):
        result = runner.invoke(app, ["show", "creational/factory-method", "--plain"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["Using product A", "Using product B"]

    def test_bare_name(self, runner):
        result = runner.invoke(app, ["show", "strategy", "--plain"])
        assert result.exit_code == 0
        assert "Result: 50" in result.output

    def test_rich_panel(self, runner):
        result = runner.invoke(app, ["show", "creational/factory-method"])
        assert result.exit_code == 0
        assert "Using product B" in result.output
        assert "Factory Method" in result.output

    def test_unknown_slug(self, runner):
        result = runner.invoke(app, ["show", "creational/buider"])
        assert result.exit_code == 1
        assert "Unknown demo" in result.output
        assert "creational/builder" in result.output


def test_source(runner):
    result = runner.invoke(app, ["source", "behavioral/visitor"])
    assert result.exit_code == 0
    assert "XMLExportVisitor" in result.output


class TestRunAll:
    def test_category_summary(self, runner, plain):
        result = runner.invoke(app, ["run-all", "--category", "principles"])
        assert result.exit_code == 0
        assert "3 passed, 0 failed" in result.output

    def test_exports(self, runner, tmp_path):
        json_path = tmp_path / "out" / "report.json"
        html_path = tmp_path / "out" / "report.html"

        result = runner.invoke(
            app,
            ["run-all", "-c", "oop", "--export-json", str(json_path), "--export-html", str(html_path)],
        )

        assert result.exit_code == 0, result.output
        payload = json.loads(json_path.read_text(encoding="utf-8"))
        assert payload["passed"] == 6
        assert "OOP fundamentals" in html_path.read_text(encoding="utf-8")

    def test_bare_export_name_goes_to_reports_dir(self, runner, tmp_path, plain):
        result = runner.invoke(app, ["run-all", "-c", "solid", "--export-json", "solid.json"])
        assert result.exit_code == 0, result.output
        assert (tmp_path / "reports" / "solid.json").is_file()

    def test_explicit_relative_export_path_is_kept(self, runner, tmp_path, plain):
        result = runner.invoke(app, ["run-all", "-c", "solid", "--export-json", "./solid.json"])
        assert result.exit_code == 0, result.output
        assert (tmp_path / "solid.json").is_file()
        assert not (tmp_path / "reports").exists()

    def test_failure_sets_exit_code(self, runner, monkeypatch, fake_demos, plain):
        from core.services.catalogue_runner import run_all as original

        def run_fake(**kwargs):
            kwargs["demos"] = fake_demos
            return original(**kwargs)

        monkeypatch.setattr("cli.main.run_all", run_fake)

        result = runner.invoke(app, ["run-all", "--fail-fast"])

        assert result.exit_code == 1
        assert "1 passed, 1 failed" in result.output


class TestDoctor:
    def test_run(self, runner):
        result = runner.invoke(app, ["doctor", "run"])
        assert result.exit_code == 0, result.output
        assert "Demo modules" in result.output

    def test_configure_writes_user_env(self, runner, tmp_path):
        result = runner.invoke(
            app,
            ["doctor", "configure"],
            input="plain\ninfo\nn\nout\n",
        )

        assert result.exit_code == 0, result.output
        env_file = tmp_path / "xdg" / "patternbook" / ".env"
        content = env_file.read_text(encoding="utf-8")
        assert "PATTERNBOOK_OUTPUT_FORMAT=plain" in content
        assert "PATTERNBOOK_LOG_LEVEL=INFO" in content
        assert "PATTERNBOOK_SHOW_BANNER=false" in content
        assert "PATTERNBOOK_REPORTS_DIR=out" in content

    def test_configured_format_is_used_by_later_commands(self, runner):
        configured = runner.invoke(app, ["doctor", "configure"], input="plain\nwarning\nn\nreports\n")
        assert configured.exit_code == 0, configured.output

        result = runner.invoke(app, ["list", "-c", "solid"])

        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "solid/single-responsibility\tSingle Responsibility"

    def test_configure_rejects_unknown_format(self, runner):
        result = runner.invoke(app, ["doctor", "configure"], input="fancy\n")
        assert result.exit_code != 0
