"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

import os
import sys
import types
from typing import Callable

import pytest

from core.config import AppSettings
from core.domain.category import Category
from core.domain.models import DemoInfo


@pytest.fixture(autouse=True)
def reset_singletons():
    """Singletons keep class-level state between tests; start each test fresh."""
    from catalogue.creational import admin_singleton, singleton

    singleton.Database._instance = None
    admin_singleton.Admin._instance = None
    yield
    singleton.Database._instance = None
    admin_singleton.Admin._instance = None


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep user config and PATTERNBOOK_* variables out of the tests."""
    for name in list(os.environ):
        if name.startswith("PATTERNBOOK_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def trace(capsys) -> Callable[[Callable[[], None]], list[str]]:
    """Run a demo entry point and return the lines it printed."""

    def _run(entrypoint: Callable[[], None]) -> list[str]:
        capsys.readouterr()
        entrypoint()
        return capsys.readouterr().out.splitlines()

    return _run


@pytest.fixture
def settings() -> AppSettings:
    """Settings built only from defaults (no env files)."""
    return AppSettings(_env_file=None)


def _module(name: str, main: Callable[[], None] | None = None) -> types.ModuleType:
    module = types.ModuleType(name)
    if main is not None:
        module.main = main
    return module


@pytest.fixture
def fake_demos(monkeypatch) -> list[DemoInfo]:
    """Four registry entries: one passing, one raising, one unimportable, one without main."""

    def good_main() -> None:
        print("hello")
        print("world")

    def broken_main() -> None:
        print("before the failure")
        raise ValueError("boom")

    monkeypatch.setitem(sys.modules, "fake_demo_good", _module("fake_demo_good", good_main))
    monkeypatch.setitem(sys.modules, "fake_demo_broken", _module("fake_demo_broken", broken_main))
    monkeypatch.setitem(sys.modules, "fake_demo_no_main", _module("fake_demo_no_main"))
    monkeypatch.delitem(sys.modules, "fake_demo_missing", raising=False)

    return [
        DemoInfo(slug="creational/good", title="Good", category=Category.CREATIONAL, module="fake_demo_good"),
        DemoInfo(slug="structural/broken", title="Broken", category=Category.STRUCTURAL, module="fake_demo_broken"),
        DemoInfo(slug="behavioral/missing", title="Missing", category=Category.BEHAVIORAL, module="fake_demo_missing"),
        DemoInfo(slug="oop/no-main", title="No main", category=Category.OOP, module="fake_demo_no_main"),
    ]
