"""Tests for core.services.catalogue_runner."""

from __future__ import annotations

import sys
import types

import pytest

from core.domain.category import Category
from core.errors import DemoLoadError, DemoNotFoundError
from core.services.catalogue_runner import (
    RunHooks,
    capture_lines,
    get_demo,
    list_demos,
    load_entrypoint,
    load_source,
    run_all,
    run_demo,
)


class TestLookup:
    def test_list_in_registry_order(self, fake_demos):
        assert [d.slug for d in list_demos(demos=fake_demos)] == [d.slug for d in fake_demos]

    def test_list_by_category(self, fake_demos):
        assert [d.slug for d in list_demos(Category.STRUCTURAL, demos=fake_demos)] == ["structural/broken"]

    def test_get_by_slug(self):
        assert get_demo("creational/builder").module == "catalogue.creational.builder"

    def test_get_by_unique_name(self):
        assert get_demo("Proxy").slug == "structural/proxy"

    def test_unknown_slug_suggests_close_matches(self):
        with pytest.raises(DemoNotFoundError) as excinfo:
            get_demo("creational/buider")
        assert "creational/builder" in excinfo.value.suggestions
        assert "did you mean" in str(excinfo.value)

    def test_unknown_slug_without_matches(self):
        with pytest.raises(DemoNotFoundError) as excinfo:
            get_demo("zzzzzz")
        assert excinfo.value.suggestions == []
        assert str(excinfo.value) == "Unknown demo 'zzzzzz'"

    def test_ambiguous_name_is_not_resolved(self, fake_demos):
        demos = fake_demos + [fake_demos[0].model_copy(update={"slug": "oop/good"})]
        with pytest.raises(DemoNotFoundError):
            get_demo("good", demos=demos)


class TestLoading:
    def test_missing_module(self, fake_demos):
        with pytest.raises(DemoLoadError) as excinfo:
            load_entrypoint(fake_demos[2])
        assert excinfo.value.slug == "behavioral/missing"
        assert "module=fake_demo_missing" in str(excinfo.value)

    def test_module_without_main(self, fake_demos):
        with pytest.raises(DemoLoadError, match="no callable main"):
            load_entrypoint(fake_demos[3])

    def test_load_source(self):
        code = load_source(get_demo("behavioral/visitor"))
        assert "class XMLExportVisitor" in code


class TestRunDemo:
    def test_capture_lines_keeps_output_before_error(self):
        def entrypoint():
            print("one")
            raise RuntimeError("two")

        lines, error = capture_lines(entrypoint)
        assert lines == ["one"]
        assert isinstance(error, RuntimeError)

    def test_capture_lines_records_sys_exit(self):
        def entrypoint():
            print("bye")
            sys.exit(3)

        lines, error = capture_lines(entrypoint)
        assert lines == ["bye"]
        assert isinstance(error, SystemExit)

    def test_keyboard_interrupt_propagates(self):
        def entrypoint():
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            capture_lines(entrypoint)

    def test_transcript_matches_printed_lines(self, fake_demos):
        transcript = run_demo(fake_demos[0])
        assert transcript.ok
        assert transcript.lines == ["hello", "world"]
        assert transcript.error is None
        assert transcript.duration_ms >= 0

    def test_failure_is_recorded(self, fake_demos, caplog):
        transcript = run_demo(fake_demos[1])
        assert not transcript.ok
        assert transcript.lines == ["before the failure"]
        assert transcript.error == "ValueError: boom"
        assert "structural/broken" in caplog.text

    def test_real_demo(self):
        transcript = run_demo(get_demo("creational/factory-method"))
        assert transcript.lines == ["Using product A", "Using product B"]

    def test_hooks_are_called(self, fake_demos):
        started, done = [], []
        hooks = RunHooks(demo_start=started.append, demo_done=done.append)

        run_demo(fake_demos[0], hooks=hooks)

        assert started == [fake_demos[0]]
        assert [t.slug for t in done] == ["creational/good"]

    def test_load_error_propagates(self, fake_demos):
        with pytest.raises(DemoLoadError):
            run_demo(fake_demos[2])


class TestRunAll:
    def test_runs_everything_and_records_failures(self, fake_demos, settings):
        report = run_all(settings=settings, demos=fake_demos)

        assert [t.slug for t in report.transcripts] == [d.slug for d in fake_demos]
        assert report.passed == 1
        assert report.failed == 3
        assert report.failures()[1].error.startswith("DemoLoadError")

    def test_exiting_demo_is_recorded_as_failure(self, fake_demos, settings, monkeypatch):
        def exiting_main() -> None:
            print("bye")
            sys.exit(3)

        module = types.ModuleType("fake_demo_exit")
        module.main = exiting_main
        monkeypatch.setitem(sys.modules, "fake_demo_exit", module)
        exiting = fake_demos[0].model_copy(update={"slug": "oop/exit", "module": "fake_demo_exit"})

        report = run_all(settings=settings, demos=[exiting, fake_demos[0]])

        assert report.failed == 1
        assert report.passed == 1
        assert report.transcripts[0].lines == ["bye"]
        assert report.transcripts[0].error == "SystemExit: 3"

    def test_fail_fast_stops_after_first_failure(self, fake_demos, settings):
        settings = settings.model_copy(update={"fail_fast": True})
        warnings: list[str] = []

        report = run_all(settings=settings, demos=fake_demos, hooks=RunHooks(warning=warnings.append))

        assert [t.slug for t in report.transcripts] == ["creational/good", "structural/broken"]
        assert any("fail-fast" in w for w in warnings)

    def test_empty_selection_warns(self, fake_demos, settings):
        warnings: list[str] = []
        report = run_all(
            settings=settings,
            category=Category.SOLID,
            demos=fake_demos,
            hooks=RunHooks(warning=warnings.append),
        )
        assert report.transcripts == []
        assert warnings == ["No demos matched the selection."]

    def test_whole_catalogue_passes(self, settings):
        report = run_all(settings=settings)
        assert report.failed == 0, [t.error for t in report.failures()]
        assert report.passed == len(list_demos())
