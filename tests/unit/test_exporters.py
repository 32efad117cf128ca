"""Tests for the JSON and HTML exporters."""

from __future__ import annotations

import json

import pytest

from adapters.json_exporter import export_report_json
from adapters.report_exporter import export_report_html, render_report_html
from core.domain.category import Category
from core.domain.models import CatalogueReport, DemoTranscript
from core.errors import ExportError


@pytest.fixture
def report() -> CatalogueReport:
    return CatalogueReport(
        transcripts=[
            DemoTranscript(
                slug="creational/builder",
                title="Builder",
                category=Category.CREATIONAL,
                lines=["Car built: <Car>"],
                duration_ms=1.5,
            ),
            DemoTranscript(
                slug="oop/relations",
                title="Relations",
                category=Category.OOP,
                lines=[],
                ok=False,
                error="ValueError: no student",
            ),
        ]
    )


class TestJsonExporter:
    def test_writes_sorted_json(self, report, tmp_path):
        path = export_report_json(report=report, output_path=tmp_path / "out" / "report.json")

        text = path.read_text(encoding="utf-8")
        payload = json.loads(text)
        assert text.endswith("\n")
        assert list(payload) == sorted(payload)
        assert payload["passed"] == 1
        assert payload["failed"] == 1
        assert payload["transcripts"][0]["lines"] == ["Car built: <Car>"]
        assert payload["transcripts"][1]["category"] == "oop"

    def test_unwritable_path(self, report, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")

        with pytest.raises(ExportError) as excinfo:
            export_report_json(report=report, output_path=blocker / "report.json")
        assert excinfo.value.path == blocker / "report.json"


class TestHtmlExporter:
    def test_render_groups_by_category(self, report):
        html = render_report_html(report=report)
        assert html.index("Creational patterns") < html.index("OOP fundamentals")
        assert "Passed: 1" in html
        assert "Failed: 1" in html
        assert "ValueError: no student" in html

    def test_output_is_escaped(self, report):
        html = render_report_html(report=report)
        assert "Car built: &lt;Car&gt;" in html
        assert "<Car>" not in html

    def test_empty_report(self):
        html = render_report_html(report=CatalogueReport())
        assert "No demos were run." in html

    def test_export_writes_file(self, report, tmp_path):
        path = export_report_html(report=report, output_path=tmp_path / "r" / "report.html")
        assert path.read_text(encoding="utf-8").startswith("<!doctype html>")
