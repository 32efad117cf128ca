"""HTML export of a catalogue run.

Why it lives in adapters:
- Templates are an infrastructure detail (Jinja2); the core only knows
  `CatalogueReport`.
- The output is a single self-contained file with inline CSS.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.domain.category import Category
from core.domain.models import CatalogueReport, DemoTranscript
from core.errors import ExportError

logger = logging.getLogger(__name__)

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
    )


def _group_by_category(transcripts: list[DemoTranscript]) -> list[tuple[Category, list[DemoTranscript]]]:
    groups: dict[Category, list[DemoTranscript]] = {}
    for transcript in transcripts:
        groups.setdefault(transcript.category, []).append(transcript)
    order = list(Category)
    return sorted(groups.items(), key=lambda kv: order.index(kv[0]))


def render_report_html(*, report: CatalogueReport) -> str:
    """Render a self-contained HTML page for `report`."""

    generated_at_local = report.generated_at.astimezone().isoformat(timespec="seconds")
    template = _get_env().get_template("report.html")
    return template.render(
        report=report,
        generated_at=report.generated_at.isoformat(timespec="seconds"),
        generated_at_local=generated_at_local,
        rendered_at=datetime.now().astimezone().isoformat(timespec="seconds"),
        groups=_group_by_category(report.transcripts),
        total=len(report.transcripts),
    )


def export_report_html(*, report: CatalogueReport, output_path: Path) -> Path:
    """Render and write the HTML report."""

    html = render_report_html(report=report)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
    except OSError as exc:
        raise ExportError(f"Cannot write HTML report: {exc.strerror or exc}", output_path) from exc

    logger.info("HTML report written to %s", output_path)
    return output_path
