"""JSON export of a catalogue run.

Why JSON:
- Lets CI compare transcripts between runs with a plain diff.
- Keeps the evidence of a run independent from the HTML template.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from core.domain.models import CatalogueReport
from core.errors import ExportError

logger = logging.getLogger(__name__)


def export_report_json(*, report: CatalogueReport, output_path: Path) -> Path:
    """Write `report` as UTF-8 JSON with stable key order."""

    payload = report.model_dump(mode="json")
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
            encoding="utf-8",
        )
    except OSError as exc:
        raise ExportError(f"Cannot write JSON report: {exc.strerror or exc}", output_path) from exc

    logger.info("JSON report written to %s", output_path)
    return output_path
