"""Catalogue models (Pydantic v2).

Notes:
- These models describe *what* a demo is and what a run produced, never how
  the demo itself is written. Demo modules do not import them.
- Transcripts serialise straight to JSON for the exporters.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, computed_field
from pydantic.config import ConfigDict

from core.domain.category import Category


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DemoInfo(BaseModel):
    """Registry entry for one demo module."""

    model_config = ConfigDict(frozen=True)

    slug: str = Field(
        ...,
        min_length=3,
        max_length=96,
        pattern=r"^[a-z]+/[a-z0-9-]+$",
        description="Stable identifier, `<category>/<name>`.",
    )
    title: str = Field(
        ...,
        min_length=1,
        max_length=128,
        description="Human readable name of the example.",
    )
    category: Category = Field(
        ...,
        description="Catalogue group the demo belongs to.",
    )
    summary: str = Field(
        default="",
        max_length=1_000,
        description="One or two sentences on what the demo shows.",
    )
    module: str = Field(
        ...,
        min_length=1,
        description="Dotted import path of a module exposing `main()`.",
    )

    @property
    def name(self) -> str:
        return self.slug.split("/", 1)[1]


class DemoTranscript(BaseModel):
    """Result of running a single demo.

    `lines` holds everything the demo printed, in order, even when the demo
    failed part-way through.
    """

    slug: str = Field(..., description="Slug of the demo that produced the run.")
    title: str = Field(..., description="Title copied from the registry entry.")
    category: Category = Field(..., description="Category copied from the registry entry.")
    lines: list[str] = Field(
        default_factory=list,
        description="Captured standard output, one item per line.",
    )
    ok: bool = Field(
        default=True,
        description="False when the demo raised an exception.",
    )
    error: str | None = Field(
        default=None,
        description="`<ExceptionType>: <message>` when the demo failed.",
    )
    started_at: datetime = Field(
        default_factory=_utcnow,
        description="Moment the run started (UTC).",
    )
    duration_ms: float = Field(
        default=0.0,
        ge=0.0,
        description="Wall-clock duration of the run in milliseconds.",
    )


class CatalogueReport(BaseModel):
    """Aggregate of several transcripts, used by `run-all` and the exporters."""

    generated_at: datetime = Field(
        default_factory=_utcnow,
        description="Moment the report was assembled (UTC).",
    )
    transcripts: list[DemoTranscript] = Field(
        default_factory=list,
        description="Transcripts in execution order.",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> int:
        return sum(1 for t in self.transcripts if t.ok)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def failed(self) -> int:
        return sum(1 for t in self.transcripts if not t.ok)

    def failures(self) -> list[DemoTranscript]:
        return [t for t in self.transcripts if not t.ok]
