"""Rich building blocks for the CLI.

Why separate components:
- Keeps command functions about flow, not layout.
- Tables and panels are reused by `list`, `show`, `run-all` and `doctor`.

Demo output is always wrapped in `Text`, never parsed as Rich markup, so
brackets in a trace print literally.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import CatalogueReport, DemoInfo, DemoTranscript


def print_banner(console: Console) -> None:
    """Print the welcome banner.

    Skipped by callers when `show_banner` is off or output is plain.
    """

    title = Text("patternbook", style="bold cyan")
    subtitle = Text("Design patterns • SOLID • OOP, one runnable example each", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_demos_table(demos: Iterable[DemoInfo]) -> Table:
    table = Table(title="Catalogue")
    table.add_column("Slug", style="cyan", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Category", style="magenta")
    table.add_column("Summary", style="dim")
    for info in demos:
        table.add_row(info.slug, info.title, info.category.label(), info.summary)
    return table


def build_transcript_panel(transcript: DemoTranscript) -> Panel:
    """Panel with everything a demo printed, plus its error if it failed."""

    body = Text("\n".join(transcript.lines))
    if transcript.error:
        if transcript.lines:
            body.append("\n\n")
        body.append(transcript.error, style="bold red")
    if not transcript.lines and not transcript.error:
        body.append("(no output)", style="dim")

    border = "green" if transcript.ok else "red"
    title = Text(f"{transcript.title} ", style="bold")
    title.append(f"[{transcript.slug}]", style="dim")
    subtitle = Text(f"{transcript.duration_ms:.2f} ms", style="dim")
    return Panel(body, title=title, subtitle=subtitle, border_style=border)


def format_progress(transcript: DemoTranscript) -> Text:
    """One status line per finished demo during `run-all`."""

    if transcript.ok:
        line = Text("  OK   ", style="bold green")
    else:
        line = Text("  FAIL ", style="bold red")
    line.append(transcript.slug)
    if transcript.error:
        line.append(f"  {transcript.error}", style="red")
    return line


def build_summary_table(report: CatalogueReport) -> Table:
    table = Table(title="Run summary")
    table.add_column("Slug", style="cyan", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Lines", justify="right")
    table.add_column("Time (ms)", justify="right", style="dim")
    for t in report.transcripts:
        status = Text("OK", style="green") if t.ok else Text("FAIL", style="red")
        table.add_row(t.slug, status, str(len(t.lines)), f"{t.duration_ms:.2f}")
    table.caption = f"{report.passed} passed, {report.failed} failed"
    return table
