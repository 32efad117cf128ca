"""patternbook command line interface (Typer + Rich).

Notes:
- Commands only orchestrate: lookup and execution live in
  `core.services.catalogue_runner`, files are written by the adapters.
- Catalogue errors become a red message on stderr and exit code 1.
- Logging goes to stderr through Rich, so demo transcripts on stdout stay
  clean when piped.
"""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import NoReturn, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.syntax import Syntax

from adapters.json_exporter import export_report_json
from adapters.report_exporter import export_report_html
from cli import doctor
from cli.ui_components import (
    build_demos_table,
    build_summary_table,
    build_transcript_panel,
    format_progress,
    print_banner,
)
from core.config import APP_NAME, AppSettings, OutputFormat
from core.domain.category import Category
from core.errors import CatalogueError
from core.services.catalogue_runner import (
    RunHooks,
    get_demo,
    list_demos,
    load_source,
    run_all,
    run_demo,
)

logger = logging.getLogger(__name__)

app = typer.Typer(
    no_args_is_help=True,
    help="Runnable catalogue of design patterns, SOLID principles and OOP fundamentals.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _app_version() -> str:
    try:
        return version(APP_NAME)
    except PackageNotFoundError:
        return "0.0.0+local"


def configure_logging(level: str) -> None:
    """Configure the root logger once per invocation."""

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_settings(**overrides: object) -> AppSettings:
    try:
        return AppSettings(**overrides)
    except ValidationError as exc:
        _err_console.print(f"[red]Invalid configuration:[/red]\n{escape(str(exc))}")
        raise typer.Exit(code=1) from exc


def _fail(exc: CatalogueError) -> NoReturn:
    logger.debug("Command failed", exc_info=exc)
    _err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
    raise typer.Exit(code=1)


def _parse_category(value: str | None) -> Category | None:
    if value is None:
        return None
    try:
        return Category.parse(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--category") from exc


def _resolve_export_path(raw: str, settings: AppSettings) -> Path:
    """Bare file names go into `reports_dir`; anything with a directory is kept.

    Checked on the raw option value, so `./report.json` stays in the current
    directory.
    """

    path = Path(raw)
    if path.name == raw:
        return settings.reports_dir / path
    return path


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {_app_version()}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Override PATTERNBOOK_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    ),
) -> None:
    overrides = {"log_level": log_level} if log_level else {}
    settings = _load_settings(**overrides)
    configure_logging(settings.log_level)
    logger.debug("Settings: %s", settings.model_dump(mode="json"))


@app.command(name="list")
def list_command(
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Only show one category."),
) -> None:
    """List the available demos."""

    settings = _load_settings()
    selected = list_demos(_parse_category(category))

    if settings.output_format == OutputFormat.PLAIN:
        for info in selected:
            typer.echo(f"{info.slug}\t{info.title}")
        return

    if settings.show_banner:
        print_banner(_console)
    _console.print(build_demos_table(selected))


@app.command()
def show(
    slug: str = typer.Argument(..., help="Demo slug (`creational/builder`) or a unique name (`builder`)."),
    plain: bool = typer.Option(False, "--plain", help="Print the raw trace lines only."),
) -> None:
    """Run one demo and print its transcript."""

    settings = _load_settings()
    try:
        info = get_demo(slug)
        transcript = run_demo(info)
    except CatalogueError as exc:
        _fail(exc)

    if plain or settings.output_format == OutputFormat.PLAIN:
        for line in transcript.lines:
            typer.echo(line)
        if transcript.error:
            typer.echo(transcript.error, err=True)
    else:
        _console.print(build_transcript_panel(transcript))

    if not transcript.ok:
        raise typer.Exit(code=1)


@app.command()
def source(
    slug: str = typer.Argument(..., help="Demo slug or unique name."),
) -> None:
    """Print the source code of a demo."""

    try:
        info = get_demo(slug)
        code = load_source(info)
    except CatalogueError as exc:
        _fail(exc)

    _console.print(Syntax(code, "python", line_numbers=True, word_wrap=False))


@app.command(name="run-all")
def run_all_command(
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Only run one category."),
    export_json: Optional[str] = typer.Option(
        None, "--export-json", help="Write the report as JSON. A bare file name goes into the reports directory."
    ),
    export_html: Optional[str] = typer.Option(
        None, "--export-html", help="Write the report as HTML. A bare file name goes into the reports directory."
    ),
    fail_fast: bool = typer.Option(False, "--fail-fast", help="Stop after the first failing demo."),
) -> None:
    """Run every demo (or one category) and print a summary."""

    settings = _load_settings()
    if fail_fast:
        settings = settings.model_copy(update={"fail_fast": True})
    selected_category = _parse_category(category)

    plain = settings.output_format == OutputFormat.PLAIN
    if settings.show_banner and not plain:
        print_banner(_console)

    hooks = RunHooks(
        demo_done=lambda t: _console.print(format_progress(t)),
        warning=lambda message: _err_console.print(f"[yellow]{escape(message)}[/yellow]"),
    )
    report = run_all(settings=settings, category=selected_category, hooks=hooks)

    if plain:
        typer.echo(f"{report.passed} passed, {report.failed} failed")
    else:
        _console.print(build_summary_table(report))

    try:
        if export_json is not None:
            written = export_report_json(report=report, output_path=_resolve_export_path(export_json, settings))
            _console.print(f"[green]JSON report:[/green] {escape(str(written))}")
        if export_html is not None:
            written = export_report_html(report=report, output_path=_resolve_export_path(export_html, settings))
            _console.print(f"[green]HTML report:[/green] {escape(str(written))}")
    except CatalogueError as exc:
        _fail(exc)

    if report.failed:
        raise typer.Exit(code=1)


def run() -> None:
    """Console script entry point."""

    app()


if __name__ == "__main__":
    run()
