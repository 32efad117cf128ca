"""Doctor command for environment diagnostics."""

from __future__ import annotations

import logging

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from core.config import AppSettings, OutputFormat, get_user_env_file, write_user_env_vars
from core.errors import DemoLoadError
from core.services.catalogue_runner import list_demos, load_entrypoint

logger = logging.getLogger(__name__)

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _check_demos() -> tuple[int, list[DemoLoadError]]:
    """Import every registered demo without running it."""

    demos = list_demos()
    failures: list[DemoLoadError] = []
    for info in demos:
        try:
            load_entrypoint(info)
        except DemoLoadError as exc:
            logger.debug("Load check failed for %s", info.slug, exc_info=True)
            failures.append(exc)
    return len(demos), failures


@app.command()
def run() -> None:
    """Show the effective configuration and check that every demo loads."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _console.print(f"[red]Invalid configuration:[/red]\n{escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    env_file = get_user_env_file()

    table = Table(title="patternbook doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    if env_file.exists():
        table.add_row("User config", "OK", str(env_file))
    else:
        table.add_row("User config", "OPTIONAL", f"Not found: {env_file} (run `doctor configure`)")
    table.add_row("Log level", "OK", settings.log_level)
    table.add_row("Output format", "OK", settings.output_format.value)
    table.add_row("Reports dir", "OK", str(settings.reports_dir))
    table.add_row("Fail fast", "OK", "on" if settings.fail_fast else "off")

    # Demos
    total, failures = _check_demos()
    if failures:
        table.add_row("Demo modules", "FAIL", f"{total - len(failures)}/{total} loaded")
        for exc in failures:
            table.add_row(f"  {exc.slug}", "FAIL", escape(exc.message))
    else:
        table.add_row("Demo modules", "OK", f"{total}/{total} loaded")

    _console.print(table)

    if failures:
        raise typer.Exit(code=1)


@app.command()
def configure() -> None:
    """Interactive setup (stores preferences in the user config .env)."""

    output_format = typer.prompt(
        "Output format (rich/plain)",
        default=OutputFormat.RICH.value,
        show_default=True,
    ).strip().lower()
    try:
        OutputFormat(output_format)
    except ValueError as exc:
        raise typer.BadParameter(f"output format must be one of: {', '.join(f.value for f in OutputFormat)}") from exc

    log_level = typer.prompt("Log level", default="WARNING", show_default=True).strip().upper()
    if log_level not in _LOG_LEVELS:
        raise typer.BadParameter(f"log level must be one of: {', '.join(_LOG_LEVELS)}")

    show_banner = typer.confirm("Show banner", default=True)
    reports_dir = typer.prompt("Reports directory", default="reports", show_default=True).strip()

    env_path = write_user_env_vars(
        {
            "PATTERNBOOK_OUTPUT_FORMAT": output_format,
            "PATTERNBOOK_LOG_LEVEL": log_level,
            "PATTERNBOOK_SHOW_BANNER": "true" if show_banner else "false",
            "PATTERNBOOK_REPORTS_DIR": reports_dir or None,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {escape(str(env_path))}")
