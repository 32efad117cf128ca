"""Catalogue lookup and execution utilities.

This module holds the flow shared by every entry point (CLI, doctor, tests):
finding registry entries, importing a demo lazily and capturing what it
prints. Printing progress and rendering results stays in the CLI layer;
callers observe a run through `RunHooks`.
"""

from __future__ import annotations

import difflib
import importlib
import inspect
import io
import logging
import time
from contextlib import redirect_stdout
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Iterable

from catalogue import DEMOS
from core.config import AppSettings
from core.domain.category import Category
from core.domain.models import CatalogueReport, DemoInfo, DemoTranscript
from core.errors import DemoLoadError, DemoNotFoundError
from core.interfaces.demo import DemoEntrypoint, resolve_entrypoint

logger = logging.getLogger(__name__)


@dataclass
class RunHooks:
    """Optional callbacks for UI layers (progress, warnings)."""

    demo_start: Callable[[DemoInfo], None] | None = None
    demo_done: Callable[[DemoTranscript], None] | None = None
    warning: Callable[[str], None] | None = None


def list_demos(
    category: Category | None = None,
    *,
    demos: Iterable[DemoInfo] = DEMOS,
) -> list[DemoInfo]:
    """Registry entries in catalogue order, optionally restricted to a category."""

    return [info for info in demos if category is None or info.category == category]


def get_demo(slug: str, *, demos: Iterable[DemoInfo] = DEMOS) -> DemoInfo:
    """Find a registry entry by slug.

    A bare name (`builder`) is accepted when it matches exactly one slug.
    """

    entries = list(demos)
    wanted = slug.strip().lower()
    for info in entries:
        if info.slug == wanted:
            return info

    by_name = [info for info in entries if info.name == wanted]
    if len(by_name) == 1:
        return by_name[0]

    slugs = [info.slug for info in entries]
    suggestions = difflib.get_close_matches(wanted, slugs, n=3, cutoff=0.5)
    if not suggestions:
        suggestions = [s for s in slugs if wanted and wanted in s][:3]
    raise DemoNotFoundError(slug, suggestions)


def load_entrypoint(info: DemoInfo) -> DemoEntrypoint:
    """Import the demo module and return its `main`."""

    try:
        module = importlib.import_module(info.module)
    except ImportError as exc:
        raise DemoLoadError(f"Cannot import demo module: {exc}", info.slug, info.module) from exc

    entrypoint = resolve_entrypoint(module)
    if entrypoint is None:
        raise DemoLoadError("Demo module has no callable main()", info.slug, info.module)
    return entrypoint


def load_source(info: DemoInfo) -> str:
    """Return the source code of the demo module."""

    try:
        module = importlib.import_module(info.module)
        return inspect.getsource(module)
    except (ImportError, OSError) as exc:
        raise DemoLoadError(f"Cannot read demo source: {exc}", info.slug, info.module) from exc


def capture_lines(entrypoint: Callable[[], None]) -> tuple[list[str], BaseException | None]:
    """Run `entrypoint` with stdout redirected.

    Returns the printed lines and the exception raised, if any. Lines printed
    before the exception are kept. `SystemExit` is recorded like any other
    error; `KeyboardInterrupt` propagates.
    """

    buffer = io.StringIO()
    error: BaseException | None = None
    with redirect_stdout(buffer):
        try:
            entrypoint()
        except (Exception, SystemExit) as exc:
            error = exc
    return buffer.getvalue().splitlines(), error


def run_demo(info: DemoInfo, *, hooks: RunHooks | None = None) -> DemoTranscript:
    """Execute one demo and return its transcript.

    `DemoLoadError` propagates; an exception raised by the demo itself is
    recorded in the transcript instead.
    """

    hooks = hooks or RunHooks()
    entrypoint = load_entrypoint(info)

    if hooks.demo_start:
        hooks.demo_start(info)

    started_at = datetime.now(timezone.utc)
    start = time.perf_counter()
    lines, error = capture_lines(entrypoint)
    duration_ms = (time.perf_counter() - start) * 1000.0

    transcript = DemoTranscript(
        slug=info.slug,
        title=info.title,
        category=info.category,
        lines=lines,
        ok=error is None,
        error=f"{type(error).__name__}: {error}" if error is not None else None,
        started_at=started_at,
        duration_ms=duration_ms,
    )
    if error is not None:
        logger.warning("Demo %s failed: %s", info.slug, transcript.error)
    else:
        logger.debug("Demo %s printed %d lines in %.2f ms", info.slug, len(lines), duration_ms)

    if hooks.demo_done:
        hooks.demo_done(transcript)
    return transcript


def run_all(
    *,
    settings: AppSettings,
    category: Category | None = None,
    hooks: RunHooks | None = None,
    demos: Iterable[DemoInfo] = DEMOS,
) -> CatalogueReport:
    """Run every selected demo in registry order."""

    hooks = hooks or RunHooks()
    selected = list_demos(category, demos=demos)
    if not selected:
        message = "No demos matched the selection."
        logger.warning(message)
        if hooks.warning:
            hooks.warning(message)

    transcripts: list[DemoTranscript] = []
    for info in selected:
        try:
            transcript = run_demo(info, hooks=hooks)
        except DemoLoadError as exc:
            logger.error("Could not load %s: %s", info.slug, exc)
            transcript = DemoTranscript(
                slug=info.slug,
                title=info.title,
                category=info.category,
                ok=False,
                error=f"{type(exc).__name__}: {exc.message}",
            )
            if hooks.demo_done:
                hooks.demo_done(transcript)
        transcripts.append(transcript)

        if settings.fail_fast and not transcript.ok:
            message = f"Stopping after {info.slug} failed (fail-fast)."
            logger.info(message)
            if hooks.warning:
                hooks.warning(message)
            break

    return CatalogueReport(transcripts=transcripts)
