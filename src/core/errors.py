"""Catalogue errors.

Demo modules raise plain built-in exceptions (`ValueError`); the classes
below belong to the layer that finds, loads, runs and exports demos.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class CatalogueError(Exception):
    """Base exception for catalogue operations."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (Context: {context_str})"
        return self.message


class DemoNotFoundError(CatalogueError):
    """No registry entry matches the requested slug."""

    def __init__(self, slug: str, suggestions: list[str] | None = None) -> None:
        self.slug = slug
        self.suggestions = list(suggestions or [])
        message = f"Unknown demo '{slug}'"
        if self.suggestions:
            message += f"; did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)


class DemoLoadError(CatalogueError):
    """The demo module could not be imported or has no `main()`."""

    def __init__(self, message: str, slug: str, module: str) -> None:
        super().__init__(message, {"slug": slug, "module": module})
        self.slug = slug
        self.module = module


class ExportError(CatalogueError):
    """Writing a report to disk failed."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message, {"path": str(path)})
        self.path = path
