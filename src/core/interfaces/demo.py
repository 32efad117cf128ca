"""Contracts for demo modules.

Why a Protocol:
- Demo modules stay plain Python files with a `main()` function; they do
  not inherit from anything defined here.
- The runner only needs a zero-argument callable that prints its trace.
"""

from __future__ import annotations

from types import ModuleType
from typing import Protocol, runtime_checkable


@runtime_checkable
class DemoEntrypoint(Protocol):
    """Minimal contract of a demo's `main`.

    Rules:
    - Takes no arguments and returns nothing.
    - Writes human-readable trace lines to standard output.
    """

    def __call__(self) -> None: ...


def resolve_entrypoint(module: ModuleType) -> DemoEntrypoint | None:
    """Return the module's `main` if it satisfies the contract."""

    candidate = getattr(module, "main", None)
    if isinstance(candidate, DemoEntrypoint):
        return candidate
    return None
