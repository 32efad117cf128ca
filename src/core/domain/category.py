"""Demo categories for patternbook.

This module centralizes the groups the catalogue is organised in. Keeping it
in the domain layer lets the registry, the runner and the CLI share a single
source of truth without importing each other.
"""

from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    """Top-level groups of the catalogue."""

    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"
    PRINCIPLES = "principles"
    SOLID = "solid"
    OOP = "oop"

    @classmethod
    def parse(cls, value: str) -> "Category":
        """Resolve a category from user input (case-insensitive)."""

        normalized = value.strip().lower()
        for member in cls:
            if member.value == normalized or member.name.lower() == normalized:
                return member
        choices = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown category '{value}' (expected one of: {choices})")

    def label(self) -> str:
        """Human readable label for tables and reports."""

        labels = {
            Category.CREATIONAL: "Creational patterns",
            Category.STRUCTURAL: "Structural patterns",
            Category.BEHAVIORAL: "Behavioral patterns",
            Category.PRINCIPLES: "Design principles",
            Category.SOLID: "SOLID principles",
            Category.OOP: "OOP fundamentals",
        }
        return labels[self]
