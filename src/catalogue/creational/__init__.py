"""Creational patterns: how objects get made."""
