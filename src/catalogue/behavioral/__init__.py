"""Behavioral patterns: how objects share work and communicate."""
