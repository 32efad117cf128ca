"""Domain models and entities.

- Plain, strict data structures (Pydantic v2) for the catalogue.
- The domain knows nothing about the CLI, the terminal or the exporters.
"""
