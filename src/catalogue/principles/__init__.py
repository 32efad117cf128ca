"""General design principles, each shown as a before/after refactor."""
