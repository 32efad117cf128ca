"""Singleton: one lazily created database connection for the whole program."""

from __future__ import annotations

import threading


class Database:
    """Access through `Database.get_instance()`, never the constructor."""

    _instance: "Database | None" = None
    _lock = threading.Lock()

    def __init__(self) -> None:
        if Database._instance is not None:
            raise RuntimeError("Use Database.get_instance()")
        self.queries: list[str] = []

    @classmethod
    def get_instance(cls) -> "Database":
        with cls._lock:
            if cls._instance is None:
                cls._instance = cls()
        return cls._instance

    def query(self, sql: str) -> None:
        self.queries.append(sql)
        print(f"Executing query: {sql}")


def main() -> None:
    foo = Database.get_instance()
    foo.query("SELECT ...")

    bar = Database.get_instance()
    bar.query("SELECT ...")

    if foo is bar:
        print("foo and bar are the same instance, demonstrating the Singleton pattern.")


if __name__ == "__main__":
    main()
