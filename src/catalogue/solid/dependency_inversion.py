"""Dependency inversion: the report depends on `Database`, not on MySQL."""

from __future__ import annotations

from typing import Protocol


class Database(Protocol):
    def read(self, date: str) -> None: ...

    def update(self) -> None: ...


class MySQLDatabase:
    def read(self, date: str) -> None:
        print(f"MySQLDatabase reading data of date: {date}")

    def update(self) -> None:
        print("MySQLDatabase updating...")


class MongoDBDatabase:
    def read(self, date: str) -> None:
        print(f"MongoDBDatabase reading data of date: {date}")

    def update(self) -> None:
        print("MongoDBDatabase updating...")


class BudgetReport:
    def __init__(self, database: Database) -> None:
        self.database = database

    def open(self, date: str) -> None:
        self.database.read(date)

    def save(self) -> None:
        self.database.update()


def main() -> None:
    for database in (MySQLDatabase(), MongoDBDatabase()):
        report = BudgetReport(database)
        report.open("2022-01-01")
        report.save()


if __name__ == "__main__":
    main()
