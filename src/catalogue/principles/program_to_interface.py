"""Program to an interface: companies only know the `Employee` protocol."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol


class Employee(Protocol):
    def do_work(self) -> None: ...


class Designer:
    def do_work(self) -> None:
        print("Designing...")


class Programmer:
    def do_work(self) -> None:
        print("Programming...")


class Tester:
    def do_work(self) -> None:
        print("Testing...")


class Company(ABC):
    @abstractmethod
    def get_employees(self) -> list[Employee]: ...

    def do_work(self) -> None:
        for employee in self.get_employees():
            employee.do_work()

    def create_software(self) -> None:
        print("Starting software creation process...")
        self.do_work()
        print("Software creation process completed.")


class GameDevCompany(Company):
    def get_employees(self) -> list[Employee]:
        return [Designer(), Programmer()]


class OutsourcingCompany(Company):
    def get_employees(self) -> list[Employee]:
        return [Tester(), Programmer()]


def main() -> None:
    GameDevCompany().create_software()
    OutsourcingCompany().create_software()


if __name__ == "__main__":
    main()
