"""Single responsibility: report printing moved out of `Employee`."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Employee:
    name: str
    position: str


class TimesheetReport:
    def __init__(self, employee: Employee) -> None:
        self.employee = employee

    def print_report(self) -> None:
        print(f"Printing timesheet report for {self.employee.name}")


def main() -> None:
    employee = Employee(name="John Doe", position="Software Engineer")
    print(f"Employee created: {employee.name}")

    TimesheetReport(employee).print_report()


if __name__ == "__main__":
    main()
