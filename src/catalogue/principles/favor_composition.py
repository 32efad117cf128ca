"""Favor composition over inheritance: a transport is an engine plus a driver.

Swapping either part gives a new kind of vehicle without a new subclass.
"""

from __future__ import annotations

from typing import Protocol


class Engine(Protocol):
    def move(self) -> None: ...


class Driver(Protocol):
    def navigate(self) -> None: ...


class CombustionEngine:
    def move(self) -> None:
        print("Combustion engine is moving the vehicle.")


class ElectricEngine:
    def move(self) -> None:
        print("Electric engine is moving the vehicle.")


class Human:
    def navigate(self) -> None:
        print("Human is navigating the vehicle.")


class Robot:
    def navigate(self) -> None:
        print("Robot is navigating the vehicle.")


class Transport:
    def __init__(self, engine: Engine, driver: Driver) -> None:
        self.engine = engine
        self.driver = driver

    def deliver(self, destination: str, cargo: str) -> None:
        print(f"Starting delivery of {cargo} to {destination}")
        self.driver.navigate()
        self.engine.move()
        print(f"Delivered {cargo} to {destination}")


def main() -> None:
    truck = Transport(CombustionEngine(), Human())
    car = Transport(ElectricEngine(), Robot())

    truck.deliver("Destination A", "Cargo A")
    car.deliver("Destination B", "Cargo B")


if __name__ == "__main__":
    main()
