"""Builder with a fluent interface and no director.

Every step returns the builder itself, so a product reads as one chained
expression ending in `build()`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Engine(ABC):
    @property
    @abstractmethod
    def type(self) -> str: ...


class SportEngine(Engine):
    @property
    def type(self) -> str:
        return "Sport"


class Transport:
    """Common base of everything the builders produce."""


class Car(Transport):
    def __init__(self) -> None:
        self.seats = 0
        self.engine: Engine | None = None
        self.trip_computer = False
        self.gps = False

    def __str__(self) -> str:
        engine = self.engine.type if self.engine else None
        return (
            f"Car(seats={self.seats}, engine={engine}, "
            f"trip_computer={self.trip_computer}, gps={self.gps})"
        )


class Manual(Transport):
    def __init__(self) -> None:
        self.seats = 0
        # The manual only documents the engine, so it keeps its name.
        self.engine: str | None = None
        self.trip_computer = False
        self.gps = False

    def __str__(self) -> str:
        return (
            f"Manual(seats={self.seats}, engine={self.engine}, "
            f"trip_computer={self.trip_computer}, gps={self.gps})"
        )


class Builder(ABC):
    @abstractmethod
    def reset(self) -> None: ...

    @abstractmethod
    def seats(self, number: int) -> "Builder": ...

    @abstractmethod
    def engine(self, engine: Engine) -> "Builder": ...

    @abstractmethod
    def trip_computer(self, enabled: bool) -> "Builder": ...

    @abstractmethod
    def gps(self, enabled: bool) -> "Builder": ...

    @abstractmethod
    def build(self) -> Transport: ...


class CarBuilder(Builder):
    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self._car = Car()

    def seats(self, number: int) -> "CarBuilder":
        self._car.seats = number
        return self

    def engine(self, engine: Engine) -> "CarBuilder":
        if engine is None:
            raise ValueError("Engine cannot be None")
        self._car.engine = engine
        return self

    def trip_computer(self, enabled: bool) -> "CarBuilder":
        self._car.trip_computer = enabled
        return self

    def gps(self, enabled: bool) -> "CarBuilder":
        self._car.gps = enabled
        return self

    def build(self) -> Car:
        product = self._car
        self.reset()
        return product


class CarManualBuilder(Builder):
    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self._manual = Manual()

    def seats(self, number: int) -> "CarManualBuilder":
        self._manual.seats = number
        return self

    def engine(self, engine: Engine) -> "CarManualBuilder":
        if engine is None:
            raise ValueError("Engine cannot be None")
        self._manual.engine = engine.type
        return self

    def trip_computer(self, enabled: bool) -> "CarManualBuilder":
        self._manual.trip_computer = enabled
        return self

    def gps(self, enabled: bool) -> "CarManualBuilder":
        self._manual.gps = enabled
        return self

    def build(self) -> Manual:
        product = self._manual
        self.reset()
        return product


def main() -> None:
    car = CarBuilder().seats(2).engine(SportEngine()).trip_computer(True).gps(True).build()
    print(f"Car built: {car}")

    manual = (
        CarManualBuilder()
        .seats(2)
        .engine(SportEngine())
        .trip_computer(True)
        .gps(True)
        .build()
    )
    print(f"Manual built: {manual}")


if __name__ == "__main__":
    main()
