"""Builder with a director.

The director knows the order of construction steps; each builder decides
what a step means for its product. A car and its manual come out of the same
recipe.
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


class SUVEngine(Engine):
    @property
    def type(self) -> str:
        return "SUV"


class Car:
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


class Manual:
    def __init__(self) -> None:
        self.seats = 0
        self.engine: Engine | None = None
        self.trip_computer = False
        self.gps = False

    def __str__(self) -> str:
        engine = self.engine.type if self.engine else None
        return (
            f"Manual(seats={self.seats}, engine={engine}, "
            f"trip_computer={self.trip_computer}, gps={self.gps})"
        )


class Builder(ABC):
    @abstractmethod
    def reset(self) -> None: ...

    @abstractmethod
    def set_seats(self, number: int) -> None: ...

    @abstractmethod
    def set_engine(self, engine: Engine) -> None: ...

    @abstractmethod
    def set_trip_computer(self, enabled: bool) -> None: ...

    @abstractmethod
    def set_gps(self, enabled: bool) -> None: ...


class CarBuilder(Builder):
    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self._car = Car()

    def set_seats(self, number: int) -> None:
        self._car.seats = number

    def set_engine(self, engine: Engine) -> None:
        if engine is None:
            raise ValueError("Engine cannot be None")
        self._car.engine = engine

    def set_trip_computer(self, enabled: bool) -> None:
        self._car.trip_computer = enabled

    def set_gps(self, enabled: bool) -> None:
        self._car.gps = enabled

    def get_product(self) -> Car:
        """Hand over the finished car and start a fresh one."""
        product = self._car
        self.reset()
        return product


class CarManualBuilder(Builder):
    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self._manual = Manual()

    def set_seats(self, number: int) -> None:
        self._manual.seats = number

    def set_engine(self, engine: Engine) -> None:
        if engine is None:
            raise ValueError("Engine cannot be None")
        self._manual.engine = engine

    def set_trip_computer(self, enabled: bool) -> None:
        self._manual.trip_computer = enabled

    def set_gps(self, enabled: bool) -> None:
        self._manual.gps = enabled

    def get_product(self) -> Manual:
        product = self._manual
        self.reset()
        return product


class Director:
    def construct_sports_car(self, builder: Builder) -> None:
        builder.reset()
        builder.set_seats(2)
        builder.set_engine(SportEngine())
        builder.set_trip_computer(True)
        builder.set_gps(True)

    def construct_suv(self, builder: Builder) -> None:
        builder.reset()
        builder.set_seats(5)
        builder.set_engine(SUVEngine())
        builder.set_trip_computer(False)
        builder.set_gps(True)


def main() -> None:
    director = Director()

    car_builder = CarBuilder()
    director.construct_sports_car(car_builder)
    car = car_builder.get_product()
    print(f"Car built: {car}")

    manual_builder = CarManualBuilder()
    director.construct_sports_car(manual_builder)
    manual = manual_builder.get_product()
    print(f"Manual built: {manual}")

    director.construct_suv(car_builder)
    print(f"Car built: {car_builder.get_product()}")


if __name__ == "__main__":
    main()
