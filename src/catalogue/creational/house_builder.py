"""Builder in its smallest form: a director calling three steps on a house."""

from __future__ import annotations

from abc import ABC, abstractmethod


class House:
    def __init__(self) -> None:
        self.roof: str | None = None
        self.floor: str | None = None
        self.base: str | None = None

    def display(self) -> None:
        print(f"Roof: {self.roof}")
        print(f"Floor: {self.floor}")
        print(f"Base: {self.base}")


class HouseBuilder(ABC):
    @abstractmethod
    def build_roof(self) -> None: ...

    @abstractmethod
    def build_floor(self) -> None: ...

    @abstractmethod
    def build_base(self) -> None: ...

    @abstractmethod
    def build(self) -> House: ...


class WoodHouseBuilder(HouseBuilder):
    def __init__(self) -> None:
        self._house = House()

    def build_roof(self) -> None:
        self._house.roof = "ROOF IS SET"

    def build_floor(self) -> None:
        self._house.floor = "FLOOR IS SET"

    def build_base(self) -> None:
        self._house.base = "BASE IS SET"

    def build(self) -> House:
        return self._house


class Director:
    def __init__(self, builder: HouseBuilder) -> None:
        self._builder = builder

    def construct(self) -> None:
        self._builder.build_roof()
        self._builder.build_floor()
        self._builder.build_base()

    def build(self) -> House:
        return self._builder.build()


def main() -> None:
    builder = WoodHouseBuilder()
    director = Director(builder)
    director.construct()
    house = director.build()
    house.display()


if __name__ == "__main__":
    main()
