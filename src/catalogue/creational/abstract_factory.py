"""Abstract Factory: families of related products behind one factory interface.

The client only talks to `FurnitureFactory`, so swapping the factory swaps
the whole furniture style at once.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Chair(ABC):
    @abstractmethod
    def sit_on(self) -> None: ...


class Sofa(ABC):
    @abstractmethod
    def lie_on(self) -> None: ...


class ModernChair(Chair):
    def sit_on(self) -> None:
        print("Sitting on a modern chair")


class ModernSofa(Sofa):
    def lie_on(self) -> None:
        print("Lying on a modern sofa")


class VictorianChair(Chair):
    def sit_on(self) -> None:
        print("Sitting on a victorian chair")


class VictorianSofa(Sofa):
    def lie_on(self) -> None:
        print("Lying on a victorian sofa")


class FurnitureFactory(ABC):
    """Creates one matching chair and sofa."""

    @abstractmethod
    def create_chair(self) -> Chair: ...

    @abstractmethod
    def create_sofa(self) -> Sofa: ...


class ModernFurnitureFactory(FurnitureFactory):
    def create_chair(self) -> Chair:
        return ModernChair()

    def create_sofa(self) -> Sofa:
        return ModernSofa()


class VictorianFurnitureFactory(FurnitureFactory):
    def create_chair(self) -> Chair:
        return VictorianChair()

    def create_sofa(self) -> Sofa:
        return VictorianSofa()


class Application:
    def __init__(self, factory: FurnitureFactory) -> None:
        self.chair = factory.create_chair()
        self.sofa = factory.create_sofa()

    def use_furniture(self) -> None:
        self.chair.sit_on()
        self.sofa.lie_on()


def main() -> None:
    for factory in (ModernFurnitureFactory(), VictorianFurnitureFactory()):
        app = Application(factory)
        app.use_furniture()


if __name__ == "__main__":
    main()
