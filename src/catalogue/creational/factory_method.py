"""Factory Method: the creator's algorithm is fixed, subclasses pick the product."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Product(ABC):
    @abstractmethod
    def use(self) -> None: ...


class ConcreteProductA(Product):
    def use(self) -> None:
        print("Using product A")


class ConcreteProductB(Product):
    def use(self) -> None:
        print("Using product B")


class Creator(ABC):
    def some_operation(self) -> None:
        product = self.factory_method()
        product.use()

    @abstractmethod
    def factory_method(self) -> Product: ...


class ConcreteCreatorA(Creator):
    def factory_method(self) -> Product:
        return ConcreteProductA()


class ConcreteCreatorB(Creator):
    def factory_method(self) -> Product:
        return ConcreteProductB()


def main() -> None:
    for creator in (ConcreteCreatorA(), ConcreteCreatorB()):
        creator.some_operation()


if __name__ == "__main__":
    main()
