"""Inheritance: a cat is an animal and overrides how it walks and breathes."""

from __future__ import annotations

from abc import ABC, abstractmethod


class FourLegged(ABC):
    @abstractmethod
    def walk(self) -> None: ...


class OxygenBreather(ABC):
    @abstractmethod
    def breathe(self) -> None: ...


class Animal(FourLegged, OxygenBreather):
    def walk(self) -> None:
        print("Animal is walking on four legs.")

    def breathe(self) -> None:
        print("Animal is breathing oxygen.")


class Cat(Animal):
    def walk(self) -> None:
        print("Cat is walking on four legs.")

    def breathe(self) -> None:
        print("Cat is breathing oxygen.")


def main() -> None:
    cat: Animal = Cat()
    cat.walk()
    cat.breathe()


if __name__ == "__main__":
    main()
