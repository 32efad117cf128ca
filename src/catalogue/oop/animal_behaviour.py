"""Composition of behaviour: flying ability is an object an animal holds.

`set_flying_ability` swaps it at runtime, so a dog can learn to fly.
"""

from __future__ import annotations

from typing import Protocol


class Fly(Protocol):
    def fly(self) -> str: ...


class ItFlys:
    def fly(self) -> str:
        return "Flying High"


class CantFly:
    def fly(self) -> str:
        return "I can't fly"


class Animal:
    def __init__(self, name: str = "", sound: str = "", weight: int = 0) -> None:
        self.name = name
        self.sound = sound
        self.weight = weight
        self.flying_type: Fly = CantFly()

    def try_to_fly(self) -> str:
        return self.flying_type.fly()

    def set_flying_ability(self, flying_type: Fly) -> None:
        self.flying_type = flying_type


class Dog(Animal):
    def __init__(self) -> None:
        super().__init__(name="Dog", sound="Bark", weight=20)
        self.set_flying_ability(CantFly())


class Bird(Animal):
    def __init__(self) -> None:
        super().__init__(name="Bird", sound="Tweet", weight=1)
        self.set_flying_ability(ItFlys())


def main() -> None:
    sparky = Dog()
    tweety = Bird()

    print(f"Dog: {sparky.try_to_fly()}")
    print(f"Bird: {tweety.try_to_fly()}")

    sparky.set_flying_ability(ItFlys())
    print(f"Dog: {sparky.try_to_fly()}")


if __name__ == "__main__":
    main()
