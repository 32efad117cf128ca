"""Polymorphism: overriding by subclass, and one `eat` with an optional quantity."""

from __future__ import annotations


class Animal:
    def make_sound(self) -> None:
        print("The animal makes a sound")

    def eat(self, food: str, quantity: int | None = None) -> None:
        if quantity is None:
            print(f"The animal eats {food}")
        else:
            print(f"The animal eats {quantity} units of {food}")


class Cat(Animal):
    def make_sound(self) -> None:
        print("The cat meows")


class Dog(Animal):
    def make_sound(self) -> None:
        print("The dog barks")


def main() -> None:
    animal = Animal()
    for creature in (animal, Cat(), Dog()):
        creature.make_sound()

    animal.eat("food")
    animal.eat("food", 2)


if __name__ == "__main__":
    main()
