"""Simple factory: one function maps a name to a concrete class."""

from __future__ import annotations


class Pet:
    name = "Pet"
    sound = "..."

    def get_pet(self) -> str:
        return f"{self.name} says {self.sound}"


class Cat(Pet):
    name = "Cat"
    sound = "Meow"


class Dog(Pet):
    name = "Dog"
    sound = "Woof"


class Bird(Pet):
    name = "Bird"
    sound = "Tweet"


class PetFactory:
    _kinds: dict[str, type[Pet]] = {"Cat": Cat, "Dog": Dog, "Bird": Bird}

    def get_pet_type(self, kind: str) -> Pet:
        try:
            return self._kinds[kind]()
        except KeyError:
            raise ValueError(f"Unknown pet type: {kind}") from None


def main() -> None:
    factory = PetFactory()
    for kind in ("Cat", "Dog", "Bird"):
        pet = factory.get_pet_type(kind)
        print(pet.get_pet())


if __name__ == "__main__":
    main()
