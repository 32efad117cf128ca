"""Facade over a small shape library: `ShapeMaker` hides construction and checks."""

from __future__ import annotations

from typing import Protocol


class Shape(Protocol):
    def draw(self) -> str: ...


class Circle:
    def __init__(self, radius: int) -> None:
        self.radius = radius

    def draw(self) -> str:
        return "Draw a circle with radius "

    def check_radius(self) -> str | None:
        if self.radius > 0:
            return str(self.radius)
        return None


class Rectangle:
    def draw(self) -> str:
        return "Draw a rectangle"


class Square:
    def draw(self) -> str:
        return "Draw a square"


class ShapeMaker:
    def __init__(self, radius: int) -> None:
        self._circle = Circle(radius)
        self._rectangle = Rectangle()
        self._square = Square()

    def draw_circle(self) -> None:
        radius = self._circle.check_radius()
        if radius is None:
            print("Circle has no valid radius")
            return
        print(self._circle.draw() + radius)

    def draw_rectangle(self) -> None:
        print(self._rectangle.draw())

    def draw_square(self) -> None:
        print(self._square.draw())


def main() -> None:
    maker = ShapeMaker(radius=5)
    maker.draw_circle()
    maker.draw_rectangle()
    maker.draw_square()

    ShapeMaker(radius=0).draw_circle()


if __name__ == "__main__":
    main()
