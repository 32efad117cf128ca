"""Decorator on shapes: draw the wrapped shape, then add a red border."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Shape(ABC):
    @abstractmethod
    def draw(self) -> None: ...


class Circle(Shape):
    def draw(self) -> None:
        print("Shape: Circle")


class Rectangle(Shape):
    def draw(self) -> None:
        print("Shape: Rectangle")


class ShapeDecorator(Shape):
    def __init__(self, decorated_shape: Shape) -> None:
        self.decorated_shape = decorated_shape

    def draw(self) -> None:
        self.decorated_shape.draw()


class RedShapeDecorator(ShapeDecorator):
    def draw(self) -> None:
        super().draw()
        self.set_border(self.decorated_shape)

    def set_border(self, decorated_shape: Shape) -> None:
        print("Red Border Added")


def main() -> None:
    circle = Circle()
    red_circle = RedShapeDecorator(Circle())
    red_rectangle = RedShapeDecorator(Rectangle())

    print("Circle with normal border")
    circle.draw()

    print("Circle of red border")
    red_circle.draw()

    print("Rectangle of red border")
    red_rectangle.draw()


if __name__ == "__main__":
    main()
