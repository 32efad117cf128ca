"""Prototype: objects copy themselves, so callers never need the concrete class.

Each shape has a copy constructor (`source=`) and `clone()` delegates to it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Shape(ABC):
    def __init__(self, source: "Shape | None" = None) -> None:
        self.x = 0
        self.y = 0
        self.color: str | None = None
        if source is not None:
            self.x = source.x
            self.y = source.y
            self.color = source.color

    @abstractmethod
    def clone(self) -> "Shape": ...

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self.__dict__ == other.__dict__

    __hash__ = None  # type: ignore[assignment]


class Rectangle(Shape):
    def __init__(self, source: "Rectangle | None" = None) -> None:
        super().__init__(source)
        self.width = 0
        self.height = 0
        if source is not None:
            self.width = source.width
            self.height = source.height

    def clone(self) -> "Rectangle":
        return Rectangle(self)

    def __str__(self) -> str:
        return (
            f"Rectangle(x={self.x}, y={self.y}, color={self.color!r}, "
            f"width={self.width}, height={self.height})"
        )


class Circle(Shape):
    def __init__(self, source: "Circle | None" = None) -> None:
        super().__init__(source)
        self.radius = 0
        if source is not None:
            self.radius = source.radius

    def clone(self) -> "Circle":
        return Circle(self)

    def __str__(self) -> str:
        return f"Circle(x={self.x}, y={self.y}, color={self.color!r}, radius={self.radius})"


class Application:
    def __init__(self) -> None:
        self.shapes: list[Shape] = []

        circle = Circle()
        circle.x = 10
        circle.y = 10
        circle.radius = 20
        circle.color = "red"
        self.shapes.append(circle)

        another_circle = circle.clone()
        self.shapes.append(another_circle)

        rectangle = Rectangle()
        rectangle.width = 10
        rectangle.height = 20
        rectangle.color = "blue"
        self.shapes.append(rectangle)

    def business_logic(self) -> list[Shape]:
        shapes_copy = [shape.clone() for shape in self.shapes]
        for shape in shapes_copy:
            print(shape)
        return shapes_copy


def main() -> None:
    app = Application()
    copies = app.business_logic()
    same_values = all(a == b for a, b in zip(app.shapes, copies))
    distinct = all(a is not b for a, b in zip(app.shapes, copies))
    print(f"Copies equal originals: {same_values}")
    print(f"Copies are distinct objects: {distinct}")


if __name__ == "__main__":
    main()
