"""Visitor: export logic lives in one visitor instead of every shape."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Shape(ABC):
    @abstractmethod
    def accept(self, visitor: "Visitor") -> str: ...


class Dot(Shape):
    def accept(self, visitor: "Visitor") -> str:
        return visitor.visit_dot(self)


class Circle(Shape):
    def accept(self, visitor: "Visitor") -> str:
        return visitor.visit_circle(self)


class Rectangle(Shape):
    def accept(self, visitor: "Visitor") -> str:
        return visitor.visit_rectangle(self)


class CompoundShape(Shape):
    def __init__(self, *children: Shape) -> None:
        self.children = list(children)

    def accept(self, visitor: "Visitor") -> str:
        return visitor.visit_compound_shape(self)


class Visitor(ABC):
    @abstractmethod
    def visit_dot(self, dot: Dot) -> str: ...

    @abstractmethod
    def visit_circle(self, circle: Circle) -> str: ...

    @abstractmethod
    def visit_rectangle(self, rectangle: Rectangle) -> str: ...

    @abstractmethod
    def visit_compound_shape(self, compound: CompoundShape) -> str: ...


class XMLExportVisitor(Visitor):
    def visit_dot(self, dot: Dot) -> str:
        return "Exporting the dot's details in XML format."

    def visit_circle(self, circle: Circle) -> str:
        return "Exporting the circle's details in XML format."

    def visit_rectangle(self, rectangle: Rectangle) -> str:
        return "Exporting the rectangle's details in XML format."

    def visit_compound_shape(self, compound: CompoundShape) -> str:
        return "Exporting the CompoundShape's details in XML format."


class Application:
    def __init__(self, shapes: list[Shape]) -> None:
        self.all_shapes = shapes

    def export(self) -> list[str]:
        visitor = XMLExportVisitor()
        return [shape.accept(visitor) for shape in self.all_shapes]


def main() -> None:
    app = Application([Dot(), Circle(), Rectangle(), CompoundShape(Dot(), Circle())])
    for line in app.export():
        print(line)


if __name__ == "__main__":
    main()
