"""Composite: a group of graphics is itself a graphic."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Graphic(ABC):
    @abstractmethod
    def move(self, x: int, y: int) -> None: ...

    @abstractmethod
    def draw(self) -> None: ...


class Dot(Graphic):
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def move(self, x: int, y: int) -> None:
        self.x += x
        self.y += y

    def draw(self) -> None:
        print(f"Drawing a dot at ({self.x}, {self.y})")


class Circle(Dot):
    def __init__(self, x: int, y: int, radius: int) -> None:
        super().__init__(x, y)
        self.radius = radius

    def draw(self) -> None:
        print(f"Drawing a circle at ({self.x}, {self.y}) with radius {self.radius}")


class CompoundGraphic(Graphic):
    def __init__(self) -> None:
        self.children: list[Graphic] = []

    def add(self, child: Graphic) -> None:
        self.children.append(child)

    def remove(self, child: Graphic) -> None:
        self.children.remove(child)

    def move(self, x: int, y: int) -> None:
        for child in self.children:
            child.move(x, y)

    def draw(self) -> None:
        for child in self.children:
            child.draw()


class ImageEditor:
    def __init__(self) -> None:
        self.all = CompoundGraphic()

    def load(self) -> None:
        self.all = CompoundGraphic()
        self.all.add(Dot(1, 2))
        self.all.add(Circle(5, 3, 10))

    def group_selected(self, components: list[Graphic]) -> CompoundGraphic:
        group = CompoundGraphic()
        for component in components:
            group.add(component)
            self.all.remove(component)
        self.all.add(group)
        return group

    def draw(self) -> None:
        self.all.draw()


def main() -> None:
    editor = ImageEditor()
    editor.load()
    editor.draw()

    group = editor.group_selected(list(editor.all.children))
    group.move(1, 1)
    print("Moved the group by (1, 1)")
    editor.draw()


if __name__ == "__main__":
    main()
