"""Flyweight: many trees, few tree types.

Intrinsic state (name, color, texture) lives in a shared `TreeType`;
extrinsic state (coordinates) stays in each `Tree`.
"""

from __future__ import annotations


class TreeType:
    def __init__(self, name: str, color: str, texture: str) -> None:
        self.name = name
        self.color = color
        self.texture = texture

    def draw(self, canvas: str, x: int, y: int) -> None:
        print(
            f"Drawing a {self.name} tree of color {self.color} and texture "
            f"{self.texture} on {canvas} at coordinates ({x}, {y})"
        )


class TreeFactory:
    def __init__(self) -> None:
        self._tree_types: dict[tuple[str, str, str], TreeType] = {}

    def get_tree_type(self, name: str, color: str, texture: str) -> TreeType:
        key = (name, color, texture)
        if key not in self._tree_types:
            self._tree_types[key] = TreeType(name, color, texture)
            print(f"Creating a new TreeType: {name}, {color}, {texture}")
        return self._tree_types[key]

    def __len__(self) -> int:
        return len(self._tree_types)


class Tree:
    __slots__ = ("x", "y", "type")

    def __init__(self, x: int, y: int, type: TreeType) -> None:
        self.x = x
        self.y = y
        self.type = type

    def draw(self, canvas: str) -> None:
        self.type.draw(canvas, self.x, self.y)


class Forest:
    def __init__(self) -> None:
        self.factory = TreeFactory()
        self.trees: list[Tree] = []

    def plant_tree(self, x: int, y: int, name: str, color: str, texture: str) -> Tree:
        tree_type = self.factory.get_tree_type(name, color, texture)
        tree = Tree(x, y, tree_type)
        self.trees.append(tree)
        return tree

    def draw(self, canvas: str) -> None:
        for tree in self.trees:
            tree.draw(canvas)


def main() -> None:
    forest = Forest()
    forest.plant_tree(1, 2, "Oak", "Green", "Rough")
    forest.plant_tree(2, 3, "Pine", "Dark Green", "Smooth")
    forest.plant_tree(3, 4, "Oak", "Green", "Rough")
    forest.draw("Canvas1")
    print(f"{len(forest.trees)} trees share {len(forest.factory)} tree types")


if __name__ == "__main__":
    main()
