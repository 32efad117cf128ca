"""Adapter: make a square peg answer the round-peg question."""

from __future__ import annotations

import math


class RoundPeg:
    def __init__(self, radius: float) -> None:
        self._radius = radius

    @property
    def radius(self) -> float:
        return self._radius


class RoundHole:
    def __init__(self, radius: float) -> None:
        self.radius = radius

    def fits(self, peg: RoundPeg) -> bool:
        return self.radius >= peg.radius


class SquarePeg:
    def __init__(self, width: float) -> None:
        self.width = width


class SquarePegAdapter(RoundPeg):
    """Presents the smallest circle that contains the square."""

    def __init__(self, peg: SquarePeg) -> None:
        super().__init__(0)
        self._peg = peg

    @property
    def radius(self) -> float:
        return self._peg.width * math.sqrt(2) / 2


def main() -> None:
    hole = RoundHole(5)
    round_peg = RoundPeg(5)
    print(hole.fits(round_peg))

    small_square_peg = SquarePeg(5)
    large_square_peg = SquarePeg(10)
    print(hole.fits(SquarePegAdapter(small_square_peg)))
    print(hole.fits(SquarePegAdapter(large_square_peg)))


if __name__ == "__main__":
    main()
