"""Template method: `GameAI.turn` fixes the order, subclasses fill the steps."""

from __future__ import annotations

from abc import ABC, abstractmethod


class GameAI(ABC):
    def turn(self) -> None:
        self.collect_resources()
        self.build_structures()
        self.build_units()
        self.attack()

    def collect_resources(self) -> None:
        print("Collecting resources...")

    @abstractmethod
    def build_structures(self) -> None: ...

    @abstractmethod
    def build_units(self) -> None: ...

    def attack(self) -> None:
        enemy = self.closest_enemy()
        if enemy is None:
            self.send_scouts("map.center")
        else:
            self.send_warriors(enemy)

    def closest_enemy(self) -> str | None:
        return "Enemy1"

    @abstractmethod
    def send_scouts(self, position: str) -> None: ...

    @abstractmethod
    def send_warriors(self, position: str) -> None: ...


class OrcsAI(GameAI):
    def build_structures(self) -> None:
        print("Orcs building structures...")

    def build_units(self) -> None:
        print("Orcs building units...")

    def send_scouts(self, position: str) -> None:
        print(f"Orcs sending scouts to {position}")

    def send_warriors(self, position: str) -> None:
        print(f"Orcs sending warriors to {position}")


class MonstersAI(GameAI):
    def collect_resources(self) -> None:
        print("Monsters don't collect resources.")

    def build_structures(self) -> None:
        print("Monsters don't build structures.")

    def build_units(self) -> None:
        print("Monsters don't build units.")

    def send_scouts(self, position: str) -> None:
        print("Monsters don't send scouts.")

    def send_warriors(self, position: str) -> None:
        print("Monsters don't send warriors.")


def main() -> None:
    game_ai: GameAI = OrcsAI()
    game_ai.turn()

    game_ai = MonstersAI()
    game_ai.turn()


if __name__ == "__main__":
    main()
