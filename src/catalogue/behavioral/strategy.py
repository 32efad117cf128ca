"""Strategy: a context delegates arithmetic to whichever strategy is set."""

from __future__ import annotations

from typing import Protocol


class Strategy(Protocol):
    def execute(self, a: int, b: int) -> int: ...


class ConcreteStrategyAdd:
    def execute(self, a: int, b: int) -> int:
        return a + b


class ConcreteStrategySubtract:
    def execute(self, a: int, b: int) -> int:
        return a - b


class ConcreteStrategyMultiply:
    def execute(self, a: int, b: int) -> int:
        return a * b


STRATEGIES: dict[str, tuple[str, type]] = {
    "addition": ("Addition", ConcreteStrategyAdd),
    "subtraction": ("Subtraction", ConcreteStrategySubtract),
    "multiplication": ("Multiplication", ConcreteStrategyMultiply),
}


class Context:
    def __init__(self) -> None:
        self.strategy: Strategy | None = None

    def set_strategy(self, strategy: Strategy) -> None:
        self.strategy = strategy

    def execute_strategy(self, a: int, b: int) -> int:
        if self.strategy is None:
            raise ValueError("No strategy set")
        return self.strategy.execute(a, b)


def strategy_for(action: str) -> tuple[str, Strategy]:
    try:
        label, cls = STRATEGIES[action]
    except KeyError:
        raise ValueError(f"Unknown action: {action}") from None
    return label, cls()


def main() -> None:
    context = Context()
    first_number, second_number = 10, 5

    for action in ("addition", "subtraction", "multiplication"):
        label, strategy = strategy_for(action)
        context.set_strategy(strategy)
        print(f"Strategy set to {label}")
        print(f"Result: {context.execute_strategy(first_number, second_number)}")


if __name__ == "__main__":
    main()
