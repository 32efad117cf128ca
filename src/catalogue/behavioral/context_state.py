"""State: each state records itself as the context's current state."""

from __future__ import annotations

from typing import Protocol


class State(Protocol):
    def do_action(self, context: "Context") -> None: ...


class Context:
    def __init__(self) -> None:
        self.state: State | None = None

    def set_state(self, state: State) -> None:
        self.state = state

    def get_state(self) -> State | None:
        return self.state


class StartState:
    def do_action(self, context: Context) -> None:
        print("Player is in start state")
        context.set_state(self)

    def __str__(self) -> str:
        return "Start State"


class EndState:
    def do_action(self, context: Context) -> None:
        print("Player is in end state")
        context.set_state(self)

    def __str__(self) -> str:
        return "End State"


def main() -> None:
    context = Context()

    start_state = StartState()
    start_state.do_action(context)
    print(context.get_state())

    end_state = EndState()
    end_state.do_action(context)
    print(context.get_state())


if __name__ == "__main__":
    main()
