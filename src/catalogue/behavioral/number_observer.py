"""Observer: three observers render the same number in different bases."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Subject:
    def __init__(self) -> None:
        self._observers: list[Observer] = []
        self._state = 0

    @property
    def state(self) -> int:
        return self._state

    def set_state(self, state: int) -> None:
        self._state = state
        self.notify_all_observers()

    def attach(self, observer: "Observer") -> None:
        self._observers.append(observer)

    def notify_all_observers(self) -> None:
        for observer in self._observers:
            observer.update()


class Observer(ABC):
    def __init__(self, subject: Subject) -> None:
        self.subject = subject
        self.subject.attach(self)

    @abstractmethod
    def update(self) -> None: ...


class BinaryObserver(Observer):
    def update(self) -> None:
        print(f"Binary String: {self.subject.state:b}")


class OctalObserver(Observer):
    def update(self) -> None:
        print(f"Octal String: {self.subject.state:o}")


class HexaObserver(Observer):
    def update(self) -> None:
        print(f"Hex String: {self.subject.state:X}")


def main() -> None:
    subject = Subject()
    BinaryObserver(subject)
    OctalObserver(subject)
    HexaObserver(subject)

    print("First state change: 15")
    subject.set_state(15)
    print("Second state change: 10")
    subject.set_state(10)


if __name__ == "__main__":
    main()
