"""Abstraction: each airplane model keeps only what its context needs."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Airplane(ABC):
    def __init__(self) -> None:
        self.speed = 0
        self.altitude = 0

    @abstractmethod
    def fly(self) -> str: ...

    @abstractmethod
    def reverse_seat(self, n: int) -> int: ...


class FlightSimulatorAirplane(Airplane):
    def fly(self) -> str:
        self.altitude += 1000
        return f"Climbing to {self.altitude} ft"

    def reverse_seat(self, n: int) -> int:
        return 0


class FlightBookingAirplane(Airplane):
    def __init__(self, seats: int = 30) -> None:
        super().__init__()
        self.seat_map = [0] * seats

    def fly(self) -> str:
        return "Booking systems do not fly"

    def reverse_seat(self, n: int) -> int:
        if not 0 <= n <= len(self.seat_map):
            raise ValueError(f"Seat {n} is outside 0..{len(self.seat_map)}")
        return len(self.seat_map) - n


def main() -> None:
    airplane = FlightBookingAirplane()
    print(f"Reversed seat number is: {airplane.reverse_seat(5)}")


if __name__ == "__main__":
    main()
