"""Encapsulation: the airport only sees the `FlyingTransport` interface."""

from __future__ import annotations

from typing import Protocol


class FlyingTransport(Protocol):
    def fly(self, origin: str, destination: str, passengers: int) -> None: ...


class _NamedTransport:
    label = "Transport"

    def fly(self, origin: str, destination: str, passengers: int) -> None:
        print(f"{self.label} flying from {origin} to {destination} with {passengers} passengers.")


class Airplane(_NamedTransport):
    label = "Airplane"


class Helicopter(_NamedTransport):
    label = "Helicopter"


class DomesticatedGryphon(_NamedTransport):
    label = "Domesticated Gryphon"


class Airport:
    def accept_flying_transport(self, transport: FlyingTransport) -> None:
        transport.fly("Origin", "Destination", 100)


def main() -> None:
    airport = Airport()
    for transport in (Airplane(), Helicopter(), DomesticatedGryphon()):
        airport.accept_flying_transport(transport)


if __name__ == "__main__":
    main()
