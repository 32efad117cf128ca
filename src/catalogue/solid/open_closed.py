"""Open/closed: new shipping methods plug in without editing `Order`.

Notes:
- Ground shipping is free for orders above 100, otherwise
  `max(10, weight * 1.5)`; air is `max(10, weight * 3)`.
- Delivery dates count from the day the order was placed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, timedelta


@dataclass(frozen=True)
class Item:
    name: str
    weight: float
    price: float


class Shipping(ABC):
    @abstractmethod
    def get_cost(self, order: "Order") -> float: ...

    @abstractmethod
    def get_date(self, order: "Order") -> date: ...


class Ground(Shipping):
    transit_days = 5

    def get_cost(self, order: "Order") -> float:
        if order.get_total() > 100:
            return 0.0
        return max(10.0, order.get_total_weight() * 1.5)

    def get_date(self, order: "Order") -> date:
        return order.placed_on + timedelta(days=self.transit_days)


class Air(Shipping):
    transit_days = 1

    def get_cost(self, order: "Order") -> float:
        return max(10.0, order.get_total_weight() * 3)

    def get_date(self, order: "Order") -> date:
        return order.placed_on + timedelta(days=self.transit_days)


class Order:
    def __init__(self, line_items: list[Item], shipping: Shipping, placed_on: date | None = None) -> None:
        self.line_items = line_items
        self.shipping = shipping
        self.placed_on = placed_on or date.today()

    def get_total(self) -> float:
        return sum((item.price for item in self.line_items), 0.0)

    def get_total_weight(self) -> float:
        return sum((item.weight for item in self.line_items), 0.0)

    def get_shipping_cost(self) -> float:
        return self.shipping.get_cost(self)

    def get_shipping_date(self) -> date:
        return self.shipping.get_date(self)


def main() -> None:
    items = [Item("Item1", 2.5, 10.0), Item("Item2", 1.5, 15.0)]
    order = Order(items, Ground(), placed_on=date(2022, 1, 1))

    print(f"Total cost: {order.get_total()}")
    print(f"Total weight: {order.get_total_weight()}")
    print(f"Shipping cost: {order.get_shipping_cost()}")
    print(f"Shipping date: {order.get_shipping_date().isoformat()}")

    order.shipping = Air()
    print(f"Air shipping cost: {order.get_shipping_cost()}")
    print(f"Air shipping date: {order.get_shipping_date().isoformat()}")


if __name__ == "__main__":
    main()
