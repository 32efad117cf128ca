"""Encapsulate what varies: tax rules live in one calculator, not in `Order`.

Country and state lookups are tables, so adding a region touches data only.
"""

from __future__ import annotations

from dataclasses import dataclass, field

US_STATE_RATES = {"NYC": 0.07, "CA": 0.20}
EU_COUNTRY_RATES = {"Finland": 0.07, "Italy": 0.20}
CHINA_RATE = 0.3


@dataclass
class Product:
    name: str = "widget"


@dataclass
class LineItem:
    price: float
    quantity: int
    product: Product = field(default_factory=Product)


class TaxCalculator:
    def get_tax_rate(self, country: str, state: str | None, product: Product) -> float:
        if country == "US":
            return self.get_us_tax(state)
        if country == "EU":
            return self.get_eu_tax(state)
        if country == "China":
            return self.get_chinese_tax(product)
        return 0.0

    def get_us_tax(self, state: str | None) -> float:
        return US_STATE_RATES.get(state or "", 0.0)

    def get_eu_tax(self, country: str | None) -> float:
        return EU_COUNTRY_RATES.get(country or "", 0.0)

    def get_chinese_tax(self, product: Product) -> float:
        return CHINA_RATE


@dataclass
class Order:
    tax_calculator: TaxCalculator
    line_items: list[LineItem]
    country: str
    state: str | None = None

    def get_order_total(self) -> float:
        total = 0.0
        for item in self.line_items:
            subtotal = item.price * item.quantity
            total += subtotal * self.tax_calculator.get_tax_rate(self.country, self.state, item.product)
        return total


def main() -> None:
    order = Order(
        tax_calculator=TaxCalculator(),
        line_items=[LineItem(price=100, quantity=2)],
        country="US",
        state="CA",
    )
    print(f"Order total: {order.get_order_total()}")


if __name__ == "__main__":
    main()
