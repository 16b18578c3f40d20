"""Product aggregate.

A product owns its live price and stock, the snapshots taken at creation,
the running demand counter and, at most, the name of one attached
campaign.  The campaign itself lives in its own repository; the product
only keeps its identifier.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ledger.domain.exceptions import BusinessRuleError
from ledger.domain.model.value_objects import (
    Code,
    Demand,
    Name,
    Price,
    PriceManipulationLimit,
    Stock,
)


@dataclass
class Product:
    """A product in the catalog.

    Use ``Product.create()`` for new products so the initial price and
    stock snapshots are taken from the same values as the live ones.
    """

    code: Code
    price: Price
    stock: Stock
    initial_price: Price
    initial_stock: Stock
    total_demand_count: Demand = field(default_factory=Demand)
    campaign_name: Name | None = None

    @staticmethod
    def create(code: Code, price: Price, stock: Stock) -> Product:
        return Product(
            code=code,
            price=price,
            stock=stock,
            initial_price=price,
            initial_stock=stock,
        )

    # --- Mutations ------------------------------------------------------------

    def decrease_stock(self, amount: int) -> None:
        self.stock = Stock(self.stock.value - amount)

    def increase_demand(self, amount: int) -> None:
        self.total_demand_count = Demand(self.total_demand_count.value + amount)

    def update_price(self, new_price: float) -> None:
        self.price = Price(new_price)

    def attach_campaign(self, name: Name) -> None:
        """Link a campaign to this product.

        A product carries at most one campaign; attaching a second one
        while the first is still linked is rejected.
        """
        if self.campaign_name is not None:
            raise BusinessRuleError(
                f"Product {self.code} already has campaign {self.campaign_name}"
            )
        self.campaign_name = name

    def remove_campaign(self) -> None:
        """Drop the campaign link and return to the initial price."""
        self.campaign_name = None
        self.price = self.initial_price

    # --- Pricing --------------------------------------------------------------

    @property
    def sell_count(self) -> int:
        return self.initial_stock.value - self.stock.value

    def discounted_price(self, limit: PriceManipulationLimit) -> Price | None:
        """Compute the demand-driven price, or None when it must not move.

        The sales rate is the share of cumulative demand that turned into
        sales.  A 50% rate keeps the initial price; every point above or
        below moves it by ``limit / 50``.  Sold-out products keep their
        price, and so do products nobody has asked for yet (the rate is
        undefined without demand).
        """
        if self.stock.value == 0:
            return None
        demand = self.total_demand_count.value
        if demand == 0:
            return None

        sales_rate = self.sell_count / demand * 100
        price_change = (sales_rate - 50) * limit.value / 50
        return Price(self.initial_price.value + price_change)
