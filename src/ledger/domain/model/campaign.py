"""Campaign aggregate.

A campaign is a time- and target-bounded promotion attached to exactly
one product.  It tracks the sales attributable to it separately from the
product's ordinary sales and closes either when its duration runs out or
when its sales target is reached.
"""

from __future__ import annotations

from dataclasses import dataclass

from ledger.domain.exceptions import BusinessRuleError
from ledger.domain.model.value_objects import (
    CampaignStatus,
    Code,
    Duration,
    Name,
    PriceManipulationLimit,
    Quantity,
    TargetSalesCount,
)


@dataclass
class Campaign:
    """Aggregate root for promotional campaigns.

    Invariants:
    - ``total_sales`` never exceeds ``target_sales_count``
    - status only moves ACTIVE -> ENDED
    - an ENDED campaign is frozen: duration, sales and average stay put
    """

    name: Name
    product_code: Code
    duration: Duration
    price_manipulation_limit: PriceManipulationLimit
    target_sales_count: TargetSalesCount
    status: CampaignStatus = CampaignStatus.ACTIVE
    total_sales: int = 0
    average_item_price: float = 0.0

    @property
    def is_active(self) -> bool:
        return self.status == CampaignStatus.ACTIVE

    @property
    def turnover(self) -> float:
        return self.total_sales * self.average_item_price

    # --- State transitions ----------------------------------------------------

    def close(self) -> None:
        """Transition ACTIVE -> ENDED."""
        self._assert_active()
        self.status = CampaignStatus.ENDED

    def remaining_duration(self, hours: int) -> int:
        """Hours left after *hours* more have elapsed, floored at zero."""
        return max(0, self.duration.value - hours)

    def elapse(self, hours: int) -> bool:
        """Count *hours* down from the duration.

        Returns True when the campaign ran out of time; the duration then
        keeps its last value and the campaign is closed.
        """
        self._assert_active()
        remaining = self.remaining_duration(hours)
        if remaining == 0:
            self.close()
            return True
        self.duration = Duration(remaining)
        return False

    # --- Sales tracking -------------------------------------------------------

    def remaining_target_sales_count(self, quantity: int) -> int:
        return self.target_sales_count.value - (quantity + self.total_sales)

    def record_sales(self, quantity: int, unit_price: float) -> None:
        """Count *quantity* units sold at *unit_price* towards the campaign.

        The average item price is the revenue-weighted running mean over
        every counted unit.
        """
        self._assert_active()
        counted = Quantity(quantity).value
        new_total = self.total_sales + counted
        if new_total > self.target_sales_count.value:
            raise BusinessRuleError(
                f"Campaign {self.name} cannot exceed its target of "
                f"{self.target_sales_count.value} sales"
            )

        if self.total_sales == 0:
            self.average_item_price = float(unit_price)
        else:
            old_revenue = self.average_item_price * self.total_sales
            self.average_item_price = (
                old_revenue + unit_price * counted
            ) / new_total
        self.total_sales = new_total

    # --- Internal helpers -----------------------------------------------------

    def _assert_active(self) -> None:
        if not self.is_active:
            raise BusinessRuleError(f"Campaign {self.name} has already ended")
