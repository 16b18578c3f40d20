"""Domain service: Order Fulfillment.

Places a single-product order against a Product and, when the product
carries an active campaign, attributes the sale to that campaign.

Every check that can fail (quantity, stock, order persistence) runs
before the first mutation, so a rejected order leaves the product and
its campaign exactly as they were.
"""

from __future__ import annotations

import logging

from ledger.domain.exceptions import InsufficientStockError
from ledger.domain.model.campaign import Campaign
from ledger.domain.model.order import Order
from ledger.domain.model.product import Product
from ledger.domain.model.value_objects import Quantity
from ledger.domain.repository.campaign_repository import CampaignRepository
from ledger.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class OrderFulfillmentService:

    def __init__(
        self,
        order_repo: OrderRepository,
        campaign_repo: CampaignRepository,
    ) -> None:
        self._order_repo = order_repo
        self._campaign_repo = campaign_repo

    def place_order(self, product: Product, quantity: int) -> Order:
        """Sell *quantity* units of *product*.

        Steps:
        1. Validate the quantity and check stock (no partial fulfillment).
        2. Persist the order record.
        3. Decrease stock and increase demand.
        4. Count the units towards the product's active campaign, up to
           its target; reaching the target closes the campaign.
        """
        qty = Quantity(quantity).value
        if qty > product.stock.value:
            raise InsufficientStockError(
                f"Insufficient stock for {product.code} "
                f"(need {qty}, have {product.stock.value})"
            )

        order = Order(product_code=product.code, quantity=Quantity(qty))
        self._order_repo.create(order)

        product.decrease_stock(qty)
        product.increase_demand(qty)
        logger.info(
            "order %s placed: product=%s quantity=%d stock=%d",
            order.id, product.code, qty, product.stock.value,
        )

        campaign = self._active_campaign(product)
        if campaign is not None:
            self._apply_to_campaign(product, campaign, qty)
        return order

    # --- Internal helpers -----------------------------------------------------

    def _active_campaign(self, product: Product) -> Campaign | None:
        if product.campaign_name is None:
            return None
        campaign = self._campaign_repo.get(product.campaign_name)
        return campaign if campaign.is_active else None

    @staticmethod
    def _apply_to_campaign(product: Product, campaign: Campaign, qty: int) -> None:
        remaining = campaign.remaining_target_sales_count(qty)
        if remaining <= 0:
            # only the units up to the target are campaign sales
            counted = campaign.target_sales_count.value - campaign.total_sales
        else:
            counted = qty

        campaign.record_sales(counted, product.price.value)

        if remaining <= 0:
            campaign.close()
            product.remove_campaign()
            logger.info(
                "campaign %s reached its target of %d sales and ended",
                campaign.name, campaign.target_sales_count.value,
            )
