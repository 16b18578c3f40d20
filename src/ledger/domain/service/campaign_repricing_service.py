"""Domain service: Campaign Repricing.

Advances every campaign's countdown by a number of simulated hours and
re-prices the products they are attached to.

Like a reservation, the work is split in two phases so one bad campaign
never leaves the others half-processed:
  Phase 1, resolve and compute: find each campaign's product and work
            out its new duration and price.  Fails fast before any
            mutation.
  Phase 2, apply: close expired campaigns (restoring the initial price)
            and store the new durations and prices.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ledger.domain.exceptions import (
    BusinessRuleError,
    EntityNotFoundError,
    ValidationError,
)
from ledger.domain.model.campaign import Campaign
from ledger.domain.model.product import Product
from ledger.domain.model.value_objects import Price
from ledger.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _PlannedUpdate:
    campaign: Campaign
    product: Product
    expired: bool
    new_price: Price | None


class CampaignRepricingService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def advance_time(self, hours: int, campaigns: list[Campaign]) -> None:
        """Let *hours* pass for every campaign in *campaigns*.

        Ended campaigns are still checked for a product but otherwise left
        untouched.
        """
        if isinstance(hours, bool) or not isinstance(hours, int) or hours <= 0:
            raise ValidationError(f"Invalid hour: {hours!r}")
        if not campaigns:
            raise BusinessRuleError("No campaign found")

        # Phase 1: resolve products and compute the outcome
        plan: list[_PlannedUpdate] = []
        for campaign in campaigns:
            product = self._resolve_product(campaign)
            if not campaign.is_active:
                continue

            expired = campaign.remaining_duration(hours) == 0
            new_price = (
                None if expired
                else product.discounted_price(campaign.price_manipulation_limit)
            )
            plan.append(_PlannedUpdate(campaign, product, expired, new_price))

        # Phase 2: mutate
        for update in plan:
            self._apply(update, hours)

    # --- Internal helpers -----------------------------------------------------

    def _resolve_product(self, campaign: Campaign) -> Product:
        try:
            return self._product_repo.get(campaign.product_code)
        except EntityNotFoundError as exc:
            raise BusinessRuleError("Campaign does not have product") from exc

    @staticmethod
    def _apply(update: _PlannedUpdate, hours: int) -> None:
        campaign, product = update.campaign, update.product
        campaign.elapse(hours)

        if update.expired:
            if product.campaign_name == campaign.name:
                product.remove_campaign()
            logger.info(
                "campaign %s expired; product %s back at %s",
                campaign.name, product.code, product.price,
            )
            return

        if update.new_price is None:
            logger.debug(
                "campaign %s: no repricing for product %s (stock=%d, demand=%d)",
                campaign.name, product.code,
                product.stock.value, product.total_demand_count.value,
            )
            return

        product.update_price(update.new_price.value)
        logger.info(
            "campaign %s repriced product %s to %s",
            campaign.name, product.code, product.price,
        )
