"""Application service: Create Campaign use case.

Checks run in a fixed order so the first problem reported is stable:
name, name uniqueness, product code, product existence, the three
numeric parameters, then the cross-aggregate rules (target within stock,
product not already in a campaign).
"""

from __future__ import annotations

import logging

from ledger.application.dto import CampaignDTO
from ledger.application.mapping import campaign_to_dto
from ledger.domain.exceptions import AlreadyExistsError, BusinessRuleError
from ledger.domain.model.campaign import Campaign
from ledger.domain.model.value_objects import (
    Code,
    Duration,
    Name,
    PriceManipulationLimit,
    TargetSalesCount,
)
from ledger.domain.repository.campaign_repository import CampaignRepository
from ledger.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CreateCampaignHandler:

    def __init__(
        self,
        campaign_repo: CampaignRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._campaign_repo = campaign_repo
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        code: str,
        duration: int,
        limit: int,
        target_sales_count: int,
    ) -> CampaignDTO:
        campaign_name = Name(name)
        if self._campaign_repo.exists(campaign_name):
            raise AlreadyExistsError(f"Campaign '{name}' already exists")

        product = self._product_repo.get(Code(code))

        campaign = Campaign(
            name=campaign_name,
            product_code=product.code,
            duration=Duration(duration),
            price_manipulation_limit=PriceManipulationLimit(limit),
            target_sales_count=TargetSalesCount(target_sales_count),
        )

        if product.stock.value < campaign.target_sales_count.value:
            raise BusinessRuleError("Target sales count must be less than stock")
        if product.campaign_name is not None:
            raise BusinessRuleError(
                f"Product {product.code} already has campaign {product.campaign_name}"
            )

        self._campaign_repo.create(campaign)
        product.attach_campaign(campaign.name)
        logger.info(
            "campaign %s started for product %s: duration=%d limit=%d target=%d",
            campaign.name, product.code, duration, limit, target_sales_count,
        )
        return campaign_to_dto(campaign)
