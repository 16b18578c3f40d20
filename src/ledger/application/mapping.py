"""Aggregate -> DTO mapping shared by the use-case handlers."""

from __future__ import annotations

from ledger.application.dto import CampaignDTO, ProductDTO
from ledger.domain.model.campaign import Campaign
from ledger.domain.model.product import Product


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        code=product.code.value,
        price=product.price.value,
        stock=product.stock.value,
        campaign_name=(
            product.campaign_name.value if product.campaign_name else None
        ),
    )


def campaign_to_dto(campaign: Campaign) -> CampaignDTO:
    return CampaignDTO(
        name=campaign.name.value,
        product_code=campaign.product_code.value,
        duration=campaign.duration.value,
        price_manipulation_limit=campaign.price_manipulation_limit.value,
        target_sales_count=campaign.target_sales_count.value,
        status=campaign.status.value,
        total_sales=campaign.total_sales,
        turnover=campaign.turnover,
        average_item_price=campaign.average_item_price,
    )
