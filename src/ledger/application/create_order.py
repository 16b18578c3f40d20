"""Application service: Create Order use case.

Resolves the product by code and hands it to the fulfillment domain
service, which owns every rule about stock and campaign sales.
"""

from __future__ import annotations

from ledger.application.dto import OrderDTO
from ledger.domain.model.value_objects import Code
from ledger.domain.repository.campaign_repository import CampaignRepository
from ledger.domain.repository.order_repository import OrderRepository
from ledger.domain.repository.product_repository import ProductRepository
from ledger.domain.service.order_fulfillment_service import (
    OrderFulfillmentService,
)


class CreateOrderHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
        campaign_repo: CampaignRepository,
    ) -> None:
        self._product_repo = product_repo
        self._order_repo = order_repo
        self._campaign_repo = campaign_repo

    def handle(self, code: str, quantity: int) -> OrderDTO:
        product = self._product_repo.get(Code(code))

        svc = OrderFulfillmentService(self._order_repo, self._campaign_repo)
        order = svc.place_order(product, quantity)

        return OrderDTO(
            id=str(order.id),
            product_code=order.product_code.value,
            quantity=order.quantity.value,
        )
