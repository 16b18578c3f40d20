"""Ledger session: one simulated world.

Bundles the repositories, the simulated clock and a handler per use
case.  Everything a command needs is reachable from here, so two
sessions never share state.
"""

from __future__ import annotations

from ledger.application.create_campaign import CreateCampaignHandler
from ledger.application.create_order import CreateOrderHandler
from ledger.application.create_product import CreateProductHandler
from ledger.application.get_campaign_info import GetCampaignInfoHandler
from ledger.application.get_product_info import GetProductInfoHandler
from ledger.application.increase_time import IncreaseTimeHandler
from ledger.domain.model.clock import SimulatedClock
from ledger.domain.repository.campaign_repository import CampaignRepository
from ledger.domain.repository.order_repository import OrderRepository
from ledger.domain.repository.product_repository import ProductRepository


class LedgerSession:

    def __init__(
        self,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
        campaign_repo: CampaignRepository,
        clock: SimulatedClock | None = None,
    ) -> None:
        self.clock = clock if clock is not None else SimulatedClock()

        self.create_product = CreateProductHandler(product_repo)
        self.get_product_info = GetProductInfoHandler(product_repo)
        self.create_order = CreateOrderHandler(product_repo, order_repo, campaign_repo)
        self.create_campaign = CreateCampaignHandler(campaign_repo, product_repo)
        self.get_campaign_info = GetCampaignInfoHandler(campaign_repo)
        self.increase_time = IncreaseTimeHandler(campaign_repo, product_repo, self.clock)
