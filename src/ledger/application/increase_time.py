"""Application service: Increase Time use case.

Runs the repricing pass over every known campaign, then moves the
session clock.  The clock only moves when the whole pass succeeded.
"""

from __future__ import annotations

from ledger.application.dto import ClockDTO
from ledger.domain.model.clock import SimulatedClock
from ledger.domain.repository.campaign_repository import CampaignRepository
from ledger.domain.repository.product_repository import ProductRepository
from ledger.domain.service.campaign_repricing_service import (
    CampaignRepricingService,
)


class IncreaseTimeHandler:

    def __init__(
        self,
        campaign_repo: CampaignRepository,
        product_repo: ProductRepository,
        clock: SimulatedClock,
    ) -> None:
        self._campaign_repo = campaign_repo
        self._product_repo = product_repo
        self._clock = clock

    def handle(self, hours: int) -> ClockDTO:
        svc = CampaignRepricingService(self._product_repo)
        svc.advance_time(hours, self._campaign_repo.list_all())

        self._clock.advance(hours)
        return ClockDTO(
            elapsed_hours=self._clock.elapsed_hours,
            display=self._clock.display,
        )
