"""Application service: Get Campaign Info use case."""

from __future__ import annotations

from ledger.application.dto import CampaignDTO
from ledger.application.mapping import campaign_to_dto
from ledger.domain.model.value_objects import Name
from ledger.domain.repository.campaign_repository import CampaignRepository


class GetCampaignInfoHandler:

    def __init__(self, campaign_repo: CampaignRepository) -> None:
        self._campaign_repo = campaign_repo

    def handle(self, name: str) -> CampaignDTO:
        return campaign_to_dto(self._campaign_repo.get(Name(name)))
