"""In-memory implementation of CampaignRepository."""

from __future__ import annotations

from ledger.domain.exceptions import AlreadyExistsError, EntityNotFoundError
from ledger.domain.model.campaign import Campaign
from ledger.domain.model.value_objects import Name
from ledger.domain.repository.campaign_repository import CampaignRepository
from ledger.infrastructure.persistence.storage import KeyedStorage


class MemoryCampaignRepository(CampaignRepository):

    def __init__(self, storage: KeyedStorage[Campaign] | None = None) -> None:
        self._storage = storage if storage is not None else KeyedStorage()

    def get(self, name: Name) -> Campaign:
        campaign = self._storage.get(name.value)
        if campaign is None:
            raise EntityNotFoundError(f"Campaign '{name}' not found")
        return campaign

    def create(self, campaign: Campaign) -> None:
        if not self._storage.set_if_absent(campaign.name.value, campaign):
            raise AlreadyExistsError(f"Campaign '{campaign.name}' already exists")

    def exists(self, name: Name) -> bool:
        return self._storage.contains(name.value)

    def list_all(self) -> list[Campaign]:
        return self._storage.values()
