"""Abstract repository for Campaign aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ledger.domain.model.campaign import Campaign
from ledger.domain.model.value_objects import Name


class CampaignRepository(ABC):

    @abstractmethod
    def get(self, name: Name) -> Campaign:
        """Return the campaign called *name*, or raise EntityNotFoundError."""

    @abstractmethod
    def create(self, campaign: Campaign) -> None:
        """Store a new campaign, or raise AlreadyExistsError."""

    @abstractmethod
    def exists(self, name: Name) -> bool:
        """True if a campaign called *name* has been stored."""

    @abstractmethod
    def list_all(self) -> list[Campaign]:
        """Return every campaign, in creation order."""
