"""Abstract repository for Order records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ledger.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def create(self, order: Order) -> None:
        """Persist a new order, or raise AlreadyExistsError on an ID clash."""
