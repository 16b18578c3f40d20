"""In-memory implementation of OrderRepository."""

from __future__ import annotations

from ledger.domain.exceptions import AlreadyExistsError
from ledger.domain.model.order import Order
from ledger.domain.repository.order_repository import OrderRepository
from ledger.infrastructure.persistence.storage import KeyedStorage


class MemoryOrderRepository(OrderRepository):

    def __init__(self, storage: KeyedStorage[Order] | None = None) -> None:
        self._storage = storage if storage is not None else KeyedStorage()

    def create(self, order: Order) -> None:
        if not self._storage.set_if_absent(str(order.id), order):
            raise AlreadyExistsError(f"Order {order.id} already exists")

    def __len__(self) -> int:
        return len(self._storage)
