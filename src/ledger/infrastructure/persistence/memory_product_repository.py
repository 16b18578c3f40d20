"""In-memory implementation of ProductRepository."""

from __future__ import annotations

from ledger.domain.exceptions import AlreadyExistsError, EntityNotFoundError
from ledger.domain.model.product import Product
from ledger.domain.model.value_objects import Code
from ledger.domain.repository.product_repository import ProductRepository
from ledger.infrastructure.persistence.storage import KeyedStorage


class MemoryProductRepository(ProductRepository):

    def __init__(self, storage: KeyedStorage[Product] | None = None) -> None:
        self._storage = storage if storage is not None else KeyedStorage()

    def get(self, code: Code) -> Product:
        product = self._storage.get(code.value)
        if product is None:
            raise EntityNotFoundError(f"Product '{code}' not found")
        return product

    def create(self, product: Product) -> None:
        if not self._storage.set_if_absent(product.code.value, product):
            raise AlreadyExistsError(f"Product '{product.code}' already exists")
