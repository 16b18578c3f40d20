"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure
layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ledger.domain.model.product import Product
from ledger.domain.model.value_objects import Code


class ProductRepository(ABC):

    @abstractmethod
    def get(self, code: Code) -> Product:
        """Return the product with *code*.

        Raises EntityNotFoundError if there is none.
        """

    @abstractmethod
    def create(self, product: Product) -> None:
        """Store a new product.

        Raises AlreadyExistsError if the code is taken.
        """
