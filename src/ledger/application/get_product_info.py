"""Application service: Get Product Info use case.

Looking a product up is itself a sign of interest, so every successful
lookup adds one unit to the product's demand counter.  That counter is
what the repricing formula divides sales by.
"""

from __future__ import annotations

from ledger.application.dto import ProductDTO
from ledger.application.mapping import product_to_dto
from ledger.domain.model.value_objects import Code
from ledger.domain.repository.product_repository import ProductRepository


class GetProductInfoHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, code: str) -> ProductDTO:
        product = self._product_repo.get(Code(code))
        product.increase_demand(1)
        return product_to_dto(product)
