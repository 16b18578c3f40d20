"""Application service: Create Product use case."""

from __future__ import annotations

from ledger.application.dto import ProductDTO
from ledger.application.mapping import product_to_dto
from ledger.domain.model.product import Product
from ledger.domain.model.value_objects import Code, Price, Stock
from ledger.domain.repository.product_repository import ProductRepository


class CreateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, code: str, price: float, stock: int) -> ProductDTO:
        """Add a new product; its price and stock become the initial snapshot."""
        product = Product.create(Code(code), Price(price), Stock(stock))
        self._product_repo.create(product)
        return product_to_dto(product)
