"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the storage-backed
repositories but keep everything in a dict. No locking, no side effects.
"""

from __future__ import annotations

from ledger.domain.exceptions import AlreadyExistsError, EntityNotFoundError
from ledger.domain.model.campaign import Campaign
from ledger.domain.model.order import Order
from ledger.domain.model.product import Product
from ledger.domain.model.value_objects import (
    Code,
    Duration,
    Name,
    Price,
    PriceManipulationLimit,
    Stock,
    TargetSalesCount,
)
from ledger.domain.repository.campaign_repository import CampaignRepository
from ledger.domain.repository.order_repository import OrderRepository
from ledger.domain.repository.product_repository import ProductRepository


class FakeOrderRepository(OrderRepository):

    def __init__(self, fail_with: Exception | None = None) -> None:
        self._store: dict[str, Order] = {}
        self._fail_with = fail_with

    def create(self, order: Order) -> None:
        if self._fail_with is not None:
            raise self._fail_with
        self._store[str(order.id)] = order

    def list_all(self) -> list[Order]:
        return list(self._store.values())


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.code.value] = p

    def get(self, code: Code) -> Product:
        try:
            return self._store[code.value]
        except KeyError:
            raise EntityNotFoundError(f"Product '{code}' not found")

    def create(self, product: Product) -> None:
        if product.code.value in self._store:
            raise AlreadyExistsError(f"Product '{product.code}' already exists")
        self._store[product.code.value] = product


class FakeCampaignRepository(CampaignRepository):

    def __init__(self, campaigns: list[Campaign] | None = None) -> None:
        self._store: dict[str, Campaign] = {}
        for c in campaigns or []:
            self._store[c.name.value] = c

    def get(self, name: Name) -> Campaign:
        try:
            return self._store[name.value]
        except KeyError:
            raise EntityNotFoundError(f"Campaign '{name}' not found")

    def create(self, campaign: Campaign) -> None:
        if campaign.name.value in self._store:
            raise AlreadyExistsError(f"Campaign '{campaign.name}' already exists")
        self._store[campaign.name.value] = campaign

    def exists(self, name: Name) -> bool:
        return name.value in self._store

    def list_all(self) -> list[Campaign]:
        return list(self._store.values())


# ── Builders ─────────────────────────────────────────────────────────────────


def make_product(code: str = "P1", price: float = 100.0, stock: int = 100) -> Product:
    return Product.create(Code(code), Price(price), Stock(stock))


def make_campaign(
    product: Product,
    name: str = "C1",
    duration: int = 10,
    limit: int = 20,
    target: int = 100,
) -> Campaign:
    """Build a campaign and link it to *product*."""
    campaign = Campaign(
        name=Name(name),
        product_code=product.code,
        duration=Duration(duration),
        price_manipulation_limit=PriceManipulationLimit(limit),
        target_sales_count=TargetSalesCount(target),
    )
    product.attach_campaign(campaign.name)
    return campaign
