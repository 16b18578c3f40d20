"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the command interpreter and the application
layer without exposing the aggregates (and their mutators) to callers.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDTO:

    code: str
    price: float
    stock: int
    campaign_name: str | None = None


@dataclass(frozen=True)
class OrderDTO:

    id: str
    product_code: str
    quantity: int


@dataclass(frozen=True)
class CampaignDTO:
    """A campaign as displayed to the user."""

    name: str
    product_code: str
    duration: int
    price_manipulation_limit: int
    target_sales_count: int
    status: str
    total_sales: int
    turnover: float
    average_item_price: float


@dataclass(frozen=True)
class ClockDTO:

    elapsed_hours: int
    display: str  # e.g. "05:00"
