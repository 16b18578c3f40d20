"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from ledger.application.session import LedgerSession
from ledger.infrastructure.persistence.memory_campaign_repository import (
    MemoryCampaignRepository,
)
from ledger.infrastructure.persistence.memory_order_repository import (
    MemoryOrderRepository,
)
from ledger.infrastructure.persistence.memory_product_repository import (
    MemoryProductRepository,
)


def new_session() -> LedgerSession:
    """A fresh, empty ledger backed by in-memory storage."""
    return LedgerSession(
        product_repo=MemoryProductRepository(),
        order_repo=MemoryOrderRepository(),
        campaign_repo=MemoryCampaignRepository(),
    )
