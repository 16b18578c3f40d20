"""Order record.

An order is a write-only audit entry for one fulfilled purchase of a
single product.  Nothing in the ledger reads orders back.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from ledger.domain.model.value_objects import Code, Quantity


@dataclass(frozen=True)
class Order:
    product_code: Code
    quantity: Quantity
    id: uuid.UUID = field(default_factory=uuid.uuid4)
