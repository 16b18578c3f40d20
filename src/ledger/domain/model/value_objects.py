"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist: every
mutation on an aggregate builds a fresh value object, so an out-of-range
result (negative stock, non-positive price) fails at the point it is made.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from ledger.domain.exceptions import ValidationError


def _require_int(label: str, value: object) -> None:
    # bool is an int subclass; True must not pass as a quantity of 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{label} must be an integer, got {type(value).__name__}"
        )


def _require_text(label: str, value: object) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} is required")


# ── Identifiers ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Code:
    """Unique textual product identifier."""

    value: str

    def __post_init__(self) -> None:
        _require_text("Code", self.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Name:
    """Unique campaign name."""

    value: str

    def __post_init__(self) -> None:
        _require_text("Name", self.value)

    def __str__(self) -> str:
        return self.value


# ── Amounts ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Price:
    """A strictly positive unit price, as a plain float (no currency)."""

    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise ValidationError(
                f"Price must be a number, got {type(self.value).__name__}"
            )
        if math.isnan(self.value) or self.value <= 0:
            raise ValidationError(f"Price must be positive, got {self.value}")

    def __str__(self) -> str:
        return f"{self.value:.1f}"


@dataclass(frozen=True)
class Stock:
    """Units on hand; zero means sold out."""

    value: int

    def __post_init__(self) -> None:
        _require_int("Stock", self.value)
        if self.value < 0:
            raise ValidationError(f"Stock cannot be negative, got {self.value}")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        _require_int("Quantity", self.value)
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Demand:
    """Cumulative units ever requested against a product."""

    value: int = 0

    def __post_init__(self) -> None:
        _require_int("Demand", self.value)
        if self.value < 0:
            raise ValidationError(f"Demand cannot be negative, got {self.value}")


# ── Campaign parameters ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class Duration:
    """Remaining campaign lifetime in simulated hours."""

    value: int

    def __post_init__(self) -> None:
        _require_int("Duration", self.value)
        if self.value <= 0:
            raise ValidationError("Duration must be positive")


@dataclass(frozen=True)
class PriceManipulationLimit:
    """Largest swing, in price units, the repricing formula may apply."""

    value: int

    def __post_init__(self) -> None:
        _require_int("Price manipulation limit", self.value)
        if self.value <= 0:
            raise ValidationError("Price manipulation limit must be positive")


@dataclass(frozen=True)
class TargetSalesCount:
    value: int

    def __post_init__(self) -> None:
        _require_int("Target sales count", self.value)
        if self.value <= 0:
            raise ValidationError("Target sales count must be positive")


class CampaignStatus(Enum):
    ACTIVE = "Active"
    ENDED = "Ended"

    @staticmethod
    def of(value: str) -> CampaignStatus:
        """Parse one of the two status literals."""
        if not value:
            raise ValidationError("Status cannot be empty")
        try:
            return CampaignStatus(value)
        except ValueError as exc:
            raise ValidationError(
                "Status must be one of 'Active', 'Ended'"
            ) from exc
