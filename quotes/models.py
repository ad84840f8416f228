"""
Purpose: Domain models for delivery quotes.
What it does:
- Defines the package enum and the package spec read from the form
- Defines the derived PriceEstimate (never stored, recomputed on change)

PackageType = document | small | medium | large | fragile

Rule: No routing calls, no pricing math. Models only.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

ZERO = Decimal("0.00")


class PackageType(str, Enum):
    """
    Package categories offered on the delivery form.
    Values match the form's <select> options.
    """
    DOCUMENT = "document"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    FRAGILE = "fragile"

    @classmethod
    def parse(cls, value: Optional[str | PackageType]) -> Optional[PackageType]:
        """
        Blank or unknown form values carry no package surcharge.
        """
        if isinstance(value, PackageType):
            return value
        if not value:
            return None
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class PackageSpec:
    """
    What is being sent. weight_kg is already coerced (finite, >= 0).
    """
    package_type: Optional[PackageType] = None
    weight_kg: float = 0.0


@dataclass(frozen=True)
class PriceEstimate:
    """
    Output of the price calculator, with the breakdown kept for display/logging.
    """
    amount: Decimal
    base: Decimal = ZERO
    distance_charge: Decimal = ZERO
    package_charge: Decimal = ZERO
    weight_charge: Decimal = ZERO
    currency_symbol: str = "₦"

    @property
    def is_zero(self) -> bool:
        return self.amount == ZERO

    def display(self) -> str:
        return f"{self.currency_symbol}{self.amount:.2f}"
