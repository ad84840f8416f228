"""
Purpose: Central configuration for delivery pricing (single source of truth).
What it does:

Stores all tunable rates:

BASE_PRICE = 2000.00

PER_KM_RATE = 400.00

PER_KG_RATE = 800.00

PACKAGE_SURCHARGES = document 800 / small 2000 / medium 4000 / large 6000 / fragile 8000

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict

from .models import PackageType


def _default_surcharges() -> Dict[PackageType, Decimal]:
    return {
        PackageType.DOCUMENT: Decimal("800.00"),
        PackageType.SMALL: Decimal("2000.00"),
        PackageType.MEDIUM: Decimal("4000.00"),
        PackageType.LARGE: Decimal("6000.00"),
        PackageType.FRAGILE: Decimal("8000.00"),
    }


@dataclass(frozen=True)
class PricingPolicy:
    """
    Central configuration for delivery price estimates (amounts in Naira).

    price = base_price
          + distance_km * per_km_rate
          + package_surcharges[package_type]
          + weight_kg * per_kg_rate
    """

    # --- Flat charge applied to every delivery ---
    base_price: Decimal = Decimal("2000.00")

    # --- Distance component ---
    per_km_rate: Decimal = Decimal("400.00")

    # --- Weight component ---
    per_kg_rate: Decimal = Decimal("800.00")

    # --- Package type component ---
    package_surcharges: Dict[PackageType, Decimal] = field(default_factory=_default_surcharges)

    # --- Display ---
    currency_symbol: str = "₦"

    def surcharge_for(self, package_type) -> Decimal:
        if package_type is None:
            return Decimal("0.00")
        return self.package_surcharges.get(package_type, Decimal("0.00"))

    def validate(self) -> None:
        """
        Basic sanity checks. Call once at startup if you want.
        """
        if self.base_price < 0:
            raise ValueError("base_price must be >= 0")

        if self.per_km_rate < 0:
            raise ValueError("per_km_rate must be >= 0")

        if self.per_kg_rate < 0:
            raise ValueError("per_kg_rate must be >= 0")

        missing = [t.value for t in PackageType if t not in self.package_surcharges]
        if missing:
            raise ValueError(f"package_surcharges missing entries for: {', '.join(missing)}")

        if any(amount < 0 for amount in self.package_surcharges.values()):
            raise ValueError("package surcharges must be >= 0")


def default_pricing_policy() -> PricingPolicy:
    """
    Convenience factory for the default policy.
    """
    p = PricingPolicy()
    p.validate()
    return p
