"""
Purpose: The price calculator.
What it does:
Maps (route distance, package type, weight) to a PriceEstimate.
Pure and deterministic: no I/O, Decimal arithmetic, 2-decimal half-up rounding.
"""

from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional

from .models import PackageSpec, PackageType, PriceEstimate, ZERO
from .policy import PricingPolicy, default_pricing_policy

CENTS = Decimal("0.01")


def coerce_weight(value: Any) -> float:
    """
    Form weight -> kilograms. Anything that is not a finite, non-negative
    number (None, "", "abc", NaN, inf, -3) becomes 0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        weight = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(weight) or weight < 0:
        return 0.0
    return weight


def build_package_spec(package_type: Any, weight: Any) -> PackageSpec:
    return PackageSpec(package_type=PackageType.parse(package_type), weight_kg=coerce_weight(weight))


def _money(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def zero_estimate(policy: Optional[PricingPolicy] = None) -> PriceEstimate:
    policy = policy or default_pricing_policy()
    return PriceEstimate(amount=ZERO, currency_symbol=policy.currency_symbol)


def estimate_price(
    distance_km: Optional[float],
    package: PackageSpec,
    policy: Optional[PricingPolicy] = None,
) -> PriceEstimate:
    """
    price = base + distance_km * per_km + surcharge[type] + weight_kg * per_kg

    distance_km is None while no route is known; the estimate is then zero.
    """
    policy = policy or default_pricing_policy()

    if distance_km is None:
        return zero_estimate(policy)

    # A route distance is never negative; clamp bad input rather than discount
    distance = Decimal(str(max(float(distance_km), 0.0)))
    weight = Decimal(str(coerce_weight(package.weight_kg)))

    base = _money(policy.base_price)
    distance_charge = _money(distance * policy.per_km_rate)
    package_charge = _money(policy.surcharge_for(package.package_type))
    weight_charge = _money(weight * policy.per_kg_rate)

    return PriceEstimate(
        amount=_money(base + distance_charge + package_charge + weight_charge),
        base=base,
        distance_charge=distance_charge,
        package_charge=package_charge,
        weight_charge=weight_charge,
        currency_symbol=policy.currency_symbol,
    )


def format_price(amount: Decimal, policy: Optional[PricingPolicy] = None) -> str:
    policy = policy or default_pricing_policy()
    return f"{policy.currency_symbol}{_money(amount):.2f}"
