"""
Quotes domain package.

Public API:
- Domain models: PackageType, PackageSpec, PriceEstimate
- Pricing configuration: PricingPolicy, default_pricing_policy
- Calculator: estimate_price, coerce_weight, build_package_spec, format_price
"""
from .models import PackageType, PackageSpec, PriceEstimate
from .policy import PricingPolicy, default_pricing_policy
from .calculator import estimate_price, coerce_weight, build_package_spec, format_price, zero_estimate

__all__ = ["PackageType",
           "PackageSpec",
             "PriceEstimate",
               "PricingPolicy",
               "default_pricing_policy",
               "estimate_price",
               "coerce_weight",
               "build_package_spec",
               "format_price",
               "zero_estimate",
               ]
