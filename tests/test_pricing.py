from decimal import Decimal

import pytest

from quotes import (
    PackageSpec,
    PackageType,
    PricingPolicy,
    build_package_spec,
    coerce_weight,
    default_pricing_policy,
    estimate_price,
    format_price,
)

SURCHARGES = {
    PackageType.DOCUMENT: 800,
    PackageType.SMALL: 2000,
    PackageType.MEDIUM: 4000,
    PackageType.LARGE: 6000,
    PackageType.FRAGILE: 8000,
}


def test_medium_parcel_ten_km_example():
    estimate = estimate_price(10.0, PackageSpec(PackageType.MEDIUM, 2.0))

    assert estimate.amount == Decimal("11600.00")
    assert estimate.display() == "₦11600.00"
    assert estimate.base == Decimal("2000.00")
    assert estimate.distance_charge == Decimal("4000.00")
    assert estimate.package_charge == Decimal("4000.00")
    assert estimate.weight_charge == Decimal("1600.00")


@pytest.mark.parametrize("package_type", list(PackageType))
@pytest.mark.parametrize("distance_km, weight_kg", [(0.0, 0.0), (3.75, 1.5), (42.13, 12.0)])
def test_formula_holds_for_every_package_type(package_type, distance_km, weight_kg):
    expected = (Decimal("2000") + Decimal(str(distance_km)) * 400
                + SURCHARGES[package_type] + Decimal(str(weight_kg)) * 800)

    estimate = estimate_price(distance_km, PackageSpec(package_type, weight_kg))

    assert estimate.amount == expected.quantize(Decimal("0.01"))


def test_no_route_prices_at_zero_whatever_the_package():
    estimate = estimate_price(None, PackageSpec(PackageType.FRAGILE, 25.0))

    assert estimate.amount == Decimal("0.00")
    assert estimate.is_zero
    assert estimate.display() == "₦0.00"


def test_zero_distance_route_still_charges_base_and_package():
    estimate = estimate_price(0.0, PackageSpec(PackageType.DOCUMENT, 0.0))

    assert estimate.display() == "₦2800.00"


def test_unknown_package_type_has_no_surcharge():
    spec = build_package_spec("pallet", "1")

    assert spec.package_type is None
    assert estimate_price(1.0, spec).amount == Decimal("3200.00")


@pytest.mark.parametrize("raw, expected", [
    (None, 0.0),
    ("", 0.0),
    ("  ", 0.0),
    ("abc", 0.0),
    ("-3", 0.0),
    (-1.5, 0.0),
    (float("nan"), 0.0),
    (float("inf"), 0.0),
    ("nan", 0.0),
    (True, 0.0),
    ("2.5", 2.5),
    (" 4 ", 4.0),
    (7, 7.0),
])
def test_coerce_weight(raw, expected):
    assert coerce_weight(raw) == expected


def test_bad_weight_never_reaches_the_price():
    spec = build_package_spec("small", "heavy")

    assert estimate_price(5.0, spec).display() == "₦6000.00"


def test_package_type_parse_is_case_insensitive():
    assert PackageType.parse(" Fragile ") is PackageType.FRAGILE
    assert PackageType.parse(PackageType.LARGE) is PackageType.LARGE
    assert PackageType.parse("") is None


def test_rounding_is_half_up_to_two_decimals():
    estimate = estimate_price(0.0, PackageSpec(None, 0.00000625))

    # 0.00000625 kg * 800 = 0.005, rounds up to 0.01
    assert estimate.weight_charge == Decimal("0.01")
    assert estimate.amount == Decimal("2000.01")


def test_format_price_uses_policy_symbol():
    policy = PricingPolicy(currency_symbol="$")

    assert format_price(Decimal("12.5"), policy) == "$12.50"
    assert format_price(Decimal("11600")) == "₦11600.00"


def test_policy_validation():
    default_pricing_policy()

    with pytest.raises(ValueError):
        PricingPolicy(per_km_rate=Decimal("-1")).validate()

    with pytest.raises(ValueError):
        PricingPolicy(package_surcharges={PackageType.SMALL: Decimal("1")}).validate()
