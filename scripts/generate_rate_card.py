"""
Generates the price table shown on the marketing page: driving distance from
the hub to each listed city (one OSRM /table call), priced for every package
type at a reference weight, saved as CSV.
"""

import logging
import os
import sys

import numpy as np
import pandas as pd

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from quotes import PackageSpec, PackageType, estimate_price
from routing import OSRMClient

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

HUB = ("Lagos", (6.524379, 3.379206))

CITIES = {
    "Ibadan": (7.377535, 3.947040),
    "Abeokuta": (7.145244, 3.327695),
    "Benin City": (6.335045, 5.627492),
    "Abuja": (9.076479, 7.398574),
    "Port Harcourt": (4.815554, 7.049844),
    "Kano": (12.002179, 8.591956),
}


def build_rate_card(osrm: OSRMClient, weight_kg: float = 1.0) -> pd.DataFrame:
    names = list(CITIES)
    table = osrm.compute_table(sources=[HUB[1]], destinations=[CITIES[name] for name in names])
    distances_m = np.array(table["distances"][0], dtype=float) if table["distances"] else np.full(len(names), np.nan)

    rows = []
    for name, distance_m in zip(names, distances_m):
        if np.isnan(distance_m):
            logger.warning(f"No road distance from {HUB[0]} to {name}, skipping")
            continue
        distance_km = round(float(distance_m) / 1000.0, 2)
        for package_type in PackageType:
            estimate = estimate_price(distance_km, PackageSpec(package_type, weight_kg))
            rows.append({
                "destination": name,
                "distance_km": distance_km,
                "package_type": package_type.value,
                "price": float(estimate.amount),
            })

    df = pd.DataFrame(rows)
    if df.empty:
        return df
    card = df.pivot_table(index=["destination", "distance_km"], columns="package_type", values="price")
    return card[[t.value for t in PackageType]].sort_index(level="distance_km")


if __name__ == "__main__":
    card = build_rate_card(OSRMClient())
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    output_path = os.path.join(base_dir, "rate_card.csv")
    card.to_csv(output_path)
    print(card)
    print(f"\nRate card written to '{output_path}'.")
