"""
Purpose: Core data models for the routing domain.
What it does:
Defines the Route returned by the routing adapter, in our internal
(lat, lon) convention, independent of OSRM's response shape.

Rule: No HTTP calls here. Models only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

LatLon = Tuple[float, float]
Bounds = Tuple[LatLon, LatLon]


@dataclass(frozen=True)
class Route:
    """
    A driving route between pickup and delivery.
    path is the polyline geometry, ordered from pickup to delivery.
    """
    path: Tuple[LatLon, ...]
    distance_m: float # in meters
    duration_s: float # in seconds

    @property
    def distance_km(self) -> float:
        # Display and pricing both work from the 2-decimal kilometre value
        return round(self.distance_m / 1000.0, 2)

    @property
    def duration_min(self) -> int:
        return int(round(self.duration_s / 60.0))

    def bounds(self) -> Bounds:
        """
        South-west and north-east corners of the path, used to fit the map view.
        """
        if not self.path:
            raise ValueError("Cannot compute bounds of an empty route")
        lats = [lat for lat, _ in self.path]
        lons = [lon for _, lon in self.path]
        return (min(lats), min(lons)), (max(lats), max(lons))
