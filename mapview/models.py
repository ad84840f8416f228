"""
Purpose: Core data models for the map view.
What it does:
Defines the marker identities and the map portion of the widget state
(at most one marker per identity, at most one route).

Rule: No rendering here. Models only.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Hashable, Optional, Tuple

from routing.models import LatLon, Route


class MarkerIdentity(str, Enum):
    PICKUP = "pickup"
    DELIVERY = "delivery"


@dataclass(frozen=True)
class MarkerStyle:
    color: str
    popup: str


@dataclass(frozen=True)
class RouteStyle:
    color: str = "#e60000"
    opacity: float = 0.7
    weight: int = 5


MARKER_STYLES: Dict[MarkerIdentity, MarkerStyle] = {
    MarkerIdentity.PICKUP: MarkerStyle(color="green", popup="Pickup Location"),
    MarkerIdentity.DELIVERY: MarkerStyle(color="red", popup="Delivery Location"),
}


@dataclass(frozen=True)
class LocationMarker:
    identity: MarkerIdentity
    coordinate: LatLon
    handle: Hashable


@dataclass
class MapState:
    """
    Map portion of the widget state. MapController is the only writer.
    """
    markers: Dict[MarkerIdentity, LocationMarker] = field(default_factory=dict)
    route: Optional[Route] = None
    route_handle: Optional[Hashable] = None

    def marker(self, identity: MarkerIdentity) -> Optional[LocationMarker]:
        return self.markers.get(identity)

    def coordinate(self, identity: MarkerIdentity) -> Optional[LatLon]:
        marker = self.markers.get(identity)
        return marker.coordinate if marker else None

    def has_both_markers(self) -> bool:
        return MarkerIdentity.PICKUP in self.markers and MarkerIdentity.DELIVERY in self.markers

    def endpoints(self) -> Optional[Tuple[LatLon, LatLon]]:
        if not self.has_both_markers():
            return None
        return (self.markers[MarkerIdentity.PICKUP].coordinate,
                self.markers[MarkerIdentity.DELIVERY].coordinate)
