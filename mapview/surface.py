"""
Purpose: The rendering surface the map controller draws on.
What it does:
Declares the handful of operations the delivery widget needs from a map
library. The underlying libraries happily stack overlapping layers, so the
surface only adds/removes; keeping one marker per identity is the
controller's job.
"""

from abc import ABC, abstractmethod
from typing import Hashable, Sequence

from routing.models import Bounds, LatLon
from .models import MarkerStyle, RouteStyle


class MapSurface(ABC):
    """
    Abstract Base Class for map backends (folium in production, fakes in tests).
    """

    @abstractmethod
    def add_marker(self, coordinate: LatLon, style: MarkerStyle) -> Hashable:
        """Adds a marker layer and returns its handle."""

    @abstractmethod
    def add_route(self, path: Sequence[LatLon], style: RouteStyle) -> Hashable:
        """Adds a polyline layer and returns its handle."""

    @abstractmethod
    def remove(self, handle: Hashable) -> None:
        """Removes a layer. Unknown handles are ignored."""

    @abstractmethod
    def set_view(self, center: LatLon, zoom: int) -> None:
        pass

    @abstractmethod
    def fit_bounds(self, bounds: Bounds) -> None:
        pass
