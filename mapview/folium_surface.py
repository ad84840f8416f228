"""
Purpose: folium-backed MapSurface.
What it does:
Keeps the live layers keyed by handle and builds a fresh folium.Map from
them on render(), so a removed layer can never linger in the output HTML.
"""

import itertools
import logging
from collections import OrderedDict
from typing import Any, Dict, Hashable, Optional, Sequence, Tuple

import folium

from routing.models import Bounds, LatLon
from .models import MarkerStyle, RouteStyle
from .surface import MapSurface

logger = logging.getLogger(__name__)

# Nigeria
DEFAULT_CENTER: LatLon = (9.0820, 8.6753)
DEFAULT_ZOOM = 6


class FoliumSurface(MapSurface):
    def __init__(self, center: LatLon = DEFAULT_CENTER, zoom: int = DEFAULT_ZOOM):
        self.center = center
        self.zoom = zoom
        self.bounds: Optional[Bounds] = None
        self._layers: "OrderedDict[str, Tuple[str, Dict[str, Any]]]" = OrderedDict()
        self._ids = itertools.count(1)

    def _next_handle(self, kind: str) -> str:
        return f"{kind}_{next(self._ids)}"

    @property
    def layer_handles(self):
        return list(self._layers.keys())

    def add_marker(self, coordinate: LatLon, style: MarkerStyle) -> Hashable:
        handle = self._next_handle("marker")
        self._layers[handle] = ("marker", {"location": coordinate, "style": style})
        return handle

    def add_route(self, path: Sequence[LatLon], style: RouteStyle) -> Hashable:
        handle = self._next_handle("route")
        self._layers[handle] = ("route", {"locations": list(path), "style": style})
        return handle

    def remove(self, handle: Hashable) -> None:
        if self._layers.pop(handle, None) is None:
            logger.debug(f"Ignoring removal of unknown layer {handle}")

    def set_view(self, center: LatLon, zoom: int) -> None:
        self.center = center
        self.zoom = zoom
        self.bounds = None

    def fit_bounds(self, bounds: Bounds) -> None:
        self.bounds = bounds

    def render(self) -> folium.Map:
        """
        Build the folium map for the current layers.
        """
        map_obj = folium.Map(location=list(self.center), zoom_start=self.zoom)

        for kind, spec in self._layers.values():
            if kind == "marker":
                style: MarkerStyle = spec["style"]
                folium.Marker(
                    location=list(spec["location"]),
                    popup=style.popup,
                    tooltip=style.popup,
                    icon=folium.Icon(color=style.color),
                ).add_to(map_obj)
            else:
                route_style: RouteStyle = spec["style"]
                folium.PolyLine(
                    locations=[list(point) for point in spec["locations"]],
                    color=route_style.color,
                    opacity=route_style.opacity,
                    weight=route_style.weight,
                ).add_to(map_obj)

        if self.bounds:
            south_west, north_east = self.bounds
            map_obj.fit_bounds([list(south_west), list(north_east)])

        return map_obj

    def save(self, path: str) -> None:
        self.render().save(path)
        logger.info(f"Map saved to {path}")
