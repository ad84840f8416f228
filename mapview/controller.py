"""
Purpose: Marker and route bookkeeping on top of a MapSurface.
What it does:
- set_marker: replace-not-accumulate, one live marker per identity
- set_route: one live route, viewport fitted to the path
- clear_all: wipe markers (optionally keeping some identities) and the route

Rule: the controller owns every add/remove on the surface; callers only
read MapState.
"""

import logging
from typing import Iterable, Optional

from routing.models import LatLon, Route
from .models import LocationMarker, MapState, MarkerIdentity, MARKER_STYLES, RouteStyle
from .surface import MapSurface

logger = logging.getLogger(__name__)

PICKUP_ZOOM = 13


class MapController:
    def __init__(self, surface: MapSurface, route_style: Optional[RouteStyle] = None,
                 pickup_zoom: int = PICKUP_ZOOM):
        self.surface = surface
        self.route_style = route_style or RouteStyle()
        self.pickup_zoom = pickup_zoom

    def set_marker(self, state: MapState, identity: MarkerIdentity, coordinate: LatLon,
                   recenter: bool = False) -> LocationMarker:
        previous = state.markers.pop(identity, None)
        if previous is not None:
            self.surface.remove(previous.handle)

        handle = self.surface.add_marker(coordinate, MARKER_STYLES[identity])
        marker = LocationMarker(identity=identity, coordinate=coordinate, handle=handle)
        state.markers[identity] = marker

        if recenter:
            self.surface.set_view(coordinate, self.pickup_zoom)

        logger.info(f"{identity.value} marker set at {coordinate}")
        return marker

    def remove_marker(self, state: MapState, identity: MarkerIdentity) -> None:
        marker = state.markers.pop(identity, None)
        if marker is not None:
            self.surface.remove(marker.handle)

    def set_route(self, state: MapState, route: Route) -> None:
        self.clear_route(state)
        state.route_handle = self.surface.add_route(route.path, self.route_style)
        state.route = route
        if route.path:
            self.surface.fit_bounds(route.bounds())

    def clear_route(self, state: MapState) -> None:
        if state.route_handle is not None:
            self.surface.remove(state.route_handle)
        state.route_handle = None
        state.route = None

    def clear_all(self, state: MapState, keep: Iterable[MarkerIdentity] = ()) -> None:
        keep = set(keep)
        for identity in list(state.markers):
            if identity not in keep:
                self.remove_marker(state, identity)
        self.clear_route(state)
