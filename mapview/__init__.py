#Marks mapview as a package.
#Re-exports the map state models, the surface interface, the folium surface
#and the controller that keeps markers/routes from accumulating.

from .models import MarkerIdentity, LocationMarker, MapState, MarkerStyle, RouteStyle, MARKER_STYLES
from .surface import MapSurface
from .folium_surface import FoliumSurface, DEFAULT_CENTER, DEFAULT_ZOOM
from .controller import MapController, PICKUP_ZOOM

__all__ = [
    "MarkerIdentity",
    "LocationMarker",
    "MapState",
    "MarkerStyle",
    "RouteStyle",
    "MARKER_STYLES",
    "MapSurface",
    "FoliumSurface",
    "DEFAULT_CENTER",
    "DEFAULT_ZOOM",
    "MapController",
    "PICKUP_ZOOM",
]
