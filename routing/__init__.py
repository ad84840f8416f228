#Marks routing as a package.
#Re-exports the public API (OSRMClient, compute_route, Route, display helpers)
#so other modules import from routing without knowing internal file names.
#No business logic.

from .osrm_client import OSRMClient, OSRMError
from .models import Route, LatLon, Bounds
from .route_service import compute_route
from .eta_service import format_distance, format_duration, ZERO_DISTANCE, ZERO_DURATION

__all__ = [
           "OSRMClient",
           "OSRMError",
             "Route",
             "LatLon",
             "Bounds",
             "compute_route",
             "format_distance",
             "format_duration",
             "ZERO_DISTANCE",
             "ZERO_DURATION",
             ]
