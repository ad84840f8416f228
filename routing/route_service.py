#Purpose: Route computation for downstream use.
#Returns the "actual route" information needed by:
#map display / polyline geometry
#distance + duration for the price estimate
#Uses OSRM /route (not /table).
#Failures are normalized to None and logged; callers decide what the user sees.

import logging
from typing import Optional

from .models import LatLon, Route
from .osrm_client import OSRMClient, OSRMError

logger = logging.getLogger(__name__)


def compute_route(osrm: OSRMClient, pickup: LatLon, delivery: LatLon) -> Optional[Route]:
    """
    Request a driving route between pickup and delivery.

    Returns:
        Route with geometry, distance (m) and duration (s), or None when OSRM
        errors or finds no route.
    """
    try:
        result = osrm.compute_route([pickup, delivery], geometry=True)
    except OSRMError as e:
        logger.warning(f"Route unavailable between {pickup} and {delivery}: {e}")
        return None

    path = tuple(result.get("geometry") or (pickup, delivery))
    route = Route(path=path, distance_m=result["distance"], duration_s=result["duration"])
    logger.info(f"Route found: {route.distance_km} km, {route.duration_min} min")
    return route
