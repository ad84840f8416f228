#Purpose: Customer-facing distance / ETA text.
#Converts routing outputs into the strings shown next to the quote:
#"12.35 km", "18 min"
#and the zero values shown before any route exists.

from typing import Optional

from .models import Route

ZERO_DISTANCE = "0 km"
ZERO_DURATION = "0 min"


def format_distance(route: Optional[Route]) -> str:
    if route is None:
        return ZERO_DISTANCE
    return f"{route.distance_km:.2f} km"


def format_duration(route: Optional[Route]) -> str:
    if route is None:
        return ZERO_DURATION
    return f"{route.duration_min} min"
