from .widget_state import (
    WidgetStateException,
    settled_status,
    begin_geocode,
    geocode_failed,
    marker_placed,
    begin_route,
    route_ready,
    route_failed,
    is_current,
    invalidate_all,
    require_submittable,
)

__all__ = [
    "WidgetStateException",
    "settled_status",
    "begin_geocode",
    "geocode_failed",
    "marker_placed",
    "begin_route",
    "route_ready",
    "route_failed",
    "is_current",
    "invalidate_all",
    "require_submittable",
]
