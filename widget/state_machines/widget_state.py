"""
Idle -> PickupPending -> PickupSet -> DeliveryPending -> DeliverySet
     -> RoutePending -> RouteReady

Every address edit restarts its own branch (*Pending). A failed step falls
back to the settled status derived from what is actually on the map.
"""

from mapview.models import MarkerIdentity
from ..errors import ValidationError
from ..models import DeliveryWidgetState, ROUTE_BRANCH, WidgetStatus

_PENDING = {
    MarkerIdentity.PICKUP: WidgetStatus.PICKUP_PENDING,
    MarkerIdentity.DELIVERY: WidgetStatus.DELIVERY_PENDING,
}


class WidgetStateException(Exception):
    """Raised when an invalid state transition is attempted."""
    pass


def settled_status(state: DeliveryWidgetState) -> WidgetStatus:
    """
    The status implied by the current markers and route, ignoring anything in flight.
    """
    markers = state.map.markers
    if state.map.route is not None and state.map.has_both_markers():
        return WidgetStatus.ROUTE_READY
    if MarkerIdentity.DELIVERY in markers:
        return WidgetStatus.DELIVERY_SET
    if MarkerIdentity.PICKUP in markers:
        return WidgetStatus.PICKUP_SET
    return WidgetStatus.IDLE


def _next_token(state: DeliveryWidgetState, branch: str) -> int:
    state.tokens[branch] = state.tokens.get(branch, 0) + 1
    return state.tokens[branch]


def is_current(state: DeliveryWidgetState, branch: str, token: int) -> bool:
    return state.tokens.get(branch) == token


def begin_geocode(state: DeliveryWidgetState, identity: MarkerIdentity) -> int:
    """
    Called when an address field changes (or geolocation starts for pickup).
    Supersedes any lookup still in flight for the same field.
    """
    token = _next_token(state, identity.value)
    state.status = _PENDING[identity]
    return token


def geocode_failed(state: DeliveryWidgetState, identity: MarkerIdentity) -> DeliveryWidgetState:
    state.status = settled_status(state)
    return state


def marker_placed(state: DeliveryWidgetState, identity: MarkerIdentity) -> DeliveryWidgetState:
    """
    A moved marker makes any route still being computed stale.
    """
    if state.map.marker(identity) is None:
        raise WidgetStateException(f"No {identity.value} marker on the map")
    _next_token(state, ROUTE_BRANCH)
    state.status = settled_status(state)
    return state


def begin_route(state: DeliveryWidgetState) -> int:
    if not state.map.has_both_markers():
        raise WidgetStateException(f"Cannot compute a route from {state.status.value}: both markers are required")
    token = _next_token(state, ROUTE_BRANCH)
    state.status = WidgetStatus.ROUTE_PENDING
    return token


def route_ready(state: DeliveryWidgetState) -> DeliveryWidgetState:
    if state.map.route is None:
        raise WidgetStateException("route_ready called without a route on the map")
    state.status = WidgetStatus.ROUTE_READY
    return state


def route_failed(state: DeliveryWidgetState) -> DeliveryWidgetState:
    state.status = settled_status(state)
    return state


def invalidate_all(state: DeliveryWidgetState) -> DeliveryWidgetState:
    """
    Drop every in-flight result (used after submission resets the form).
    """
    for branch in list(state.tokens):
        _next_token(state, branch)
    state.status = settled_status(state)
    return state


def require_submittable(state: DeliveryWidgetState) -> None:
    if not state.map.has_both_markers():
        raise ValidationError()
