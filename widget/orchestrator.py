"""
Purpose: Orchestrator for the delivery quote widget (the "glue").
What it does:
Wires form events to the adapters and sequences

    geocode -> place marker -> compute route -> compute price

Each step is awaited; a failed step stops the pipeline and leaves whatever
the last successful step set. Blocking adapters run in worker threads,
every call is bounded by the policy timeout, and results belonging to a
superseded request (the visitor edited the field again meanwhile) are
dropped instead of overwriting fresher state.
"""

import asyncio
import inspect
import logging
from typing import Any, Callable, Optional

from geocoding.nominatim_client import NominatimClient
from geocoding.service import forward_geocode, reverse_geocode
from mapview.controller import MapController
from mapview.models import MarkerIdentity
from mapview.surface import MapSurface
from quotes.calculator import build_package_spec, estimate_price
from quotes.models import PriceEstimate
from quotes.policy import PricingPolicy, default_pricing_policy
from routing.eta_service import format_distance, format_duration
from routing.models import LatLon, Route
from routing.osrm_client import OSRMClient
from routing.route_service import compute_route

from .errors import (
    AddressNotFound,
    GeolocationDenied,
    Notifier,
    RouteUnavailable,
    ValidationError,
    WidgetError,
    log_notifier,
)
from .form import DeliveryForm
from .geolocation import Geolocator
from .models import DeliveryRequest, DeliveryWidgetState, ROUTE_BRANCH
from .policy import WidgetPolicy, default_widget_policy
from .state_machines import (
    begin_geocode,
    begin_route,
    geocode_failed,
    invalidate_all,
    is_current,
    marker_placed,
    require_submittable,
    route_failed,
    route_ready,
)

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Your delivery has been scheduled successfully!"


class DeliveryWidget:
    """
    Owns the widget state and coordinates geocoder, router, map and pricing.
    """
    def __init__(
        self,
        geocoder: NominatimClient,
        osrm: OSRMClient,
        surface: MapSurface,
        *,
        form: Optional[DeliveryForm] = None,
        notifier: Optional[Notifier] = None,
        policy: Optional[WidgetPolicy] = None,
        pricing_policy: Optional[PricingPolicy] = None,
    ):
        self.geocoder = geocoder
        self.osrm = osrm
        self.surface = surface
        self.form = form or DeliveryForm()
        self.notifier = notifier or log_notifier
        self.policy = policy or default_widget_policy()
        self.pricing_policy = pricing_policy or default_pricing_policy()

        self.state = DeliveryWidgetState()
        self.map = MapController(surface, pickup_zoom=self.policy.pickup_zoom)
        self.surface.set_view(self.policy.default_center, self.policy.default_zoom)
        self.on_package_change()

    #----------------
    # Internal helpers
    #----------------
    async def _call(self, fn: Callable[..., Any], *args: Any) -> Any:
        if inspect.iscoroutinefunction(fn):
            pending = fn(*args)
        else:
            pending = asyncio.to_thread(fn, *args)
        return await asyncio.wait_for(pending, timeout=self.policy.request_timeout_s)

    def _notify(self, error: WidgetError) -> None:
        self.notifier("error", error.user_message)

    def _update_derived(self) -> PriceEstimate:
        route = self.state.map.route
        distance_km = route.distance_km if route is not None else None
        self.state.estimate = estimate_price(distance_km, self.state.package, self.pricing_policy)
        self.form.distance = format_distance(route)
        self.form.duration = format_duration(route)
        self.form.estimated_price = self.state.estimate.display()
        return self.state.estimate

    #----------------
    # Form events
    #----------------
    async def on_pickup_change(self, text: Optional[str] = None) -> bool:
        if text is not None:
            self.form.pickup_location = text
        return await self._locate_address(MarkerIdentity.PICKUP, self.form.pickup_location)

    async def on_delivery_change(self, text: Optional[str] = None) -> bool:
        if text is not None:
            self.form.delivery_location = text
        return await self._locate_address(MarkerIdentity.DELIVERY, self.form.delivery_location)

    async def _locate_address(self, identity: MarkerIdentity, text: str) -> bool:
        if not text or not text.strip():
            return False

        token = begin_geocode(self.state, identity)
        try:
            location = await self._call(forward_geocode, self.geocoder, text)
        except asyncio.TimeoutError:
            logger.warning(f"Geocoding '{text}' timed out after {self.policy.request_timeout_s}s")
            location = None

        if not is_current(self.state, identity.value, token):
            logger.info(f"Discarding superseded {identity.value} lookup for '{text}'")
            return False

        if location is None:
            geocode_failed(self.state, identity)
            self._notify(AddressNotFound(text))
            return False

        self._place_marker(identity, location)
        await self.refresh_route()
        return True

    def _place_marker(self, identity: MarkerIdentity, location: LatLon) -> None:
        self.map.set_marker(self.state.map, identity, location,
                            recenter=identity is MarkerIdentity.PICKUP)
        marker_placed(self.state, identity)

    def on_package_change(self, package_type: Optional[str] = None,
                          weight: Optional[Any] = None) -> PriceEstimate:
        if package_type is not None:
            self.form.package_type = package_type
        if weight is not None:
            self.form.package_weight = str(weight)
        self.state.package = build_package_spec(self.form.package_type, self.form.package_weight)
        return self._update_derived()

    async def locate_pickup(self, geolocator: Geolocator) -> bool:
        """
        Use the visitor's position as the pickup point and pre-fill its label.
        """
        token = begin_geocode(self.state, MarkerIdentity.PICKUP)
        try:
            location = await self._call(geolocator.locate)
        except (GeolocationDenied, asyncio.TimeoutError) as e:
            logger.info(f"Geolocation unavailable ({type(e).__name__}), keeping default view")
            if not is_current(self.state, MarkerIdentity.PICKUP.value, token):
                return False
            geocode_failed(self.state, MarkerIdentity.PICKUP)
            return False

        if not is_current(self.state, MarkerIdentity.PICKUP.value, token):
            return False

        self._place_marker(MarkerIdentity.PICKUP, location)

        try:
            label = await self._call(reverse_geocode, self.geocoder, location)
        except asyncio.TimeoutError:
            logger.warning(f"Reverse geocoding {location} timed out")
            label = ""
        if label and is_current(self.state, MarkerIdentity.PICKUP.value, token):
            self.form.pickup_location = label

        await self.refresh_route()
        return True

    async def refresh_route(self) -> Optional[Route]:
        """
        Route between the current markers, then price it. No-op until both exist.
        """
        endpoints = self.state.map.endpoints()
        if endpoints is None:
            return None

        token = begin_route(self.state)
        self.map.clear_route(self.state.map)
        self._update_derived()

        try:
            route = await self._call(compute_route, self.osrm, *endpoints)
        except asyncio.TimeoutError:
            logger.warning(f"Routing timed out after {self.policy.request_timeout_s}s")
            route = None

        if not is_current(self.state, ROUTE_BRANCH, token):
            logger.info("Discarding superseded route result")
            return None

        if route is None:
            route_failed(self.state)
            self._update_derived()
            self._notify(RouteUnavailable())
            return None

        self.map.set_route(self.state.map, route)
        route_ready(self.state)
        self._update_derived()
        return route

    #----------------
    # Submission
    #----------------
    def submit(self) -> DeliveryRequest:
        """
        Snapshot the form, then reset map, form and derived fields.
        Raises ValidationError (after telling the visitor) unless both
        locations are set; nothing is cleared in that case.
        """
        try:
            require_submittable(self.state)
        except ValidationError as e:
            self._notify(e)
            raise

        pickup, delivery = self.state.map.endpoints()
        request = DeliveryRequest(
            pickup_location=self.form.pickup_location,
            delivery_location=self.form.delivery_location,
            pickup_coordinates=pickup,
            delivery_coordinates=delivery,
            package_type=self.state.package.package_type.value if self.state.package.package_type else None,
            package_weight_kg=self.state.package.weight_kg,
            delivery_date=self.form.delivery_date,
            delivery_time=self.form.delivery_time,
            special_instructions=self.form.special_instructions,
            estimated_price=self.form.estimated_price,
            distance=self.form.distance,
            duration=self.form.duration,
        )
        logger.info(f"Delivery scheduled: {request.as_dict()}")
        self.notifier("info", SUCCESS_MESSAGE)

        keep_pickup = self.policy.keep_pickup_on_submit
        keep = (MarkerIdentity.PICKUP,) if keep_pickup else ()
        self.map.clear_all(self.state.map, keep=keep)
        invalidate_all(self.state)
        self.form.reset(keep_pickup=keep_pickup)
        self.on_package_change()
        return request
