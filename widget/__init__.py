#Expose the delivery widget pieces:
#Orchestrator (the "one object" a page or script drives)
#Form, policy, geolocation providers
#User-facing error taxonomy

from .orchestrator import DeliveryWidget, SUCCESS_MESSAGE
from .form import DeliveryForm, ZERO_PRICE
from .models import DeliveryRequest, DeliveryWidgetState, WidgetStatus
from .policy import WidgetPolicy, default_widget_policy
from .geolocation import Geolocator, IpGeolocator, StaticGeolocator
from .errors import (
    WidgetError,
    AddressNotFound,
    RouteUnavailable,
    ValidationError,
    GeolocationDenied,
    log_notifier,
)

__all__ = [
    "DeliveryWidget",
    "SUCCESS_MESSAGE",
    "DeliveryForm",
    "ZERO_PRICE",
    "DeliveryRequest",
    "DeliveryWidgetState",
    "WidgetStatus",
    "WidgetPolicy",
    "default_widget_policy",
    "Geolocator",
    "IpGeolocator",
    "StaticGeolocator",
    "WidgetError",
    "AddressNotFound",
    "RouteUnavailable",
    "ValidationError",
    "GeolocationDenied",
    "log_notifier",
]
