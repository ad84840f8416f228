"""
Purpose: User-facing failure taxonomy for the delivery widget.
What it does:
Each error carries the message shown to the visitor. The widget raises
ValidationError to the caller; the others are turned into notices and the
pipeline simply stops at the failed step.
"""

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

# notifier(level, message), level is "error" or "info"
Notifier = Callable[[str, str], None]


class WidgetError(Exception):
    """Base class for failures the visitor is told about."""
    default_message = "Something went wrong. Please try again."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)

    @property
    def user_message(self) -> str:
        return str(self)


class AddressNotFound(WidgetError):
    default_message = "Address not found. Please try a different address."

    def __init__(self, address: str = "", message: Optional[str] = None):
        self.address = address
        super().__init__(message)


class RouteUnavailable(WidgetError):
    default_message = "No route could be found between the pickup and delivery locations."


class ValidationError(WidgetError):
    default_message = "Please select both pickup and delivery locations"


class GeolocationDenied(WidgetError):
    default_message = "The Geolocation service failed."


def log_notifier(level: str, message: str) -> None:
    """
    Default notifier when no UI is attached: notices go to the log.
    """
    if level == "error":
        logger.warning(f"[notice] {message}")
    else:
        logger.info(f"[notice] {message}")
