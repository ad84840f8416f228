"""
Purpose: Central configuration for the delivery widget behaviour.
What it does:

Stores the tunables the orchestrator reads:

REQUEST_TIMEOUT_S = 10 (per geocode / route / geolocation call)
DEFAULT_CENTER = Nigeria (9.0820, 8.6753), zoom 6
PICKUP_ZOOM = 13
KEEP_PICKUP_ON_SUBMIT = False

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class WidgetPolicy:
    """
    Central configuration for the delivery quote widget.
    """

    # --- Network ---
    # Upper bound for any single awaited call (geocode, reverse geocode,
    # route, geolocation). A hung call fails the step instead of stalling.
    request_timeout_s: float = 10.0

    # --- Map view ---
    default_center: Tuple[float, float] = (9.0820, 8.6753)
    default_zoom: int = 6
    pickup_zoom: int = 13

    # --- Submission ---
    # Keep the pickup marker (and its label) after a successful submission,
    # so repeat senders only re-enter the delivery address.
    keep_pickup_on_submit: bool = False

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if self.request_timeout_s <= 0:
            raise ValueError("request_timeout_s must be > 0")

        lat, lon = self.default_center
        if not (-90 <= lat <= 90 and -180 <= lon <= 180):
            raise ValueError("default_center must be a valid (lat, lon)")

        if not (0 <= self.default_zoom <= 20 and 0 <= self.pickup_zoom <= 20):
            raise ValueError("zoom levels must be between 0 and 20")


def default_widget_policy() -> WidgetPolicy:
    """
    Convenience factory for the default policy.
    """
    p = WidgetPolicy()
    p.validate()
    return p
