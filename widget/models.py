"""
Purpose: Core data models for the delivery widget.
What it does:
- DeliveryWidgetState: everything the orchestrator mutates (status, map
  state, package spec, current estimate, request tokens)
- DeliveryRequest: the transient snapshot built when the form is submitted

Rule: No network calls, no transitions. Models only.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from mapview.models import MapState, MarkerIdentity
from quotes.calculator import zero_estimate
from quotes.models import PackageSpec, PriceEstimate

LatLon = Tuple[float, float]

# Request-token branches. A pending result is only applied while its
# token is still the latest one issued for its branch.
ROUTE_BRANCH = "route"


class WidgetStatus(str, Enum):
    IDLE = "IDLE"
    PICKUP_PENDING = "PICKUP_PENDING"
    PICKUP_SET = "PICKUP_SET"
    DELIVERY_PENDING = "DELIVERY_PENDING"
    DELIVERY_SET = "DELIVERY_SET"
    ROUTE_PENDING = "ROUTE_PENDING"
    ROUTE_READY = "ROUTE_READY"


@dataclass
class DeliveryWidgetState:
    status: WidgetStatus = WidgetStatus.IDLE
    map: MapState = field(default_factory=MapState)
    package: PackageSpec = field(default_factory=PackageSpec)
    estimate: PriceEstimate = field(default_factory=zero_estimate)
    tokens: Dict[str, int] = field(default_factory=lambda: {
        MarkerIdentity.PICKUP.value: 0,
        MarkerIdentity.DELIVERY.value: 0,
        ROUTE_BRANCH: 0,
    })


@dataclass(frozen=True)
class DeliveryRequest:
    """
    What the visitor scheduled. Built at submission, logged, never stored.
    """
    pickup_location: str
    delivery_location: str
    pickup_coordinates: LatLon
    delivery_coordinates: LatLon
    package_type: Optional[str]
    package_weight_kg: float
    delivery_date: str
    delivery_time: str
    special_instructions: str
    estimated_price: str
    distance: str
    duration: str
    submitted_at: datetime = field(default_factory=datetime.now)

    def as_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["submitted_at"] = self.submitted_at.isoformat()
        return data
