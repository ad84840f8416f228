"""
Purpose: The delivery form fields the widget reads from and writes to.
What it does:
Holds the raw input values exactly as typed (strings, like DOM inputs) and
the read-only display fields the widget fills in (distance, duration, price).
"""

from dataclasses import dataclass, fields

from routing.eta_service import ZERO_DISTANCE, ZERO_DURATION

ZERO_PRICE = "₦0.00"


@dataclass
class DeliveryForm:
    # --- Inputs ---
    pickup_location: str = ""
    delivery_location: str = ""
    package_type: str = ""
    package_weight: str = ""
    delivery_date: str = ""
    delivery_time: str = ""
    special_instructions: str = ""

    # --- Read-only computed fields ---
    distance: str = ZERO_DISTANCE
    duration: str = ZERO_DURATION
    estimated_price: str = ZERO_PRICE

    def reset(self, keep_pickup: bool = False) -> None:
        pickup = self.pickup_location
        for f in fields(self):
            setattr(self, f.name, f.default)
        if keep_pickup:
            self.pickup_location = pickup
