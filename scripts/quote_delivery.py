"""
End-to-end delivery quote: geocode pickup and delivery addresses, route
between them with OSRM, price the parcel and save the map as HTML.

Usage:
    python scripts/quote_delivery.py "Pickup address" "Delivery address" [package_type] [weight_kg]
"""

import asyncio
import logging
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from geocoding import NominatimClient
from mapview import FoliumSurface
from routing import OSRMClient
from widget import DeliveryWidget, ValidationError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEFAULT_PICKUP = "Tafawa Balewa Square, Lagos"
DEFAULT_DELIVERY = "Lekki Conservation Centre, Lagos"


def print_notice(level: str, message: str) -> None:
    print(f"[{level.upper()}] {message}")


async def run_quote(pickup: str, delivery: str, package_type: str, weight: str) -> None:
    surface = FoliumSurface()
    widget = DeliveryWidget(
        geocoder=NominatimClient(),
        osrm=OSRMClient(),
        surface=surface,
        notifier=print_notice,
    )

    widget.on_package_change(package_type, weight)
    await widget.on_pickup_change(pickup)
    await widget.on_delivery_change(delivery)

    print("\n=== DELIVERY QUOTE ===")
    print(f"Pickup:   {widget.form.pickup_location}")
    print(f"Delivery: {widget.form.delivery_location}")
    print(f"Distance: {widget.form.distance}")
    print(f"Duration: {widget.form.duration}")
    print(f"Price:    {widget.form.estimated_price}")

    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    output_path = os.path.join(base_dir, "delivery_map.html")
    surface.save(output_path)

    try:
        request = widget.submit()
    except ValidationError:
        return
    print(f"Scheduled: {request.as_dict()}")


if __name__ == "__main__":
    args = sys.argv[1:]
    pickup = args[0] if len(args) > 0 else DEFAULT_PICKUP
    delivery = args[1] if len(args) > 1 else DEFAULT_DELIVERY
    package_type = args[2] if len(args) > 2 else "small"
    weight = args[3] if len(args) > 3 else "1"
    asyncio.run(run_quote(pickup, delivery, package_type, weight))
