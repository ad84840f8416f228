"""
Purpose: Address <-> coordinate lookups used by the delivery widget.
What it does:
- forward_geocode: free-text address -> (lat, lon), first candidate wins
- reverse_geocode: (lat, lon) -> display label for pre-filling the pickup field

Both normalize every failure to an empty result (None / "") and log it.
Raising the user-visible "address not found" notice is the widget's job.
"""

import logging
from typing import Optional, Tuple

from .nominatim_client import GeocodingError, NominatimClient

logger = logging.getLogger(__name__)

LatLon = Tuple[float, float]


def forward_geocode(client: NominatimClient, address: str) -> Optional[LatLon]:
    if not address or not address.strip():
        return None

    try:
        results = client.search(address.strip())
    except GeocodingError as e:
        logger.error(f"Geocoding error for '{address}': {e}")
        return None

    if not results:
        logger.warning(f"No geocoding results for '{address}'")
        return None

    first = results[0]
    try:
        location = (float(first["lat"]), float(first["lon"]))
    except (KeyError, TypeError, ValueError):
        logger.error(f"Malformed geocoding result for '{address}': {first}")
        return None

    logger.info(f"Geocoding result for {address}: lat={location[0]}, lon={location[1]}")
    return location


def reverse_geocode(client: NominatimClient, coordinate: LatLon) -> str:
    lat, lon = coordinate
    try:
        data = client.reverse(lat, lon)
    except GeocodingError as e:
        logger.error(f"Reverse geocoding error for {coordinate}: {e}")
        return ""

    label = data.get("display_name")
    if not label:
        logger.warning(f"No address found for {coordinate}: {data.get('error', 'empty response')}")
        return ""
    return label
