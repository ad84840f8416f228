"""
Purpose: One-shot "where am I" lookup used to pre-fill the pickup point.
What it does:
- Geolocator: interface, locate() -> (lat, lon) or raises GeolocationDenied
- IpGeolocator: IP-based position via the geocoder library
- StaticGeolocator: fixed position (kiosks, tests, or no position at all)
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import geocoder

from .errors import GeolocationDenied

logger = logging.getLogger(__name__)

LatLon = Tuple[float, float]


class Geolocator(ABC):
    @abstractmethod
    def locate(self) -> LatLon:
        """Returns the current (lat, lon) or raises GeolocationDenied."""


class IpGeolocator(Geolocator):
    def __init__(self, target: str = "me"):
        self.target = target

    def locate(self) -> LatLon:
        result = geocoder.ip(self.target)
        if not result.ok or not result.latlng:
            logger.warning(f"IP geolocation failed for {self.target}: {result.status}")
            raise GeolocationDenied()
        lat, lng = result.latlng
        return float(lat), float(lng)


class StaticGeolocator(Geolocator):
    def __init__(self, coordinate: Optional[LatLon] = None):
        self.coordinate = coordinate

    def locate(self) -> LatLon:
        if self.coordinate is None:
            raise GeolocationDenied()
        return self.coordinate
