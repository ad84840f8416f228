"""
Geocoding package (Nominatim).

Public API:
- NominatimClient, GeocodingError
- forward_geocode, reverse_geocode
"""
from .nominatim_client import NominatimClient, GeocodingError
from .service import forward_geocode, reverse_geocode

__all__ = ["NominatimClient",
           "GeocodingError",
             "forward_geocode",
               "reverse_geocode",
               ]
