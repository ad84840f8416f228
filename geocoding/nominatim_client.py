#Purpose: The Nominatim "adapter/client".
#Sole responsibility: talk to Nominatim (OpenStreetMap geocoding) via HTTP
#and return the decoded JSON.
#Encapsulates Nominatim-specific details:
#/search (free text -> candidates) and /reverse (lat/lon -> place)
#the User-Agent header Nominatim's usage policy requires
#timeouts and error handling
#It should not decide what the user sees when a lookup fails.

from dotenv import load_dotenv
import os
from typing import Any, Dict, List, Optional
import requests

# Example in .env:
# NOMINATIM_URL=https://nominatim.openstreetmap.org
# NOMINATIM_USER_AGENT=DeliveryQuoteWidget/1.0 (ops@example.com)
load_dotenv()
BASE_URL = os.getenv("NOMINATIM_URL", "https://nominatim.openstreetmap.org")
USER_AGENT = os.getenv("NOMINATIM_USER_AGENT", "DeliveryQuoteWidget/1.0")


class GeocodingError(Exception):
    """Custom exception for Nominatim client errors."""
    pass


class NominatimClient:
    """
    Nominatim Adapter / Client

    - search(address) -> list of candidates (each has "lat", "lon", "display_name")
    - reverse(lat, lon) -> single place dict (has "display_name" when found)
    """
    def __init__(self,
                 base_url: Optional[str] = None,
                 timeout: float = 5,
                 user_agent: Optional[str] = None,
                 session: Optional[requests.Session] = None):
        self.base_url = (base_url or BASE_URL).rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent or USER_AGENT
        self.session = session

    def _get(self, path: str, params: Dict[str, Any]) -> Any:
        requester = self.session if self.session else requests
        url = f"{self.base_url}/{path}"
        try:
            response = requester.get(
                url,
                params={"format": "json", **params},
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise GeocodingError(f"Nominatim request failed: {e}") from e

        if response.status_code != 200:
            raise GeocodingError(f"Nominatim returned HTTP {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise GeocodingError("Nominatim returned a non-JSON response") from e

    def search(self, address: str, limit: int = 1) -> List[Dict[str, Any]]:
        """
        Free-text search. Returns the raw candidate list (possibly empty).
        """
        data = self._get("search", {"q": address, "limit": limit})
        if not isinstance(data, list):
            raise GeocodingError("Unexpected Nominatim search response")
        return data

    def reverse(self, lat: float, lon: float) -> Dict[str, Any]:
        """
        Reverse lookup. Nominatim answers {"error": "..."} when nothing is found.
        """
        data = self._get("reverse", {"lat": lat, "lon": lon})
        if not isinstance(data, dict):
            raise GeocodingError("Unexpected Nominatim reverse response")
        return data
