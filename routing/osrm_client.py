#Purpose: The OSRM "adapter/client".
#Sole responsibility: talk to OSRM via HTTP and return normalized outputs.
#Encapsulates OSRM-specific details:
#coordinate formatting (lon,lat) in, GeoJSON [lon, lat] geometry out
#URL construction (/route, /table)
#timeouts and error handling
#parsing response JSON into our internal (lat, lon) shape
#It should not contain pricing or widget rules.


from dotenv import load_dotenv
import os
from typing import List, Tuple, Dict, Any, Optional
import requests

# Read OSRM base URL from environment
# Example in .env:
# OSRM_BASE_URL=https://router.project-osrm.org
load_dotenv()
BASE_URL = os.getenv("OSRM_BASE_URL")
PROFILE = os.getenv("OSRM_PROFILE", "driving")

# Internal coordinate type: (lat, lon)
LatLon = Tuple[float, float]

class OSRMError(Exception):
    """Custom exception for OSRM client errors."""
    pass

class OSRMClient:
    """
    OSRM Adapter / Client

    Sole responsibility:
    - Talk to OSRM via HTTP
    - Convert internal (lat, lon) → OSRM (lon,lat)
    - Return normalized outputs

    """
    def __init__(self,
                 profile: Optional[str] = None,
                 timeout: float = 5,
                 base_url: Optional[str] = None,
                 session: Optional[requests.Session] = None):
        self.base_url = (base_url or BASE_URL or "").rstrip("/")
        self.timeout = timeout #the time to wait for a response from OSRM before giving up
        self.profile = profile or PROFILE #the mode of transportation (driving, walking, cycling)
        self.session = session

        if not self.base_url:
            raise ValueError("OSRM base URL not set. Please set OSRM_BASE_URL in the .env file.")

        #----------------
        # Internal helper methods for coordinate formatting, requests, error handling
        #----------------
    def format_coordinates(self, coords: List[LatLon]) -> str:

        """Convert list of (lat, lon) to OSRM format 'lon,lat;lon,lat;...'"""
        return ';'.join([f"{lon},{lat}" for lat, lon in coords])

    def _get(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        requester = self.session if self.session else requests
        try:
            response = requester.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise OSRMError(f"OSRM request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise OSRMError(f"OSRM returned a non-JSON response (HTTP {response.status_code})") from e

        #validating OSRM response
        if data.get("code") != "Ok":
            raise OSRMError(f"OSRM error: {data.get('message', data.get('code', 'Unknown error'))}")
        return data

        #----------------
        # Public methods for route, table
        #----------------
    def compute_route(self, coordinates: List[LatLon], *, geometry: bool = False
                          ) -> Dict[str, Any]:

        """
            calls the OSRM /route endpoint with the given coordinates and
            returns a dict with distance and duration (and the path when asked)

            Returns:
                {
                    "distance": float, # in meters
                    "duration": float, # in seconds
                    "geometry": List[(lat, lon)], # only with geometry=True
                }
        """
        if len(coordinates) < 2:
                raise ValueError("At least two coordinates are required to compute a route.")

        formatted = self.format_coordinates(coordinates)
        url = f"{self.base_url}/route/v1/{self.profile}/{formatted}"

        if geometry:
            params = {"overview": "full", "geometries": "geojson"}
        else:
            params = {"overview": "false"} # we don't need the geometry of the route

        data = self._get(url, params) #OSRM returns a JSON response with routes, each containing distance and duration

        routes = data.get("routes") or []
        if not routes:
            raise OSRMError("OSRM returned no routes between the given coordinates")

        route = routes[0] #take the first route (OSRM may return alternatives)

        #Normalize output to internal format
        try:
            result = {
                    "distance": float(route["distance"]),
                    "duration": float(route["duration"]),
                }
            if geometry:
                #GeoJSON LineString coordinates are [lon, lat]
                points = (route.get("geometry") or {}).get("coordinates") or []
                result["geometry"] = [(float(lat), float(lon)) for lon, lat in points]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise OSRMError(f"Malformed OSRM route: {e!r}") from e
        return result

        #----------------
        # table service (batch routing)
        #----------------
    def compute_table(self, sources: List[LatLon],
                          destinations: List[LatLon]
                          ) -> Dict[str, List[List[Optional[float]]]]:

            """
            calls OSRM /table endpoint.
            used for distance/duration grids (e.g. the rate card tooling)

            returns :
            {
                "durations": [[seconds, ...], ...], # one row per source
                "distances": [[meters, ...], ...],
            }
            """
            if not sources or not destinations:
                return {'durations': [], 'distances': []}

            # OSRM limits points. If sources == destinations (NxN matrix),
            # we should not duplicate them in the URL.
            is_symmetric = (sources == destinations)

            if is_symmetric:
                coordinates = self.format_coordinates(sources)
                params = {
                    "annotations": "duration,distance",
                }
            else:
                coordinates = self.format_coordinates(sources + destinations)
                destination_index = ";".join(
                    str(i) for i in range(len(sources), len(sources) + len(destinations))
                )
                source_index = ";".join(str(i) for i in range(len(sources)))
                params = {
                    "sources": source_index,
                    "destinations": destination_index,
                    "annotations": "duration,distance",
                }

            url =  f"{self.base_url}/table/v1/{self.profile}/{coordinates}"

            data = self._get(url, params)

            return {
                "durations": data.get("durations", []),
                "distances": data.get("distances", []),
            }
