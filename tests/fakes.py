from typing import Dict, List

from mapview.surface import MapSurface
from routing.osrm_client import OSRMError


class FakeResponse:
    def __init__(self, payload=None, status_code=200, bad_json=False):
        self.payload = payload
        self.status_code = status_code
        self.bad_json = bad_json

    def json(self):
        if self.bad_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


class FakeSession:
    """
    Stands in for requests.Session: replays queued responses (or raises
    queued exceptions) and records every GET.
    """
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class RecordingSurface(MapSurface):
    """
    In-memory map: tracks live layers so tests can count what is drawn.
    """
    def __init__(self):
        self.layers: Dict[int, tuple] = {}
        self.removed: List[int] = []
        self.view = None
        self.bounds = None
        self._next = 0

    def _add(self, kind, data, style):
        self._next += 1
        self.layers[self._next] = (kind, data, style)
        return self._next

    def add_marker(self, coordinate, style):
        return self._add("marker", coordinate, style)

    def add_route(self, path, style):
        return self._add("route", list(path), style)

    def remove(self, handle):
        self.removed.append(handle)
        self.layers.pop(handle, None)

    def set_view(self, center, zoom):
        self.view = (center, zoom)

    def fit_bounds(self, bounds):
        self.bounds = bounds

    def live(self, kind):
        return [layer for layer in self.layers.values() if layer[0] == kind]


class FakeGeocoder:
    """
    Mock of NominatimClient: address -> candidate list, optional per-address
    gates (threading.Event) to hold a lookup in flight.
    """
    def __init__(self, results=None, labels=None, gates=None):
        self.results = results or {}
        self.labels = labels or {}
        self.gates = gates or {}
        self.calls = []

    def search(self, address, limit=1):
        self.calls.append(address)
        gate = self.gates.get(address)
        if gate is not None:
            gate.wait(timeout=2)
        return self.results.get(address, [])

    def reverse(self, lat, lon):
        label = self.labels.get((lat, lon))
        return {"display_name": label} if label else {"error": "Unable to geocode"}


class FakeOSRM:
    """
    Mock of OSRMClient. distances and gates are keyed by destination so a
    test can give each delivery point its own distance, or hold its route
    in flight until the gate (threading.Event) is set.
    """
    def __init__(self, distance=10000.0, duration=900.0, fail=False, distances=None, gates=None):
        self.distance = distance
        self.duration = duration
        self.fail = fail
        self.distances = distances or {}
        self.gates = gates or {}
        self.calls = []

    def compute_route(self, coordinates, *, geometry=False):
        self.calls.append(list(coordinates))
        if self.fail:
            raise OSRMError("OSRM error: NoRoute")
        start, end = coordinates
        gate = self.gates.get(end)
        if gate is not None:
            gate.wait(timeout=2)
        middle = ((start[0] + end[0]) / 2, (start[1] + end[1]) / 2)
        return {
            "distance": self.distances.get(end, self.distance),
            "duration": self.duration,
            "geometry": [start, middle, end],
        }


def candidate(lat, lon, name="somewhere"):
    return [{"lat": str(lat), "lon": str(lon), "display_name": name}]


