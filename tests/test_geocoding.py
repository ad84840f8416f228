import pytest
import requests

from geocoding import GeocodingError, NominatimClient, forward_geocode, reverse_geocode
from tests.fakes import FakeResponse, FakeSession


def make_client(*responses):
    session = FakeSession(*responses)
    client = NominatimClient(base_url="https://nominatim.test/", timeout=3,
                             user_agent="quote-tests/1.0", session=session)
    return client, session


def test_search_sends_query_user_agent_and_timeout():
    client, session = make_client(FakeResponse([{"lat": "6.5", "lon": "3.3"}]))

    results = client.search("Yaba, Lagos")

    assert results == [{"lat": "6.5", "lon": "3.3"}]
    call = session.calls[0]
    assert call["url"] == "https://nominatim.test/search"
    assert call["params"] == {"format": "json", "q": "Yaba, Lagos", "limit": 1}
    assert call["headers"] == {"User-Agent": "quote-tests/1.0"}
    assert call["timeout"] == 3


def test_forward_geocode_takes_first_candidate():
    client, _ = make_client(FakeResponse([
        {"lat": "6.5095", "lon": "3.3711"},
        {"lat": "0", "lon": "0"},
    ]))

    assert forward_geocode(client, "Yaba") == (6.5095, 3.3711)


def test_forward_geocode_empty_results_is_none():
    client, _ = make_client(FakeResponse([]))

    assert forward_geocode(client, "Atlantis") is None


@pytest.mark.parametrize("response", [
    requests.ConnectionError("connection refused"),
    FakeResponse(status_code=503),
    FakeResponse(bad_json=True),
    FakeResponse({"error": "not a list"}),
    FakeResponse([{"display_name": "no coordinates"}]),
])
def test_forward_geocode_failures_are_none(response):
    client, _ = make_client(response)

    assert forward_geocode(client, "Yaba") is None


def test_forward_geocode_blank_address_makes_no_request():
    client, session = make_client()

    assert forward_geocode(client, "   ") is None
    assert session.calls == []


def test_client_raises_geocoding_error_on_transport_failure():
    client, _ = make_client(requests.Timeout("read timed out"))

    with pytest.raises(GeocodingError):
        client.search("Yaba")


def test_reverse_geocode_returns_display_name():
    client, session = make_client(FakeResponse({"display_name": "Lagos Island, Lagos"}))

    assert reverse_geocode(client, (6.5244, 3.3792)) == "Lagos Island, Lagos"
    assert session.calls[0]["params"] == {"format": "json", "lat": 6.5244, "lon": 3.3792}


@pytest.mark.parametrize("response", [
    FakeResponse({"error": "Unable to geocode"}),
    FakeResponse(status_code=500),
    requests.ConnectionError("offline"),
])
def test_reverse_geocode_failures_are_empty_string(response):
    client, _ = make_client(response)

    assert reverse_geocode(client, (0.0, 0.0)) == ""
