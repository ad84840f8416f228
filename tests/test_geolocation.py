from unittest.mock import MagicMock, patch

import pytest

from widget import GeolocationDenied, IpGeolocator, StaticGeolocator


def test_ip_geolocator_returns_lat_lon():
    with patch("widget.geolocation.geocoder.ip") as mock_ip:
        mock_ip.return_value = MagicMock(ok=True, latlng=[6.4541, 3.3947], status="OK")

        assert IpGeolocator().locate() == (6.4541, 3.3947)
        mock_ip.assert_called_once_with("me")


def test_ip_geolocator_failure_is_denied():
    with patch("widget.geolocation.geocoder.ip") as mock_ip:
        mock_ip.return_value = MagicMock(ok=False, latlng=[], status="ERROR - No results found")

        with pytest.raises(GeolocationDenied):
            IpGeolocator().locate()


def test_static_geolocator():
    assert StaticGeolocator((9.0765, 7.3986)).locate() == (9.0765, 7.3986)

    with pytest.raises(GeolocationDenied):
        StaticGeolocator().locate()
