import pytest

from tests.fakes import FakeGeocoder, RecordingSurface, candidate


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def notices():
    return []


@pytest.fixture
def geocoder():
    return FakeGeocoder(
        results={
            "Yaba, Lagos": candidate(6.5095, 3.3711, "Yaba, Lagos Mainland"),
            "Ikeja, Lagos": candidate(6.6018, 3.3515, "Ikeja, Lagos State"),
            "Lekki, Lagos": candidate(6.4698, 3.5852, "Lekki, Eti-Osa"),
        },
        labels={(6.5244, 3.3792): "Lagos Island, Lagos"},
    )
