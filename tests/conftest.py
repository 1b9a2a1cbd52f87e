"""Shared fixtures for the zip fixture runner tests."""

import pytest

from zip_fixture_runner.runner import FixtureRunner
from zip_fixture_runner.services.http_client import HttpClient
from zip_fixture_runner.services.zippopotam_service import ZippopotamService

API_BASE = "http://api.zippopotam.us"


def location_body(country_code, zip_code, *place_names):
    """Build a body shaped like a Zippopotam lookup response."""
    return {
        "post code": zip_code.upper(),
        "country": {"us": "United States", "ca": "Canada"}.get(country_code, country_code),
        "country abbreviation": country_code.upper(),
        "places": [
            {
                "place name": name,
                "longitude": "-118.4065",
                "state": "California",
                "state abbreviation": "CA",
                "latitude": "34.0901",
            }
            for name in place_names
        ],
    }


@pytest.fixture
def service():
    """Fresh service per test, no state carried between tests."""
    return ZippopotamService(HttpClient())


@pytest.fixture
def runner(service):
    return FixtureRunner(service)
