"""Shared pytest fixtures for all test suites."""

from collections.abc import Generator
from datetime import date

import pytest

from itinerary.config import Settings, get_settings
from itinerary.models import Destination, Trip


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Drop cached settings so env changes in a test never leak into the next."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Default policy settings."""
    return Settings()


@pytest.fixture
def paris() -> Destination:
    return Destination(id="dest_paris", name="Paris", country="France")


@pytest.fixture
def rome() -> Destination:
    return Destination(id="dest_rome", name="Rome", country="Italy")


@pytest.fixture
def june_trip() -> Trip:
    """Jun 1-15 trip without visits."""
    return Trip(id="trip_1", start=date(2025, 6, 1), end=date(2025, 6, 15), traveler_count=2)
