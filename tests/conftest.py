import os
import pytest
from datetime import datetime, timedelta, timezone

# Set test environment variables before importing the app
os.environ['FLASK_ENV'] = 'testing'

from reservation_api import create_app
from reservation_api.repositories import ReservationRepository
from reservation_api.services import ReservationService, AnalyticsService


class FakeClock:
    """Deterministic clock; advances by `step` on every call"""

    def __init__(self, start=None, step=timedelta(milliseconds=1)):
        self.current = start or datetime(2026, 10, 19, 8, 0, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self):
        now = self.current
        self.current = self.current + self.step
        return now


@pytest.fixture
def repository():
    """A fresh in-memory reservation store."""
    return ReservationRepository()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def service(repository, clock):
    """Reservation service wired to the test store and clock."""
    return ReservationService(repository, clock=clock)


@pytest.fixture
def analytics_service(clock):
    return AnalyticsService(clock=clock)


@pytest.fixture
def app(repository):
    """Create application for the tests, sharing the test store."""
    return create_app('testing', reservation_repo=repository)


@pytest.fixture
def client(app):
    """A test client for the app."""
    return app.test_client()


@pytest.fixture
def make_payload():
    """Build a valid reservation request body, overriding any field."""
    def _make_payload(**overrides):
        payload = {
            'phone': '13800138000',
            'nickname': '小明',
            'gender': 'male',
            'age': '18-22',
            'plan': 'monthly',
        }
        payload.update(overrides)
        return payload
    return _make_payload


@pytest.fixture
def phone_for():
    """Distinct valid mobile number for each index."""
    return lambda index: f"139{index:08d}"
