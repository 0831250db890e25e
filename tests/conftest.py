"""Pytest configuration and fixtures."""
from datetime import datetime
import pytest
import pytz
from activitystats.models import Activity, Registration, RegistrationStatus


def make_registration(status, state=None, points=None, with_activity=True, **activity_fields):
    """Builds a registration whose activity carries the given state and points"""
    activity = None
    if with_activity:
        activity = Activity(state=state, points=points, **activity_fields)
    return Registration(status=status, activity=activity)


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 10, 15, 12, 0, tzinfo=pytz.utc)


@pytest.fixture
def mixed_registrations() -> list[Registration]:
    return [
        Registration(status=RegistrationStatus.REGISTERED, activity=Activity(state=None), id='r1'),
        Registration(status=RegistrationStatus.ATTENDED, activity=Activity(points=20), id='r2'),
        Registration(status=RegistrationStatus.ABSENT, activity=Activity(points=5), id='r3'),
        Registration(status='DA_HUY', activity=Activity(points=7), id='r4'),
    ]
