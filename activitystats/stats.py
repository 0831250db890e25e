"""Aggregates a user's registrations into the statistics shown on their activity overview"""
from logging import getLogger
from typing import Iterable
from activitystats.models import ActivityState, ActivityStats, Registration, RegistrationStatus

# Activities in one of these states are mid check-in/out, registrations for them are not pending
ACTIVE_WINDOW_STATES = frozenset({
    ActivityState.CHECK_IN,
    ActivityState.CHECK_OUT,
    ActivityState.ATTENDANCE_OPEN,
})

CLASSIFIED_STATUSES = frozenset({
    RegistrationStatus.REGISTERED,
    RegistrationStatus.ATTENDED,
    RegistrationStatus.CANCELED,
    RegistrationStatus.ABSENT,
})


def is_pending(registration: Registration) -> bool:
    """Whether a registration is registered for an activity outside its active window"""
    if registration.status != RegistrationStatus.REGISTERED:
        return False
    state = registration.activity.state if registration.activity is not None else None
    return state not in ACTIVE_WINDOW_STATES


def points_of(registration: Registration) -> int | float:
    """Returns the reward points of the registered activity, 0 when unknown"""
    if registration.activity is None or registration.activity.points is None:
        return 0
    return registration.activity.points


def compute_activity_stats(registrations: Iterable[Registration]) -> ActivityStats:
    """Classifies registrations by status and derives summary metrics

    Args:
        registrations (Iterable[Registration]): The user's registrations, left untouched

    Returns:
        ActivityStats: The derived summary, buckets keep the input order
    """
    registrations = list(registrations)

    registered = tuple(item for item in registrations if is_pending(item))
    attended = tuple(item for item in registrations
                     if item.status == RegistrationStatus.ATTENDED)
    canceled = tuple(item for item in registrations
                     if item.status == RegistrationStatus.CANCELED)
    absent = tuple(item for item in registrations
                   if item.status == RegistrationStatus.ABSENT)

    unclassified = [item.status for item in registrations
                    if item.status not in CLASSIFIED_STATUSES]
    if unclassified:
        getLogger(__name__).debug(
            'Left %i registrations unclassified: %s', len(unclassified), unclassified)

    return ActivityStats(
        registered=registered,
        attended=attended,
        canceled=canceled,
        absent=absent,
        total_points=sum((points_of(item) for item in attended), 0),
        total_activities=len(registrations),
        completed=len(attended),
    )
