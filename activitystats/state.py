"""Derives the state of an activity as seen by a registered user"""
from dataclasses import replace
from datetime import datetime, timedelta
from activitystats import utils
from activitystats.models import (Activity, ActivityState, AttendancePhase, FaceMatch, Feedback,
                                  FeedbackStatus, Registration, RegistrationStatus)

FEEDBACK_WINDOW = timedelta(days=3)


def compute_feedback_window(activity: Activity | None, registration: Registration | None,
                            now: datetime | None = None) -> tuple[datetime, datetime]:
    """Computes the period during which feedback may be sent for a registration

    The window opens at approval, check-in, the activity's end or start, whichever is
    known first in that order, and lasts FEEDBACK_WINDOW.

    Returns:
        tuple[datetime, datetime]: The start and end of the window
    """
    candidates = []
    if registration is not None:
        candidates += [registration.approved_at, registration.checked_in_at]
    if activity is not None:
        candidates += [activity.end_time, activity.start_time]
    start = next((candidate for candidate in candidates if candidate is not None), None)
    if start is None:
        start = now or utils.utc_now()
    return start, start + FEEDBACK_WINDOW


def _feedback_state(feedback: Feedback) -> ActivityState:
    if feedback.status == FeedbackStatus.APPROVED:
        return ActivityState.FEEDBACK_ACCEPTED
    if feedback.status == FeedbackStatus.REJECTED:
        return ActivityState.FEEDBACK_DENIED
    return ActivityState.FEEDBACK_REVIEWING


def determine_state(activity: Activity | None, registration: Registration | None,
                    now: datetime | None = None) -> ActivityState:
    """Determines the state of an activity for the user holding the registration

    Args:
        activity (Activity | None): The activity, its start and end times drive the state
        registration (Registration | None): The user's registration, None for guests
        now (datetime | None): Timezone aware reference time, defaults to the current time

    Returns:
        ActivityState: The derived state
    """
    now = now or utils.utc_now()
    start = activity.start_time if activity is not None else None
    end = activity.end_time if activity is not None else None
    has_ended = end is not None and end < now
    is_running = start is not None and start <= now and (end is None or end >= now)

    if registration is None:
        return ActivityState.ENDED if has_ended else ActivityState.GUEST

    status = registration.status
    if status == RegistrationStatus.REGISTERED:
        if has_ended:
            return ActivityState.ENDED
        if is_running:
            if not registration.has_phase(AttendancePhase.CHECKIN):
                return ActivityState.CHECK_IN
            if not registration.has_phase(AttendancePhase.CHECKOUT):
                return ActivityState.CHECK_OUT
            return ActivityState.ATTENDANCE_OPEN
        if start is not None and start > now:
            return ActivityState.ATTENDANCE_CLOSED
        return ActivityState.REGISTERED
    if status == RegistrationStatus.IN_PROGRESS:
        if has_ended:
            return ActivityState.ENDED
        if is_running and registration.has_phase(AttendancePhase.CHECKOUT):
            return ActivityState.ATTENDANCE_OPEN
        return ActivityState.CHECK_OUT
    if status == RegistrationStatus.CANCELED:
        return ActivityState.CANCELED
    if status == RegistrationStatus.ABSENT:
        return ActivityState.ABSENT
    if status == RegistrationStatus.PENDING_REVIEW:
        if registration.feedback is not None:
            return _feedback_state(registration.feedback)
        has_face_issue = any(entry.face_match == FaceMatch.REVIEW
                             for entry in registration.attendance_history)
        if not has_face_issue:
            return ActivityState.ATTENDANCE_REVIEW
        window_start, window_end = compute_feedback_window(activity, registration, now)
        if now < window_start:
            return ActivityState.ATTENDANCE_REVIEW
        if now > window_end:
            return ActivityState.FEEDBACK_CLOSED
        return ActivityState.FEEDBACK_PENDING
    if status == RegistrationStatus.ATTENDED:
        if registration.feedback is not None:
            return _feedback_state(registration.feedback)
        return ActivityState.COMPLETED
    return ActivityState.GUEST


def with_derived_state(registration: Registration, now: datetime | None = None) -> Registration:
    """Returns a copy of the registration whose activity carries its derived state"""
    if registration.activity is None:
        return registration
    state = determine_state(registration.activity, registration, now)
    return replace(registration, activity=replace(registration.activity, state=state))
