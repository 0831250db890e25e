"""Maps registration payloads served by the activity API onto the models"""
import math
from datetime import datetime
from logging import getLogger
import pytz
from activitystats import utils
from activitystats.models import (Activity, ActivityState, AttendanceEntry, AttendancePhase,
                                  FaceMatch, Feedback, FeedbackStatus, Registration,
                                  RegistrationStatus)


def _as_enum(enum_type, value):
    """Converts value to a member of enum_type, keeping unknown values as they are"""
    if value is None:
        return None
    if value in enum_type:
        return enum_type(value)
    return value


def _parse_datetime(value, timezone: pytz.tzinfo.BaseTzInfo) -> datetime | None:
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = timezone.localize(value)
        return value.astimezone(pytz.utc)
    return utils.get_utc_datetime_from_supported_formats(str(value), timezone)


def _parse_points(value) -> int | float | None:
    """Keeps the numeric type of the points, converting numeric strings

    Raises:
        ValueError: Raised when the points are not a finite, non-negative number
    """
    if value is None or isinstance(value, bool):
        return None
    points = value
    if not isinstance(value, (int, float)):
        text = str(value).strip()
        try:
            points = int(text)
        except ValueError:
            points = float(text)
    if (isinstance(points, float) and not math.isfinite(points)) or points < 0:
        raise ValueError(f'Points must be a finite, non-negative number, got {value}')
    return points


def parse_activity(payload: dict | None,
                   timezone: pytz.tzinfo.BaseTzInfo = pytz.utc) -> Activity | None:
    """Parses an activity payload, returning None when it is absent"""
    if not isinstance(payload, dict):
        return None
    return Activity(
        id=payload.get('id'),
        title=payload.get('title'),
        description=payload.get('description'),
        state=_as_enum(ActivityState, payload.get('state')),
        points=_parse_points(payload.get('points')),
        point_group=utils.normalize_point_group(payload.get('pointGroup')),
        start_time=_parse_datetime(payload.get('startTime'), timezone),
        end_time=_parse_datetime(payload.get('endTime'), timezone))


def parse_attendance_entry(payload: dict) -> AttendanceEntry:
    """Parses an attendance history entry, anything but a checkout counts as check-in"""
    phase = AttendancePhase.CHECKOUT \
        if str(payload.get('phase', '')).lower() == AttendancePhase.CHECKOUT \
        else AttendancePhase.CHECKIN
    face_match = payload.get('faceMatch')
    return AttendanceEntry(phase=phase,
                           face_match=FaceMatch(face_match) if face_match in FaceMatch else None)


def parse_registration(payload: dict,
                       timezone: pytz.tzinfo.BaseTzInfo = pytz.utc) -> Registration:
    """Parses a registration payload

    Args:
        payload (dict): The registration as served by the API
        timezone (pytz.tzinfo.BaseTzInfo): Timezone to localize naive datetimes to

    Raises:
        ValueError: Raised when a datetime, the attendance history or the activity points
            cannot be parsed

    Returns:
        Registration: The parsed registration
    """
    status = _as_enum(RegistrationStatus, payload.get('status'))
    if not isinstance(status, RegistrationStatus):
        getLogger(__name__).warning(
            'Registration %s has unknown status %s', payload.get('id'), status)

    history = payload.get('attendanceHistory')
    if history is not None and not isinstance(history, list):
        raise ValueError(f'Registration {payload.get("id")} has an invalid attendanceHistory')

    feedback = payload.get('feedback')
    if isinstance(feedback, dict):
        feedback = Feedback(_as_enum(FeedbackStatus, feedback.get('status')))
    else:
        feedback = None

    return Registration(
        id=payload.get('id'),
        status=status,
        activity=parse_activity(payload.get('activity'), timezone),
        attendance_history=tuple(parse_attendance_entry(entry)
                                 for entry in history or []
                                 if isinstance(entry, dict)),
        feedback=feedback,
        approved_at=_parse_datetime(payload.get('approvedAt'), timezone),
        checked_in_at=_parse_datetime(payload.get('checkInAt'), timezone))


def parse_registrations(payload: list | dict,
                        timezone: pytz.tzinfo.BaseTzInfo = pytz.utc) -> list[Registration]:
    """Parses a list of registrations, or an object holding them under 'registrations'

    Raises:
        ValueError: Raised when the payload holds no list of registrations
    """
    if isinstance(payload, dict):
        payload = payload.get('registrations')
    if not isinstance(payload, list) or not all(isinstance(item, dict) for item in payload):
        raise ValueError('Expected a list of registration objects')
    return [parse_registration(item, timezone) for item in payload]
