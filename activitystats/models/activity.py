"""Contains all models necessary for activities"""
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class ActivityState(StrEnum):
    """The state of an activity as seen by a single registered user"""
    GUEST = 'guest'
    ENDED = 'ended'
    REGISTERED = 'registered'
    CHECK_IN = 'check_in'
    CHECK_OUT = 'check_out'
    ATTENDANCE_OPEN = 'attendance_open'
    ATTENDANCE_CLOSED = 'attendance_closed'
    ATTENDANCE_REVIEW = 'attendance_review'
    CANCELED = 'canceled'
    ABSENT = 'absent'
    COMPLETED = 'completed'
    FEEDBACK_PENDING = 'feedback_pending'
    FEEDBACK_CLOSED = 'feedback_closed'
    FEEDBACK_REVIEWING = 'feedback_reviewing'
    FEEDBACK_ACCEPTED = 'feedback_accepted'
    FEEDBACK_DENIED = 'feedback_denied'


class PointGroup(StrEnum):
    """Point groups counted towards the certificate"""
    GROUP_ONE = 'NHOM_1'
    GROUP_TWO = 'NHOM_2'
    GROUP_THREE = 'NHOM_3'


DEFAULT_POINT_GROUP = PointGroup.GROUP_ONE


@dataclass(frozen=True)
class Activity:
    """Represents an activity referenced by a registration"""
    id: str | None = None
    title: str | None = None
    description: str | None = None
    state: ActivityState | str | None = None
    points: int | float | None = None
    point_group: PointGroup = DEFAULT_POINT_GROUP
    start_time: datetime | None = None
    end_time: datetime | None = None
