"""Contains all models necessary for registrations"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from .activity import Activity


class RegistrationStatus(StrEnum):
    """Represents the lifecycle status of a registration"""
    REGISTERED = 'DANG_KY'
    IN_PROGRESS = 'DANG_THAM_GIA'
    ATTENDED = 'DA_THAM_GIA'
    CANCELED = 'DA_HUY'
    ABSENT = 'VANG_MAT'
    PENDING_REVIEW = 'CHO_DUYET'


class AttendancePhase(StrEnum):
    CHECKIN = 'checkin'
    CHECKOUT = 'checkout'


class FaceMatch(StrEnum):
    APPROVED = 'APPROVED'
    REVIEW = 'REVIEW'


class FeedbackStatus(StrEnum):
    """Represents the review status of feedback sent after an activity"""
    PENDING = 'CHO_DUYET'
    APPROVED = 'DA_DUYET'
    REJECTED = 'BI_TU_CHOI'


@dataclass(frozen=True)
class AttendanceEntry:
    """A single check-in or check-out recorded for a registration"""
    phase: AttendancePhase
    face_match: FaceMatch | None = None


@dataclass(frozen=True)
class Feedback:
    status: FeedbackStatus | str


@dataclass(frozen=True)
class Registration:
    """Represents a registration as delivered by the activity API

    The status is kept as a raw string when it is not a known RegistrationStatus
    """
    status: RegistrationStatus | str
    activity: Activity | None = None
    id: str | None = None
    attendance_history: tuple[AttendanceEntry, ...] = field(default_factory=tuple)
    feedback: Feedback | None = None
    approved_at: datetime | None = None
    checked_in_at: datetime | None = None

    def has_phase(self, phase: AttendancePhase) -> bool:
        """Whether an attendance entry for the given phase was recorded"""
        return any(entry.phase == phase for entry in self.attendance_history)
