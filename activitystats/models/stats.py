"""Contains the summaries derived from a collection of registrations"""
from dataclasses import dataclass
from .registration import Registration


@dataclass(frozen=True)
class ActivityStats:
    """Summary of a user's registrations, recomputed whenever they change"""
    registered: tuple[Registration, ...] = ()
    attended: tuple[Registration, ...] = ()
    canceled: tuple[Registration, ...] = ()
    absent: tuple[Registration, ...] = ()
    total_points: int | float = 0
    total_activities: int = 0
    completed: int = 0

    def to_dict(self) -> dict:
        """Returns the summary in the shape consumed by the presentation layer"""
        return {
            'registered': list(self.registered),
            'attended': list(self.attended),
            'canceled': list(self.canceled),
            'absent': list(self.absent),
            'totalPoints': self.total_points,
            'totalActivities': self.total_activities,
            'completed': self.completed,
        }


@dataclass
class GroupProgress:
    """Progress of a single certificate point group"""
    id: str
    target: int | float
    current: int | float
    remaining: int | float
    has_required_points: bool
    status: str = 'warning'

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'target': self.target,
            'current': self.current,
            'remaining': self.remaining,
            'status': self.status,
        }


@dataclass
class ProgressSummary:
    """Certificate progress derived from attended registrations"""
    current_points: int | float
    target_points: int | float
    percent: int
    missing_points: int | float
    raw_points: dict[str, int | float]
    overflow_from_group_one: int | float
    has_red_address_participation: bool
    groups: list[GroupProgress]
    is_qualified: bool

    def to_dict(self) -> dict:
        return {
            'currentPoints': self.current_points,
            'targetPoints': self.target_points,
            'percent': self.percent,
            'missingPoints': self.missing_points,
            'rawPoints': dict(self.raw_points),
            'overflowFromGroupOne': self.overflow_from_group_one,
            'hasRedAddressParticipation': self.has_red_address_participation,
            'groups': [group.to_dict() for group in self.groups],
            'isQualified': self.is_qualified,
        }
