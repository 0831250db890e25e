"""Computes a user's progress towards the activity certificate"""
import math
from dataclasses import dataclass
from typing import Iterable
from activitystats import utils
from activitystats.models import (GroupProgress, PointGroup, ProgressSummary, Registration,
                                  RegistrationStatus)
from activitystats.stats import points_of

GROUP_ONE_ID = 'NHOM_1'
COMBINED_GROUP_ID = 'NHOM_23'


@dataclass(frozen=True)
class CertificateTargets:
    """Points required per group, group two and three share a single target"""
    group_one: int | float = 50
    group_two_three: int | float = 120

    @property
    def total(self) -> int | float:
        return self.group_one + self.group_two_three


def _status(satisfied: bool) -> str:
    return 'success' if satisfied else 'warning'


def compute_progress_summary(registrations: Iterable[Registration],
                             targets: CertificateTargets | None = None) -> ProgressSummary:
    """Sums attended points per point group and checks them against the certificate targets

    Points earned in group one above its target count towards groups two and three. Qualifying
    also requires at least one group one activity at a red address.

    Args:
        registrations (Iterable[Registration]): The user's registrations, only attended ones count
        targets (CertificateTargets | None): The targets to check against, defaults apply if None

    Returns:
        ProgressSummary: The user's progress
    """
    targets = targets or CertificateTargets()
    raw_points = {group.value: 0 for group in PointGroup}
    has_red_address = False

    for registration in registrations:
        activity = registration.activity
        if registration.status != RegistrationStatus.ATTENDED or activity is None:
            continue
        group = utils.normalize_point_group(activity.point_group)
        raw_points[group.value] += points_of(registration)
        if not has_red_address and group == PointGroup.GROUP_ONE:
            has_red_address = utils.contains_red_address_keyword(
                activity.title, activity.description)

    group_one_raw = raw_points[PointGroup.GROUP_ONE.value]
    overflow = max(group_one_raw - targets.group_one, 0)
    group_one_effective = min(group_one_raw, targets.group_one)
    group_two_three_effective = (raw_points[PointGroup.GROUP_TWO.value]
                                 + raw_points[PointGroup.GROUP_THREE.value] + overflow)
    group_two_three_capped = min(group_two_three_effective, targets.group_two_three)

    group_one = GroupProgress(
        id=GROUP_ONE_ID,
        target=targets.group_one,
        current=group_one_effective,
        remaining=max(targets.group_one - group_one_effective, 0),
        has_required_points=group_one_effective >= targets.group_one)
    group_one.status = _status(group_one.has_required_points and has_red_address)
    group_two_three = GroupProgress(
        id=COMBINED_GROUP_ID,
        target=targets.group_two_three,
        current=group_two_three_effective,
        remaining=max(targets.group_two_three - group_two_three_capped, 0),
        has_required_points=group_two_three_effective >= targets.group_two_three)
    group_two_three.status = _status(group_two_three.has_required_points)

    current_points = group_one_effective + group_two_three_capped
    percent = 0
    if targets.total > 0:
        percent = min(100, math.floor(current_points / targets.total * 100 + 0.5))

    return ProgressSummary(
        current_points=current_points,
        target_points=targets.total,
        percent=percent,
        missing_points=group_one.remaining + group_two_three.remaining,
        raw_points=raw_points,
        overflow_from_group_one=overflow,
        has_red_address_participation=has_red_address,
        groups=[group_one, group_two_three],
        is_qualified=(group_one.has_required_points
                      and group_two_three.has_required_points
                      and has_red_address))
