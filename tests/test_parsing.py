"""Tests for parsing registration payloads"""
from datetime import datetime
import pytest
import pytz
from activitystats import compute_activity_stats, parse_registration, parse_registrations
from activitystats.models import (ActivityState, AttendancePhase, FaceMatch, FeedbackStatus,
                                  PointGroup, RegistrationStatus)

HO_CHI_MINH = pytz.timezone('Asia/Ho_Chi_Minh')


def test_parse_full_registration():
    registration = parse_registration({
        'id': 'reg-1',
        'status': 'DA_THAM_GIA',
        'approvedAt': '2024-10-01T10:00:00.000Z',
        'checkInAt': None,
        'attendanceHistory': [
            {'phase': 'checkin', 'faceMatch': 'APPROVED'},
            {'phase': 'checkout', 'faceMatch': 'REVIEW'},
        ],
        'feedback': {'status': 'DA_DUYET'},
        'activity': {
            'id': 'act-1',
            'title': 'Hiến máu nhân đạo',
            'state': 'feedback_accepted',
            'points': 15,
            'pointGroup': 'NHOM_2',
            'startTime': '2024-09-30T01:00:00.000Z',
            'endTime': '2024-09-30T04:00:00.000Z',
        },
    })

    assert registration.id == 'reg-1'
    assert registration.status is RegistrationStatus.ATTENDED
    assert registration.approved_at == datetime(2024, 10, 1, 10, 0, tzinfo=pytz.utc)
    assert registration.checked_in_at is None
    assert [entry.phase for entry in registration.attendance_history] == [
        AttendancePhase.CHECKIN, AttendancePhase.CHECKOUT]
    assert registration.attendance_history[1].face_match is FaceMatch.REVIEW
    assert registration.feedback.status is FeedbackStatus.APPROVED
    assert registration.activity.state is ActivityState.FEEDBACK_ACCEPTED
    assert registration.activity.points == 15
    assert registration.activity.point_group is PointGroup.GROUP_TWO
    assert registration.activity.end_time == datetime(2024, 9, 30, 4, 0, tzinfo=pytz.utc)


def test_unknown_values_are_kept_raw():
    registration = parse_registration({
        'status': 'DA_XOA',
        'activity': {'state': 'archived', 'pointGroup': 'NHOM_9'},
    })

    assert registration.status == 'DA_XOA'
    assert registration.activity.state == 'archived'
    assert registration.activity.point_group is PointGroup.GROUP_ONE


def test_missing_activity_and_points():
    registration = parse_registration({'status': 'DANG_KY', 'activity': None})
    without_points = parse_registration({'status': 'DA_THAM_GIA', 'activity': {}})

    assert registration.activity is None
    assert without_points.activity.points is None
    assert registration.attendance_history == ()


def test_points_keep_their_numeric_type():
    def points(value):
        return parse_registration({'status': 'DA_THAM_GIA',
                                   'activity': {'points': value}}).activity.points

    assert points('12') == 12 and isinstance(points('12'), int)
    assert points('2.5') == 2.5
    assert points(1.5) == 1.5
    with pytest.raises(ValueError):
        points('many')


@pytest.mark.parametrize('value', ['nan', 'inf', -5, '-1', float('nan'), float('inf')])
def test_points_must_be_finite_and_non_negative(value):
    with pytest.raises(ValueError):
        parse_registration({'status': 'DA_THAM_GIA', 'activity': {'points': value}})


def test_zero_points_are_accepted():
    registration = parse_registration({'status': 'DA_THAM_GIA', 'activity': {'points': 0}})

    assert registration.activity.points == 0


@pytest.mark.parametrize('history', [5, 'checkin', {'phase': 'checkin'}])
def test_invalid_attendance_history_raises(history):
    with pytest.raises(ValueError):
        parse_registration({'id': 'reg-1', 'status': 'DANG_KY', 'attendanceHistory': history})


def test_null_attendance_history_is_empty():
    registration = parse_registration({'status': 'DANG_KY', 'attendanceHistory': None})

    assert registration.attendance_history == ()


def test_naive_datetimes_are_localized():
    registration = parse_registration({
        'status': 'DANG_KY',
        'activity': {'startTime': '15-10-2024 08:00', 'endTime': '2024-10-15T10:00:00'},
    }, HO_CHI_MINH)

    assert registration.activity.start_time == datetime(2024, 10, 15, 1, 0, tzinfo=pytz.utc)
    assert registration.activity.end_time == datetime(2024, 10, 15, 3, 0, tzinfo=pytz.utc)


def test_invalid_datetime_raises():
    with pytest.raises(ValueError):
        parse_registration({'status': 'DANG_KY', 'approvedAt': 'yesterday'})


def test_parse_registrations_accepts_list_or_wrapper():
    items = [{'status': 'DA_THAM_GIA', 'activity': {'points': 20}}, {'status': 'VANG_MAT'}]

    from_list = parse_registrations(items)
    from_wrapper = parse_registrations({'registrations': items})

    assert from_list == from_wrapper
    assert compute_activity_stats(from_list).total_points == 20


@pytest.mark.parametrize('payload', [{'data': []}, 'registrations', [1, 2]])
def test_parse_registrations_rejects_other_payloads(payload):
    with pytest.raises(ValueError):
        parse_registrations(payload)
