"""Tests for memoized statistics"""
import dataclasses
import pytest
from activitystats import StatsCache, compute_activity_stats
from activitystats.models import Activity, Registration, RegistrationStatus


def test_equal_input_is_served_from_cache(mixed_registrations):
    cache = StatsCache()

    first = cache.stats_for('user-1', mixed_registrations)
    second = cache.stats_for('user-1', list(mixed_registrations))

    assert first is second
    assert first == compute_activity_stats(mixed_registrations)


def test_changed_input_is_recomputed(mixed_registrations):
    cache = StatsCache()
    first = cache.stats_for('user-1', mixed_registrations)

    changed = mixed_registrations + [
        Registration(RegistrationStatus.ATTENDED, Activity(points=5), id='r5')]
    second = cache.stats_for('user-1', changed)

    assert second is not first
    assert second.total_points == 25
    assert cache.get_stats('user-1') is second


def test_keys_are_independent(mixed_registrations):
    cache = StatsCache()
    cache.stats_for('user-1', mixed_registrations)
    cache.stats_for('user-2', [])

    assert len(cache) == 2
    assert cache.get_stats('user-2').total_activities == 0

    cache.uncache('user-2')
    assert cache.get_stats('user-2') is None
    assert len(cache) == 1

    cache.clear()
    assert cache.get_stats('user-1') is None


def test_cached_stats_cannot_be_mutated(mixed_registrations):
    cache = StatsCache()
    stats = cache.stats_for('user-1', mixed_registrations)

    with pytest.raises(dataclasses.FrozenInstanceError):
        stats.total_points = 0
    assert isinstance(stats.attended, tuple)
    assert cache.stats_for('user-1', mixed_registrations).total_points == 20
