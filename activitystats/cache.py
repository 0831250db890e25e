"""Memoizes activity statistics per user"""
from logging import getLogger
from typing import Hashable, Iterable
from activitystats.models import ActivityStats, Registration
from activitystats.stats import compute_activity_stats


class StatsCache:
    """Caches computed statistics, recomputing whenever the registrations for a key change"""

    def __init__(self):
        self._stats_cache = dict[Hashable, tuple[tuple[Registration, ...], ActivityStats]]()

    def stats_for(self, key: Hashable, registrations: Iterable[Registration]) -> ActivityStats:
        """Fetch the statistics for key, computing them if the registrations differ from cache"""
        registrations = tuple(registrations)
        cached = self._stats_cache.get(key, None)
        if cached is not None and cached[0] == registrations:
            return cached[1]

        getLogger(__name__).debug('Computing statistics for %s', key)
        stats = compute_activity_stats(registrations)
        self._stats_cache[key] = (registrations, stats)
        return stats

    def get_stats(self, key: Hashable) -> ActivityStats | None:
        """Fetch the last statistics computed for key"""
        cached = self._stats_cache.get(key, None)
        return cached[1] if cached is not None else None

    def uncache(self, key: Hashable):
        """Delete the statistics of key from cache"""
        self._stats_cache.pop(key, None)

    def clear(self):
        self._stats_cache.clear()

    def __len__(self) -> int:
        return len(self._stats_cache)
