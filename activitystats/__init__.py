"""Aggregates activity registrations into the statistics shown to students"""
from .stats import compute_activity_stats, is_pending, ACTIVE_WINDOW_STATES
from .state import determine_state, compute_feedback_window, with_derived_state
from .progress import compute_progress_summary, CertificateTargets
from .cache import StatsCache
from .parsing import parse_registration, parse_registrations
