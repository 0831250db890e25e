"""Contains all models to represent and act on throughout the rest of the application"""
from .activity import Activity, ActivityState, PointGroup, DEFAULT_POINT_GROUP
from .registration import (Registration, RegistrationStatus, AttendanceEntry, AttendancePhase,
                           FaceMatch, Feedback, FeedbackStatus)
from .stats import ActivityStats, GroupProgress, ProgressSummary
