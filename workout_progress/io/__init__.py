"""Readers for the workout table and the health metrics document."""

from .workout_loader import aggregate_workouts
from .health_loader import count_health_entries

__all__ = [
    "aggregate_workouts",
    "count_health_entries",
]
