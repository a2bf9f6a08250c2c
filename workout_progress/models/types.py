from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AggregateResult:
    total_workouts: int = 0
    total_minutes: int = 0

    @classmethod
    def empty(cls) -> "AggregateResult":
        """Zero-value result returned when the workout file cannot be read."""
        return cls(total_workouts=0, total_minutes=0)


@dataclass(frozen=True)
class ProgressSummary:
    total_minutes: int
    weekly_goal_minutes: int
    progress_percent: int
    minutes_remaining: int
    goal_reached: bool
