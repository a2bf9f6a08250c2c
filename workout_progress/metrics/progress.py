from __future__ import annotations

from ..models.types import ProgressSummary


def _percent_half_up(part: int, whole: int) -> int:
    # Exact integer form of floor(part / whole * 100 + 0.5), so 82.5% -> 83
    return (200 * part + whole) // (2 * whole)


def compute_progress(total_minutes: int, weekly_goal_minutes: int) -> ProgressSummary:
    """Compare logged minutes with the weekly goal."""
    if weekly_goal_minutes <= 0:
        raise ValueError(f"Weekly goal must be a positive number of minutes, got {weekly_goal_minutes}")

    return ProgressSummary(
        total_minutes=total_minutes,
        weekly_goal_minutes=weekly_goal_minutes,
        progress_percent=_percent_half_up(total_minutes, weekly_goal_minutes),
        minutes_remaining=max(0, weekly_goal_minutes - total_minutes),
        goal_reached=total_minutes >= weekly_goal_minutes,
    )
