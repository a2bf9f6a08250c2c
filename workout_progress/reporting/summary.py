from __future__ import annotations

from typing import List

from ..config import GoalConfig
from ..models.types import AggregateResult, ProgressSummary


def render_summary(
    config: GoalConfig,
    health_entries: int,
    workouts: AggregateResult,
    progress: ProgressSummary,
) -> List[str]:
    """Build the report lines for one run."""
    lines = [
        "=== Weekly Progress Report ===",
        f"User: {config.user_name}",
        f"Weekly Workout Goal: {config.weekly_goal_minutes} minutes",
        "",
        "--- Health Metrics ---",
        f"Total health entries: {health_entries}",
        "",
        "--- Workout Data ---",
        f"Total workouts: {workouts.total_workouts}",
        f"Total minutes: {workouts.total_minutes}",
        "",
        "--- Weekly Summary ---",
        f"Progress towards goal: {progress.progress_percent}%",
    ]
    if progress.goal_reached:
        lines.append(
            f"Congratulations {config.user_name}! Weekly goal of {progress.weekly_goal_minutes} minutes reached."
        )
    else:
        lines.append(f"Minutes remaining: {progress.minutes_remaining} minutes")
    return lines


def print_summary(lines: List[str]) -> None:
    print("\n".join(lines), flush=True)
