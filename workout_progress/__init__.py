"""Weekly workout progress report.

Modules:
- io: Reading the workouts CSV and the health metrics JSON
- models: Typed result objects
- metrics: Progress against the weekly goal
- reporting: Console report
- config: GoalConfig from the environment / .env
- cli: Command line interface
"""

from .config import ConfigError, GoalConfig, load_goal_config
from .io.health_loader import count_health_entries
from .io.workout_loader import aggregate_workouts
from .metrics.progress import compute_progress
from .models.types import AggregateResult, ProgressSummary

__version__ = "1.0.0"

__all__ = [
    "AggregateResult",
    "ProgressSummary",
    "GoalConfig",
    "ConfigError",
    "load_goal_config",
    "aggregate_workouts",
    "count_health_entries",
    "compute_progress",
]
