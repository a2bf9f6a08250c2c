"""
Run configuration for the weekly progress report.

The user name and weekly goal come from the process environment, optionally
seeded from a ``.env`` file. They are read once at startup into a GoalConfig
that is passed explicitly to the report.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

# Input files
DEFAULT_WORKOUTS_PATH: str = "./data/workouts.csv"
DEFAULT_HEALTH_METRICS_PATH: str = "./data/health-metrics.json"

# Environment variables
USER_NAME_VAR: str = "USER_NAME"
WEEKLY_GOAL_VAR: str = "WEEKLY_GOAL"

DEFAULT_USER_NAME: str = "Athlete"


class ConfigError(ValueError):
    """Raised when the environment does not describe a usable weekly goal."""


@dataclass(frozen=True)
class GoalConfig:
    user_name: str
    weekly_goal_minutes: int


def _parse_weekly_goal(raw: Optional[str]) -> int:
    if raw is None or not raw.strip():
        raise ConfigError(f"{WEEKLY_GOAL_VAR} is not set; expected a whole number of minutes")
    try:
        goal = int(raw.strip())
    except ValueError:
        raise ConfigError(f"{WEEKLY_GOAL_VAR} must be a whole number of minutes, got {raw!r}")
    if goal <= 0:
        raise ConfigError(f"{WEEKLY_GOAL_VAR} must be greater than 0, got {goal}")
    return goal


def load_environment(env_file: Optional[str] = None) -> bool:
    """Load a ``.env`` file into ``os.environ`` without overriding existing values.

    Without ``env_file`` the nearest ``.env`` above the working directory is used.
    """
    path = env_file or find_dotenv(usecwd=True)
    if not path:
        return False
    loaded = load_dotenv(path, override=False)
    if env_file and not loaded:
        logger.warning(f"Environment file not loaded: {env_file}")
    return loaded


def load_goal_config(environ: Optional[Mapping[str, str]] = None, env_file: Optional[str] = None) -> GoalConfig:
    """Build the GoalConfig for this run.

    Args:
        environ: Mapping to read instead of the process environment. When given,
            no ``.env`` file is loaded.
        env_file: Explicit ``.env`` path to load before reading ``os.environ``.

    Raises:
        ConfigError: if the weekly goal is missing, not an integer or not positive.
    """
    if environ is None:
        load_environment(env_file)
        environ = os.environ

    user_name = (environ.get(USER_NAME_VAR) or "").strip() or DEFAULT_USER_NAME
    weekly_goal = _parse_weekly_goal(environ.get(WEEKLY_GOAL_VAR))
    return GoalConfig(user_name=user_name, weekly_goal_minutes=weekly_goal)
