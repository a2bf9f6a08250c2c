from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import (
    DEFAULT_HEALTH_METRICS_PATH,
    DEFAULT_WORKOUTS_PATH,
    USER_NAME_VAR,
    WEEKLY_GOAL_VAR,
    ConfigError,
    GoalConfig,
    load_goal_config,
)
from .io.health_loader import count_health_entries
from .io.workout_loader import aggregate_workouts
from .metrics.progress import compute_progress
from .reporting.summary import print_summary, render_summary

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2


def run_summary(
    config: GoalConfig,
    workouts_path: str = DEFAULT_WORKOUTS_PATH,
    health_path: str = DEFAULT_HEALTH_METRICS_PATH,
) -> int:
    """Read both inputs, compare against the weekly goal and print the report.

    The summary is printed only once every step has succeeded; any failure is
    logged and reported through the returned exit status.
    """
    try:
        health_entries = count_health_entries(health_path)
        workouts = aggregate_workouts(workouts_path)
        progress = compute_progress(workouts.total_minutes, config.weekly_goal_minutes)
        lines = render_summary(config, health_entries, workouts, progress)
    except Exception as e:
        logger.error(f"Error in data processor: {e}")
        logger.error("Check that the input files exist and are well-formed.")
        return EXIT_FAILURE

    print_summary(lines)
    return EXIT_OK


def _add_common_options(parser: argparse.ArgumentParser, with_defaults: bool) -> None:
    # Subcommands repeat the options with suppressed defaults so values given
    # before the subcommand are not overwritten
    def default(value):
        return value if with_defaults else argparse.SUPPRESS

    parser.add_argument("--workouts", default=default(DEFAULT_WORKOUTS_PATH), help=f"Workouts CSV file (default: {DEFAULT_WORKOUTS_PATH})")
    parser.add_argument("--health", default=default(DEFAULT_HEALTH_METRICS_PATH), help=f"Health metrics JSON file (default: {DEFAULT_HEALTH_METRICS_PATH})")
    parser.add_argument("--env-file", default=default(None), help="Load USER_NAME and WEEKLY_GOAL from this .env file (default: nearest .env)")
    parser.add_argument("--log-level", default=default("INFO"), choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Diagnostic log level (default: INFO)")


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="workout-progress",
        description="Weekly workout progress report from a workouts CSV and a health metrics JSON file",
    )
    _add_common_options(parser, with_defaults=True)

    subparsers = parser.add_subparsers(dest="command")
    for name, help_text in [
        ("report", "Print the weekly progress report (default)"),
        ("workouts", "Count workouts and total minutes only"),
        ("health", "Count health metric entries only"),
    ]:
        _add_common_options(subparsers.add_parser(name, help=help_text), with_defaults=False)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    command = args.command or "report"
    if command == "workouts":
        result = aggregate_workouts(args.workouts)
        print(f"Total workouts: {result.total_workouts}")
        print(f"Total minutes: {result.total_minutes}")
        return EXIT_OK
    if command == "health":
        print(f"Total health entries: {count_health_entries(args.health)}")
        return EXIT_OK

    try:
        config = load_goal_config(env_file=args.env_file)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        logger.error(f"Set {USER_NAME_VAR} and {WEEKLY_GOAL_VAR} in the environment or a .env file.")
        return EXIT_CONFIG_ERROR

    return run_summary(config, workouts_path=args.workouts, health_path=args.health)


if __name__ == "__main__":
    sys.exit(main())
