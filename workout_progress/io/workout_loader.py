from __future__ import annotations

import io
import logging
from typing import List, Optional

import pandas as pd

from ..models.types import AggregateResult

logger = logging.getLogger(__name__)

DURATION_COLUMN = "duration"
# Leading whole minutes: "45", "+45", "30.5" -> 30, "20 min" -> 20
_LEADING_MINUTES = r"^\s*\+?(\d+)"


def _max_field_count(text: str) -> int:
    # Upper bound on fields per record; quoted commas only widen it
    widest = 0
    commas = 0
    in_quotes = False
    for line in text.splitlines():
        commas += line.count(",")
        if line.count('"') % 2:
            in_quotes = not in_quotes
        if not in_quotes:
            widest = max(widest, commas + 1)
            commas = 0
    return max(widest, commas + 1)


def _read_workout_table(file_path: str) -> pd.DataFrame:
    """Read the workout CSV into a DataFrame of strings, one row per workout.

    Undecodable bytes are replaced and NUL characters dropped so a damaged row
    still parses. Surplus fields are dropped and missing ones left empty.
    """
    with open(file_path, "r", encoding="utf-8-sig", errors="replace", newline="") as handle:
        text = handle.read().replace("\x00", "")

    try:
        raw = pd.read_csv(
            io.StringIO(text),
            header=None,
            names=list(range(_max_field_count(text))),
            dtype=str,
        )
    except pd.errors.EmptyDataError:
        return pd.DataFrame()
    if raw.empty:
        return pd.DataFrame()

    header: List = raw.iloc[0].tolist()
    while header and pd.isna(header[-1]):
        header.pop()
    columns = ["" if pd.isna(name) else str(name).strip() for name in header]

    df = raw.iloc[1:, : len(columns)].reset_index(drop=True)
    df.columns = columns
    return df


def _duration_column(df: pd.DataFrame) -> Optional[pd.Series]:
    # With a repeated header name the last column wins
    matches = df.loc[:, df.columns == DURATION_COLUMN]
    if matches.shape[1] == 0:
        return None
    return matches.iloc[:, -1]


def _sum_minutes(durations: pd.Series) -> int:
    minutes = durations.fillna("").astype(str).str.extract(_LEADING_MINUTES, expand=False)
    return int(pd.to_numeric(minutes, errors="coerce").fillna(0).sum())


def aggregate_workouts(file_path: str) -> AggregateResult:
    """Count workout rows and total their ``duration`` minutes.

    Never raises: a missing, unreadable or unparsable file is logged and the
    zero-value result is returned. Rows whose duration is not a whole number
    of minutes are counted but add nothing to the total.
    """
    try:
        df = _read_workout_table(file_path)
        total_workouts = int(len(df))
        durations = _duration_column(df)
        if durations is not None:
            total_minutes = _sum_minutes(durations)
        else:
            if total_workouts:
                logger.warning(f"No '{DURATION_COLUMN}' column in {file_path}; counting 0 minutes")
            total_minutes = 0
    except FileNotFoundError:
        logger.error(f"Workout file not found at {file_path}")
        return AggregateResult.empty()
    except PermissionError:
        logger.error(f"Permission denied reading file at {file_path}")
        return AggregateResult.empty()
    except Exception as e:
        logger.error(f"Error reading workout file {file_path}: {e}")
        return AggregateResult.empty()

    logger.info(f"Total workouts: {total_workouts}")
    logger.info(f"Total minutes: {total_minutes}")
    return AggregateResult(total_workouts=total_workouts, total_minutes=total_minutes)
