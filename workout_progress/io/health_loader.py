from __future__ import annotations

import json
import logging

logger = logging.getLogger(__name__)

METRICS_KEY = "metrics"


def count_health_entries(file_path: str) -> int:
    """Return the number of entries in the document's ``metrics`` list.

    A document without a ``metrics`` list counts as zero entries. Read and
    parse failures are logged and also yield 0.
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.error(f"Health metrics file not found at {file_path}")
        return 0
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.error(f"Invalid JSON format in {file_path}")
        return 0
    except Exception as e:
        logger.error(f"Error reading health metrics file {file_path}: {e}")
        return 0

    metrics = data.get(METRICS_KEY) if isinstance(data, dict) else None
    total_entries = len(metrics) if isinstance(metrics, list) else 0

    logger.info(f"Total health entries: {total_entries}")
    return total_entries
