"""Weekly goal progress metrics."""

from .progress import compute_progress

__all__ = ["compute_progress"]
