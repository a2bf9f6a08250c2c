"""Typed result objects shared by the loaders and the report."""

from .types import AggregateResult, ProgressSummary

__all__ = [
    "AggregateResult",
    "ProgressSummary",
]
