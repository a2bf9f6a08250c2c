"""Console rendering of the weekly progress report."""

from .summary import render_summary, print_summary

__all__ = [
    "render_summary",
    "print_summary",
]
