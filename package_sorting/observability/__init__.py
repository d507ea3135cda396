"""
Observability for sorting runs.

Main exports:
- SortingMetrics: Tracks counts, stacks and rules fired for a run
- SortingReporter: Renders metrics as a Markdown report
"""
from .metrics import SortingMetrics
from .reporter import SortingReporter

__all__ = [
    "SortingMetrics",
    "SortingReporter",
]
