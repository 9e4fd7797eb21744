"""
Observability for the analysis endpoints.
"""

from metrics.analysis_metrics import (
    get_snapshot,
    record_analysis,
    record_rejected,
    reset,
)

__all__ = [
    "get_snapshot",
    "record_analysis",
    "record_rejected",
    "reset",
]
