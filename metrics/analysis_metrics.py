"""
Analysis observability metrics.

Thread-safe counters and latency samples for the /reading endpoints.
Exposed via GET /metrics/analysis (JSON snapshot).
"""

import threading
from collections import deque
from typing import Any, Dict

# ----- Shared state (module-level for singleton behavior) -----
_lock = threading.Lock()
_latency_samples: deque = deque(maxlen=1000)  # last N analysis durations (ms) for avg/p95
_analyses_total = 0
_rejected_total = 0
_errors_total = 0


def record_analysis(latency_ms: float, error_count: int) -> None:
    """Call after each completed detector run."""
    global _analyses_total, _errors_total
    with _lock:
        _analyses_total += 1
        _errors_total += error_count
        _latency_samples.append(latency_ms)


def record_rejected() -> None:
    """Call when an attempt is refused because it has no transcript."""
    global _rejected_total
    with _lock:
        _rejected_total += 1


def reset() -> None:
    global _analyses_total, _rejected_total, _errors_total
    with _lock:
        _latency_samples.clear()
        _analyses_total = 0
        _rejected_total = 0
        _errors_total = 0


def get_snapshot() -> Dict[str, Any]:
    """
    Return a JSON-serializable snapshot of analysis metrics.
    Used by GET /metrics/analysis.
    """
    with _lock:
        samples = list(_latency_samples)
        analyses, rejected, errors = _analyses_total, _rejected_total, _errors_total
    n = len(samples)
    if n == 0:
        avg_latency_ms = None
        p95_latency_ms = None
    else:
        avg_latency_ms = round(sum(samples) / n, 2)
        sorted_s = sorted(samples)
        idx = max(0, int(0.95 * n) - 1)
        p95_latency_ms = round(sorted_s[idx], 2)
    return {
        "analyses_total": analyses,
        "rejected_total": rejected,
        "errors_total": errors,
        "avg_latency_ms": avg_latency_ms,
        "p95_latency_ms": p95_latency_ms,
        "latency_sample_count": n,
    }
