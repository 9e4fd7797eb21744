"""
Evaluation layer: error pattern analysis and dataset benchmark runner.
"""
from evaluation.error_analysis import analyze_error_patterns, ErrorPatternReport
from evaluation.benchmark_runner import (
    BenchmarkReport,
    load_dataset,
    run_benchmark,
    run_benchmark_items,
    write_report,
)

__all__ = [
    "analyze_error_patterns",
    "ErrorPatternReport",
    "BenchmarkReport",
    "load_dataset",
    "run_benchmark",
    "run_benchmark_items",
    "write_report",
]
