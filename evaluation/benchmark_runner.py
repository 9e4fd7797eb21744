"""
Benchmark runner: run the reading-error detector over a dataset of
passage/transcript pairs and output a structured report.
"""
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from core.metrics import wer
from core.reading_errors import ReadingError, detect_reading_errors
from core.tokenizer import tokenize_passage
from evaluation.error_analysis import ErrorPatternReport, analyze_error_patterns

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkReport:
    """Per-sample summaries plus the error pattern report across all samples."""
    n_samples: int = 0
    skipped: List[str] = field(default_factory=list)  # sample ids without a transcript
    samples: List[Dict[str, Any]] = field(default_factory=list)
    patterns: ErrorPatternReport = field(default_factory=ErrorPatternReport)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "n_samples": self.n_samples,
            "skipped": self.skipped,
            "samples": self.samples,
            "patterns": self.patterns.to_dict(),
        }


def _get_passage(item: Dict[str, Any]) -> str:
    return (item.get("original_text") or item.get("passage") or item.get("text") or "").strip()


def _get_transcript(item: Dict[str, Any]) -> str:
    return (item.get("transcribed_text") or item.get("transcript") or "").strip()


def run_benchmark_items(
    items: List[Dict[str, Any]],
    sample_id_key: str = "id",
    passage_as_transcript: bool = False,
) -> BenchmarkReport:
    """
    items: [{"passage": ..., "transcript": ..., "id": optional}].
    Items without a transcript are skipped: no transcript means no error list for that attempt.
    passage_as_transcript reads each passage back as its own transcript (expect 0 errors).
    """
    report = BenchmarkReport()
    all_errors: List[ReadingError] = []
    total_words = 0

    for i, item in enumerate(items):
        sid = str(item.get(sample_id_key) or i)
        passage = _get_passage(item)
        if not passage:
            continue
        transcript = passage if passage_as_transcript else _get_transcript(item)
        if not transcript:
            logger.warning("No transcript for %s, skipping", sid)
            report.skipped.append(sid)
            continue

        errors = detect_reading_errors(passage, transcript)
        n_words = len(tokenize_passage(passage))
        total_words += n_words
        all_errors.extend(errors)
        report.samples.append({
            "sample_id": sid,
            "total_words": n_words,
            "error_count": len(errors),
            "wer": round(wer(passage, transcript), 4),
            "errors": [e.to_dict() for e in errors],
        })

    report.n_samples = len(report.samples)
    report.patterns = analyze_error_patterns(all_errors, total_words=total_words)
    return report


def load_dataset(dataset_path: str, limit: Optional[int] = None) -> List[Dict[str, Any]]:
    """Dataset JSON must be a list of items; limit keeps the first N."""
    with open(dataset_path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError("Dataset must be a list of items")
    return data[:limit] if limit else data


def run_benchmark(
    dataset_path: str,
    limit: Optional[int] = None,
    sample_id_key: str = "id",
    passage_as_transcript: bool = False,
) -> BenchmarkReport:
    """Load dataset JSON and run run_benchmark_items on it."""
    items = load_dataset(dataset_path, limit)
    return run_benchmark_items(items, sample_id_key=sample_id_key, passage_as_transcript=passage_as_transcript)


def write_report(report: BenchmarkReport, output_path: str) -> None:
    """Write benchmark report to JSON file."""
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(report.to_dict(), f, ensure_ascii=False, indent=2)
    logger.info("Wrote benchmark report to %s", output_path)
