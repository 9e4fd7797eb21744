#!/usr/bin/env python3
"""
Run the reading-error detector over a dataset of passage/transcript pairs.

Usage:
  python scripts/analyze_dataset.py dataset/readings.json
  python scripts/analyze_dataset.py dataset/readings.json --limit 20 --output report.json

  # Use the passage as its own transcript (expect 0 errors everywhere)
  python scripts/analyze_dataset.py dataset/readings.json --self-test

Expects JSON: list of {"passage" | "original_text": "...", "transcript" | "transcribed_text": "...", "id": optional}.
"""
import argparse
import logging
import os
import sys

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from evaluation.benchmark_runner import run_benchmark, write_report


def main():
    parser = argparse.ArgumentParser(description="Detect reading errors for a dataset of passage/transcript pairs")
    parser.add_argument("dataset", help="Path to dataset JSON (list of {passage, transcript, id?})")
    parser.add_argument("--limit", type=int, default=None, help="Max number of items to process")
    parser.add_argument("--output", default=None, help="Write the full JSON report here")
    parser.add_argument("--self-test", action="store_true", help="Use passage as transcript (expect 0 errors)")
    parser.add_argument("--verbose", action="store_true", help="Log every detected error")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    report = run_benchmark(args.dataset, limit=args.limit, passage_as_transcript=args.self_test)

    for sample in report.samples:
        print(f"  {sample['sample_id']}: words={sample['total_words']} errors={sample['error_count']} WER={sample['wer']:.4f}")
    if report.skipped:
        print(f"Skipped (no transcript): {', '.join(report.skipped)}")

    if not report.samples:
        print("No items with passage and transcript.")
        return 1

    patterns = report.patterns
    print(f"\nProcessed {report.n_samples} items.")
    print(f"Errors: {patterns.n_errors} over {patterns.total_words} words ({patterns.error_rate:.2f} per 100 words)")
    for row in patterns.error_types:
        print(f"  {row['error_type']}: {row['count']}")
    if patterns.common_error_words:
        print("Most common error words: " + ", ".join(
            f"{row['word']} ({row['count']})" for row in patterns.common_error_words
        ))

    if args.output:
        write_report(report, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
