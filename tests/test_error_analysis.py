"""
Unit tests for error pattern analysis and the dataset benchmark runner.
No audio or models required.
"""
import json
import os
import tempfile
import unittest

from core.reading_errors import detect_reading_errors
from evaluation.benchmark_runner import load_dataset, run_benchmark, run_benchmark_items, write_report
from evaluation.error_analysis import ErrorPatternReport, analyze_error_patterns


STORED_ERRORS = [
    {"error_type": "omission", "word": "The"},
    {"error_type": "hesitation", "word": "the,"},
    {"error_type": "omission", "word": "dog"},
]


class TestAnalyzeErrorPatterns(unittest.TestCase):
    """Error-type distribution, common words and error rate."""

    def test_distribution(self):
        report = analyze_error_patterns(STORED_ERRORS, total_words=100)
        self.assertEqual(report.n_errors, 3)
        self.assertEqual(
            report.error_types,
            [{"error_type": "omission", "count": 2}, {"error_type": "hesitation", "count": 1}],
        )
        self.assertEqual(
            report.common_error_words,
            [{"word": "the", "count": 2}, {"word": "dog", "count": 1}],
        )
        self.assertAlmostEqual(report.error_rate, 3.0)
        self.assertEqual(report.to_dict()["error_rate"], "3.00")

    def test_empty(self):
        report = analyze_error_patterns([])
        self.assertIsInstance(report, ErrorPatternReport)
        self.assertEqual(report.n_errors, 0)
        self.assertEqual(report.error_types, [])
        self.assertEqual(report.to_dict()["error_rate"], "0.00")

    def test_top_n(self):
        errors = [{"error_type": "omission", "word": w} for w in "a b c d e".split()]
        report = analyze_error_patterns(errors, top_n=2)
        self.assertEqual([row["word"] for row in report.common_error_words], ["a", "b"])

    def test_accepts_reading_errors(self):
        errors = detect_reading_errors("Max ran down the street", "Max ran the street")
        errors += detect_reading_errors("He saw many new things", "He sawed many new things")
        report = analyze_error_patterns(errors, total_words=10)
        self.assertEqual(
            {row["error_type"]: row["count"] for row in report.error_types},
            {"omission": 1, "mispronunciation": 1},
        )

    def test_high_error_rate_logged(self):
        with self.assertLogs("evaluation.error_analysis", level="WARNING"):
            analyze_error_patterns(STORED_ERRORS, total_words=10)

    def test_negative_total_words(self):
        with self.assertRaises(ValueError):
            analyze_error_patterns(STORED_ERRORS, total_words=-1)


class TestBenchmarkRunner(unittest.TestCase):
    """Detector runs over in-memory and on-disk datasets."""

    ITEMS = [
        {"id": "b", "passage": "Max ran down the street", "transcript": "Max ran the street"},
        {"id": "a", "original_text": "Max was a little brown puppy", "transcribed_text": "Max was a little brown puppy"},
        {"id": "s", "passage": "No transcript here", "transcript": ""},
    ]

    def test_run_items(self):
        report = run_benchmark_items(self.ITEMS)
        self.assertEqual(report.n_samples, 2)
        self.assertEqual(report.skipped, ["s"])
        by_id = {s["sample_id"]: s for s in report.samples}
        self.assertEqual(by_id["b"]["error_count"], 1)
        self.assertEqual(by_id["b"]["wer"], 0.2)
        self.assertEqual(by_id["a"]["error_count"], 0)
        self.assertEqual(report.patterns.n_errors, 1)
        self.assertEqual(report.patterns.total_words, 11)

    def test_run_from_file_and_write(self):
        with tempfile.TemporaryDirectory() as tmp:
            dataset = os.path.join(tmp, "readings.json")
            with open(dataset, "w", encoding="utf-8") as f:
                json.dump(self.ITEMS, f)
            report = run_benchmark(dataset, limit=1)
            self.assertEqual(report.n_samples, 1)

            out = os.path.join(tmp, "report.json")
            write_report(report, out)
            with open(out, "r", encoding="utf-8") as f:
                data = json.load(f)
            self.assertEqual(data["n_samples"], 1)
            self.assertEqual(data["patterns"]["n_errors"], 1)

    def test_passage_as_transcript(self):
        report = run_benchmark_items(self.ITEMS, passage_as_transcript=True)
        self.assertEqual(report.n_samples, 3)
        self.assertEqual(report.skipped, [])
        self.assertTrue(all(s["error_count"] == 0 for s in report.samples))
        self.assertEqual(report.patterns.n_errors, 0)

    def test_load_dataset_and_self_test_from_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            dataset = os.path.join(tmp, "readings.json")
            with open(dataset, "w", encoding="utf-8") as f:
                json.dump(self.ITEMS, f)
            self.assertEqual(len(load_dataset(dataset)), 3)
            self.assertEqual([item["id"] for item in load_dataset(dataset, limit=2)], ["b", "a"])
            report = run_benchmark(dataset, passage_as_transcript=True)
            self.assertEqual([s["sample_id"] for s in report.samples], ["b", "a", "s"])

    def test_dataset_must_be_list(self):
        with tempfile.TemporaryDirectory() as tmp:
            dataset = os.path.join(tmp, "bad.json")
            with open(dataset, "w", encoding="utf-8") as f:
                json.dump({"passage": "x"}, f)
            with self.assertRaises(ValueError):
                run_benchmark(dataset)


if __name__ == "__main__":
    unittest.main()
