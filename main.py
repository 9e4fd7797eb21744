"""
Reading practice analysis API.
Takes a passage and the speech-to-text transcript of a child reading it, and returns
the word-level reading errors, words-correct-per-minute and review items.
Transcription happens upstream; this service only sees text.
"""
import logging
import time
from typing import Any, Dict, List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

import config
from core.reading_errors import detect_reading_errors
from core.scoring import analyze_reading
from evaluation.error_analysis import analyze_error_patterns
from metrics.analysis_metrics import get_snapshot, record_analysis, record_rejected

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Reading Practice Analysis API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ReadingAttempt(BaseModel):
    original_text: str
    transcribed_text: Optional[str] = None


class TimedReadingAttempt(ReadingAttempt):
    elapsed_seconds: Optional[float] = Field(default=None, ge=0)
    # alternative to elapsed_seconds: what the countdown showed when the reader stopped
    seconds_remaining: Optional[float] = Field(default=None, ge=0)
    previous_wcpm: Optional[int] = None


class StoredError(BaseModel):
    error_type: str
    word: Optional[str] = None


class ErrorPatternRequest(BaseModel):
    errors: List[StoredError]
    total_words: int = Field(default=0, ge=0)


def _require_transcript(attempt: ReadingAttempt) -> str:
    """A missing transcript means the attempt cannot be scored; never analyze a placeholder."""
    if not attempt.transcribed_text or not attempt.transcribed_text.strip():
        record_rejected()
        raise HTTPException(
            status_code=422,
            detail="No transcript for this attempt; cannot compute reading errors.",
        )
    return attempt.transcribed_text


def _elapsed_seconds(attempt: TimedReadingAttempt) -> Optional[float]:
    if attempt.elapsed_seconds is not None:
        return attempt.elapsed_seconds
    if attempt.seconds_remaining is not None:
        return max(0.0, config.READING_TIME_LIMIT_SECONDS - attempt.seconds_remaining)
    return None


@app.get("/")
def health_check():
    return {
        "status": "ok",
        "message": "Reading Practice Analysis API is running",
    }


@app.post("/reading/errors")
def reading_errors(attempt: ReadingAttempt) -> Dict[str, Any]:
    transcript = _require_transcript(attempt)
    started = time.perf_counter()
    errors = detect_reading_errors(attempt.original_text, transcript)
    record_analysis((time.perf_counter() - started) * 1000, len(errors))
    return {"errors": [e.to_dict() for e in errors]}


@app.post("/reading/analyze")
def reading_analyze(attempt: TimedReadingAttempt) -> Dict[str, Any]:
    transcript = _require_transcript(attempt)
    started = time.perf_counter()
    result = analyze_reading(
        attempt.original_text,
        transcript,
        elapsed_seconds=_elapsed_seconds(attempt),
        previous_wcpm=attempt.previous_wcpm,
        context_radius=config.REVIEW_CONTEXT_RADIUS,
    )
    record_analysis((time.perf_counter() - started) * 1000, result["error_count"])
    logger.info(
        "Analyzed attempt: %d words, %d errors, wcpm=%s",
        result["total_words"], result["error_count"], result["wcpm"],
    )
    return result


@app.post("/reading/error-patterns")
def error_patterns(request: ErrorPatternRequest) -> Dict[str, Any]:
    report = analyze_error_patterns(
        [e.model_dump() for e in request.errors],
        total_words=request.total_words,
    )
    return report.to_dict()


@app.get("/metrics/analysis", include_in_schema=False)
def metrics_analysis():
    """JSON snapshot: analyses_total, rejected_total, errors_total, avg_latency_ms, p95_latency_ms."""
    return get_snapshot()


if __name__ == "__main__":
    uvicorn.run(app, host=config.HOST, port=config.PORT)
