"""
Production configuration via environment variables.
Load with python-dotenv; no hardcoded secrets.
"""
import os

from dotenv import load_dotenv

# Load .env if present (in production the orchestrator sets the env)
load_dotenv()

# ----- Server -----
PORT = int(os.environ.get("PORT", "8001"))
HOST = os.environ.get("HOST", "0.0.0.0")

# ----- Logging -----
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# ----- Reading attempts -----
# Characters shown on each side of an error in the review flow
REVIEW_CONTEXT_RADIUS = int(os.environ.get("REVIEW_CONTEXT_RADIUS", "30"))
# Length of the timed reading; elapsed time = limit - seconds left on the timer
READING_TIME_LIMIT_SECONDS = int(os.environ.get("READING_TIME_LIMIT_SECONDS", "60"))

# ----- CORS (production: set to specific origins) -----
CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")
def get_cors_origins() -> list:
    """Return list of allowed CORS origins from env."""
    if CORS_ORIGINS == "*":
        return ["*"]
    return [o.strip() for o in CORS_ORIGINS.split(",") if o.strip()]
