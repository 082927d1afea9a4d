"""
config.py
---------
Central configuration for the Smart Tour backend.
All secrets loaded from environment variables — never hard-coded.

Consumers read ``config.NAME`` at call time (not ``from config import NAME``)
so tests and the CLI can override values after import.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

_BACKEND_DIR = Path(__file__).resolve().parent

# Load .env from the backend directory (if it exists) so env vars in that file
# are picked up by os.getenv() below.  Won't override vars already set in the shell.
_env_path = _BACKEND_DIR / ".env"
if _env_path.exists():
    load_dotenv(_env_path, override=False)


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


def _csv(name: str, default: str) -> list[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


# ── Gemini (generative language API) ──────────────────────────────────────────
# Obtain at: https://aistudio.google.com/app/apikey
# Unset → /recommendations and /generate answer HTTP 500 (ConfigurationError).
GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")

# Candidate model list, tried in order until one answers.
GEMINI_MODELS: list[str] = _csv("GEMINI_MODELS", "gemini-2.0-flash")

# Attach the Google Search grounding tool to recommendation calls.
GEMINI_SEARCH_GROUNDING: bool = _flag("GEMINI_SEARCH_GROUNDING", "true")

GEMINI_TEMPERATURE: float = float(os.getenv("GEMINI_TEMPERATURE", "0.7"))
GEMINI_TOP_K: int         = int(os.getenv("GEMINI_TOP_K", "40"))
GEMINI_TOP_P: float       = float(os.getenv("GEMINI_TOP_P", "0.95"))

RECOMMENDATION_MAX_OUTPUT_TOKENS: int = int(os.getenv("RECOMMENDATION_MAX_OUTPUT_TOKENS", "4096"))
GENERATE_MAX_OUTPUT_TOKENS: int       = int(os.getenv("GENERATE_MAX_OUTPUT_TOKENS", "2048"))

LLM_TIMEOUT_SECONDS: int = int(os.getenv("LLM_TIMEOUT_SECONDS", "60"))

# ── OpenCage Geocoding API ────────────────────────────────────────────────────
# Obtain at: https://opencagedata.com/dashboard
# Unset → every lookup goes straight to the fallback gazetteer.
OPENCAGE_API_KEY: str       = os.getenv("OPENCAGE_API_KEY", "")
OPENCAGE_GEOCODE_URL: str   = os.getenv("OPENCAGE_GEOCODE_URL", "https://api.opencagedata.com/geocode/v1/json")
GEOCODING_COUNTRY_CODE: str = os.getenv("GEOCODING_COUNTRY_CODE", "in")
GEOCODING_TIMEOUT_SECONDS: float = float(os.getenv("GEOCODING_TIMEOUT_SECONDS", "10"))
GEOCODING_MAX_CONCURRENCY: int   = int(os.getenv("GEOCODING_MAX_CONCURRENCY", "5"))

# ── Brochure download ─────────────────────────────────────────────────────────
PDF_PATH: Path          = Path(os.getenv("PDF_PATH", str(_BACKEND_DIR / "public" / "Smart-Tour.pdf")))
PDF_DOWNLOAD_NAME: str  = os.getenv("PDF_DOWNLOAD_NAME", "smarttourdoc.pdf")

# ── Logging ───────────────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# JSONL pipeline event log (one file per day under PIPELINE_LOG_DIR)
PIPELINE_LOG_ENABLED: bool = _flag("PIPELINE_LOG_ENABLED", "true")
PIPELINE_LOG_DIR: Path     = Path(os.getenv("PIPELINE_LOG_DIR", str(_BACKEND_DIR / "logs")))

# ── HTTP ──────────────────────────────────────────────────────────────────────
CORS_ALLOW_ORIGINS: list[str] = _csv("CORS_ALLOW_ORIGINS", "*")
