"""
modules/validation/answer_validator.py
--------------------------------------
Per-step checks applied to questionnaire answers before the conversation
advances.

  place type : must mention one of PLACE_TYPES
  budget     : must contain an amount, e.g. 500, 30k, 30,000, 30000 INR, 30000 rs
  season     : must mention one of SEASONS (season or month name)
  source     : a known major city, or any answer of 3+ characters

All four reject blank answers and "don't know". The keyword lists are closed
on purpose; widening them changes which answers reach the generative model.

Usage:
    from modules.validation import validate_answer

    result = validate_answer("budget", "30k")
    if not result:
        print(result.errors[0])
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable

PLACE_TYPES: tuple[str, ...] = (
    "mountain", "beach", "historical", "city", "village", "adventure", "hill",
    "desert", "forest", "wildlife", "pilgrimage", "romantic", "urban", "fun",
    "honeymoon", "museum", "local", "educational",
)

SEASONS: tuple[str, ...] = (
    "summer", "winter", "monsoon", "spring", "autumn", "fall", "rainy",
    "january", "february", "march", "april", "may", "june", "july",
    "august", "september", "october", "november", "december",
)

MAJOR_CITIES: tuple[str, ...] = (
    "delhi", "mumbai", "kolkata", "chennai", "bangalore", "hyderabad",
    "ahmedabad", "pune", "jaipur", "lucknow", "kanpur", "nagpur", "indore",
    "thane", "bhopal",
)

BUDGET_PATTERN = re.compile(r"\b(\d+k|\d{1,3}(?:,\d{3})+|\d+)\s*(inr|rs)?\b")

_UNKNOWN_ANSWERS = frozenset({"don't know", "dont know"})

_MISSING_MESSAGES: dict[str, str] = {
    "place_type": "Please specify what kind of place you want to visit (Mountain, Beach, Historical, etc.).",
    "budget":     "Please provide a valid budget in INR.",
    "season":     "Please specify when you want to travel (month or season).",
    "source":     "Please specify where you will be traveling from.",
}


# ── Result dataclass ───────────────────────────────────────────────────────────

@dataclass
class ValidationResult:
    """
    Outcome of validating one answer.

    Attributes:
        valid:  True iff there are zero errors.
        errors: Corrective messages to send back to the user.
        value:  The answer as received.
    """
    valid: bool
    errors: list[str] = field(default_factory=list)
    value: str = ""

    def __bool__(self) -> bool:
        return self.valid


def _ok(value: str) -> ValidationResult:
    return ValidationResult(valid=True, value=value)


def _fail(value: str, message: str) -> ValidationResult:
    return ValidationResult(valid=False, errors=[message], value=value)


def _is_unanswered(value: str) -> bool:
    return not value.strip() or value.strip().lower() in _UNKNOWN_ANSWERS


# ── Field validators ───────────────────────────────────────────────────────────

def validate_place_type(value: str) -> ValidationResult:
    if _is_unanswered(value):
        return _fail(value, _MISSING_MESSAGES["place_type"])
    lowered = value.lower()
    if not any(kind in lowered for kind in PLACE_TYPES):
        return _fail(value, "Please specify a valid place type like Mountain, Beach, Historical, City, etc.")
    return _ok(value)


def validate_budget(value: str) -> ValidationResult:
    if _is_unanswered(value):
        return _fail(value, _MISSING_MESSAGES["budget"])
    if not BUDGET_PATTERN.search(value.lower()):
        return _fail(value, "Please provide a valid budget in INR format (e.g., 500, 30k, 30,000, 30000 INR).")
    return _ok(value)


def validate_season(value: str) -> ValidationResult:
    if _is_unanswered(value):
        return _fail(value, _MISSING_MESSAGES["season"])
    lowered = value.lower()
    if not any(season in lowered for season in SEASONS):
        return _fail(value, "Please specify a valid season or month (e.g., Summer, Winter, July, December).")
    return _ok(value)


def validate_source(value: str) -> ValidationResult:
    if _is_unanswered(value):
        return _fail(value, _MISSING_MESSAGES["source"])
    lowered = value.lower()
    # Unlisted cities are fine; only very short answers are refused.
    if not any(city in lowered for city in MAJOR_CITIES) and len(value) < 3:
        return _fail(value, "Please provide a valid city name you'll be traveling from.")
    return _ok(value)


VALIDATORS: dict[str, Callable[[str], ValidationResult]] = {
    "place_type": validate_place_type,
    "budget":     validate_budget,
    "season":     validate_season,
    "source":     validate_source,
}


def validate_answer(field_name: str, value: str) -> ValidationResult:
    return VALIDATORS[field_name](value)
