"""
modules/validation package — per-step checks on questionnaire answers.
"""
from modules.validation.answer_validator import (
    ValidationResult,
    validate_place_type,
    validate_budget,
    validate_season,
    validate_source,
    validate_answer,
)

__all__ = [
    "ValidationResult",
    "validate_place_type",
    "validate_budget",
    "validate_season",
    "validate_source",
    "validate_answer",
]
