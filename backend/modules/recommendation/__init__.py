"""modules/recommendation — prompt construction and orchestration."""

from modules.recommendation.prompts import build_recommendation_prompt
from modules.recommendation.service import (
    RecommendationResult,
    RecommendationService,
    build_recommendation_service,
    generate_text,
)

__all__ = [
    "build_recommendation_prompt",
    "RecommendationResult",
    "RecommendationService",
    "build_recommendation_service",
    "generate_text",
]
