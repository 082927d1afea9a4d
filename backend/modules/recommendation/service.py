"""
modules/recommendation/service.py
---------------------------------
Recommendation orchestrator.

  UserPreferences → prompt → Gemini (candidate models) → PlaceExtractor
                  → RecommendationResult(recommendations, places, degraded)

The extractor reports a typed ExtractionResult; it is converted to the
default place list here, so ``degraded`` tells callers (and tests) whether the
places were parsed or substituted.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Optional

import config
from llm import GeminiClient
from modules.extraction.place_extractor import PlaceExtractor
from modules.geo.geocoding_client import OpenCageGeocoder
from modules.observability.logger import PipelineEventLog, new_request_id
from modules.recommendation.prompts import build_recommendation_prompt
from schemas.recommendation import Place, UserPreferences

logger = logging.getLogger(__name__)


@dataclass
class RecommendationResult:
    recommendations: str
    places: list[Place] = field(default_factory=list)
    degraded: bool = False       # True when places are the default substitute

    def to_response(self) -> dict:
        return {
            "recommendations": self.recommendations,
            "places": [place.model_dump() for place in self.places],
        }


class RecommendationService:
    def __init__(
        self,
        llm_client: GeminiClient,
        extractor: PlaceExtractor,
        events: Optional[PipelineEventLog] = None,
    ) -> None:
        self._llm = llm_client
        self._extractor = extractor
        self._events = events or PipelineEventLog()

    async def recommend(self, prefs: UserPreferences) -> RecommendationResult:
        request_id = new_request_id()
        self._events.record(request_id, "recommendation_requested", prefs.model_dump())

        def model_failed(model: str, exc: Exception) -> None:
            self._events.record(request_id, "model_failed", {"model": model, "error": str(exc)})

        prompt = build_recommendation_prompt(prefs)
        try:
            text = await asyncio.to_thread(
                self._llm.generate,
                prompt,
                max_output_tokens=config.RECOMMENDATION_MAX_OUTPUT_TOKENS,
                use_search=config.GEMINI_SEARCH_GROUNDING,
                on_model_failure=model_failed,
            )
        except Exception as exc:
            self._events.record(request_id, "generation_failed", {"error": str(exc)})
            raise
        self._events.record(request_id, "recommendation_generated", {"chars": len(text), "text": text})

        extraction = await self._extractor.extract(text)
        if extraction.degraded:
            logger.warning(
                "Extraction degraded to default places (%s: %s)",
                extraction.failure.reason, extraction.failure.detail,
            )
        places = extraction.places_or_default()
        self._events.record(request_id, "extraction_completed", {
            "candidates": extraction.candidates,
            "places": len(places),
            "degraded": extraction.degraded,
            "failure": extraction.failure.reason if extraction.failure else None,
        })
        return RecommendationResult(recommendations=text, places=places, degraded=extraction.degraded)


def build_recommendation_service() -> RecommendationService:
    """Production wiring; raises ConfigurationError when GEMINI_API_KEY is unset."""
    return RecommendationService(
        llm_client=GeminiClient(),
        extractor=PlaceExtractor(OpenCageGeocoder()),
    )


def generate_text(prompt: str, llm_client: Optional[GeminiClient] = None) -> str:
    """Plain completion for POST /generate (no search tool)."""
    client = llm_client or GeminiClient()
    return client.generate(prompt, max_output_tokens=config.GENERATE_MAX_OUTPUT_TOKENS)
