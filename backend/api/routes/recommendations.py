"""
api/routes/recommendations.py
-----------------------------
POST /recommendations

Body {placeType, budget, season, source} → {recommendations, places}.

  400  any field missing or blank
  500  GEMINI_API_KEY unset, or every candidate model failed
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from modules.errors import SmartTourError
from modules.recommendation.service import build_recommendation_service
from schemas.recommendation import RecommendationRequest, RecommendationResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/recommendations",
    summary="Recommend five destinations and geocode them for the map",
    response_model=RecommendationResponse,
)
async def create_recommendations(req: Optional[RecommendationRequest] = None):
    prefs = (req or RecommendationRequest()).to_preferences()
    service = build_recommendation_service()

    try:
        result = await service.recommend(prefs)
    except SmartTourError:
        raise
    except Exception:
        logger.exception("Error generating recommendations")
        return JSONResponse(status_code=500, content={"error": "Failed to generate recommendations"})

    return result.to_response()
