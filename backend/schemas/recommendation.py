"""
schemas/recommendation.py
-------------------------
Data model for the recommendation pipeline.

  UserPreferences  — the four questionnaire answers, immutable once complete
  Place            — one geocoded destination shown on the map
  Coordinates      — (lat, lng) pair returned by the geocoder / gazetteer

Request bodies use the camelCase keys the web client sends
(``placeType``, ``budget``, ``season``, ``source``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from modules.errors import MissingParameter


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float


class Place(BaseModel):
    name: str
    state: str
    lat: float
    lng: float

    @classmethod
    def at(cls, name: str, state: str, coords: Coordinates) -> "Place":
        return cls(name=name, state=state, lat=coords.lat, lng=coords.lng)


class UserPreferences(BaseModel):
    model_config = ConfigDict(frozen=True)

    place_type: str
    budget: str        # free text, e.g. "30k"
    season: str
    source: str


# ── Request / Response schemas ─────────────────────────────────────────────────

class RecommendationRequest(BaseModel):
    placeType: Optional[str] = None
    budget:    Optional[str] = None
    season:    Optional[str] = None
    source:    Optional[str] = None

    def to_preferences(self) -> UserPreferences:
        """Raise MissingParameter for the first absent or blank field."""
        for field in ("placeType", "budget", "season", "source"):
            value = getattr(self, field)
            if value is None or not str(value).strip():
                raise MissingParameter(field)
        return UserPreferences(
            place_type=self.placeType,
            budget=self.budget,
            season=self.season,
            source=self.source,
        )


class RecommendationResponse(BaseModel):
    recommendations: str
    places: list[Place]


class GenerateRequest(BaseModel):
    prompt: Optional[str] = None


class GenerateResponse(BaseModel):
    response: str


class MapRequest(BaseModel):
    places: list[Place] = Field(default_factory=list)
    interactive: bool = True


class ChatRequest(BaseModel):
    session_id: Optional[str] = None
    message: str = ""


class ChatResponse(BaseModel):
    session_id: str
    state: str
    messages: list[str]
    places: list[Place] = Field(default_factory=list)
    recommendations: Optional[str] = None
