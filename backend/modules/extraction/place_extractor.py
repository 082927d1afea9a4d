"""
modules/extraction/place_extractor.py
-------------------------------------
Resolves parsed place candidates to coordinates.

Resolution order per candidate:
  1. live geocoder  (OpenCageGeocoder.geocode); an exception here only
     sends that one name on to the gazetteer
  2. fallback gazetteer  (exact, case-insensitive)
  3. dropped — logged, never an error

Candidates are independent, so each one is resolved in its own task
(blocking geocoder calls run via asyncio.to_thread) and gathered back in
input order. The outcome is an ExtractionResult; callers decide whether the
DEFAULT_PLACES substitute applies via ``places_or_default()``.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol

import config
from modules.extraction.parser import PlaceCandidate, iter_candidates
from modules.geo import gazetteer
from modules.geo.geocoding_client import OpenCageGeocoder
from schemas.recommendation import Coordinates, Place

logger = logging.getLogger(__name__)

# Shown whenever nothing could be resolved, so the map is never empty.
DEFAULT_PLACES: tuple[Place, ...] = (
    Place(name="Manali",     state="Himachal Pradesh", lat=32.2432, lng=77.1892),
    Place(name="Shimla",     state="Himachal Pradesh", lat=31.1048, lng=77.1734),
    Place(name="Darjeeling", state="West Bengal",      lat=27.041,  lng=88.2663),
    Place(name="Goa",        state="Goa",              lat=15.2993, lng=73.9322),
    Place(name="Jaipur",     state="Rajasthan",        lat=26.9124, lng=75.7873),
)

NO_PLACES = "no_places"
ERROR = "error"


class Geocoder(Protocol):
    def geocode(self, place_name: str, state_name: str) -> Optional[Coordinates]: ...


@dataclass
class ExtractionFailure:
    reason: str          # NO_PLACES | ERROR
    detail: str = ""


@dataclass
class ExtractionResult:
    places: list[Place] = field(default_factory=list)
    failure: Optional[ExtractionFailure] = None
    candidates: int = 0

    @property
    def degraded(self) -> bool:
        return self.failure is not None

    def places_or_default(self) -> list[Place]:
        if self.degraded:
            return [place.model_copy() for place in DEFAULT_PLACES]
        return list(self.places)


class PlaceExtractor:
    def __init__(
        self,
        geocoder: Geocoder,
        fallback: Callable[[str], Optional[Coordinates]] = gazetteer.lookup,
        max_concurrency: Optional[int] = None,
    ) -> None:
        self._geocoder = geocoder
        self._fallback = fallback
        self._max_concurrency = max_concurrency or config.GEOCODING_MAX_CONCURRENCY

    async def extract(self, text: str) -> ExtractionResult:
        try:
            candidates = iter_candidates(text or "")
            gate = asyncio.Semaphore(max(1, self._max_concurrency))
            resolved = await asyncio.gather(
                *(self._resolve(candidate, gate) for candidate in candidates)
            )
        except Exception as exc:
            logger.exception("Place extraction failed")
            return ExtractionResult(failure=ExtractionFailure(ERROR, str(exc)))

        places = [place for place in resolved if place is not None]
        logger.info("Resolved %d of %d extracted place names", len(places), len(candidates))
        if not places:
            return ExtractionResult(
                failure=ExtractionFailure(NO_PLACES, f"{len(candidates)} candidates, none resolved"),
                candidates=len(candidates),
            )
        return ExtractionResult(places=places, candidates=len(candidates))

    async def _resolve(self, candidate: PlaceCandidate, gate: asyncio.Semaphore) -> Optional[Place]:
        try:
            async with gate:
                coords = await asyncio.to_thread(self._geocoder.geocode, candidate.name, candidate.state)
        except Exception as exc:
            logger.warning("Error geocoding %r: %s", candidate.name, exc)
            coords = None
        if coords is not None:
            return Place.at(candidate.name, candidate.state, coords)

        coords = self._fallback(candidate.name)
        if coords is not None:
            logger.debug("Fallback coordinates used for %r", candidate.name)
            return Place.at(candidate.name, candidate.state, coords)

        logger.info("No coordinates for %r in %r; dropped", candidate.name, candidate.state)
        return None


def extract_places(text: str, geocoder: Optional[Geocoder] = None) -> list[Place]:
    """Synchronous helper: parsed places, or DEFAULT_PLACES when none resolve."""
    return asyncio.run(PlaceExtractor(geocoder or OpenCageGeocoder()).extract(text)).places_or_default()
