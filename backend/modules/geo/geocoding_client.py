"""
modules/geo/geocoding_client.py
-------------------------------
Single-place lookup against the OpenCage Geocoding API.

Endpoint:
    GET https://api.opencagedata.com/geocode/v1/json
        ?q=<place>, <state>, India&key={key}&limit=1&countrycode=in

Fails soft: returns None when the key is unset, the call errors, or no
result comes back. No caching, retry or rate limiting here; the extractor
bounds concurrency.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

import requests

import config
from schemas.recommendation import Coordinates

logger = logging.getLogger(__name__)


def build_query(place_name: str, state_name: str) -> str:
    return f"{place_name}, {state_name}, India"


class OpenCageGeocoder:
    """Best-match coordinates for one place name, scoped to India.

    geocode() runs on several worker threads at once; each thread gets its
    own requests.Session unless one is injected.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._api_key = config.OPENCAGE_API_KEY if api_key is None else api_key
        self._shared_session = session
        self._local = threading.local()

    def session(self) -> requests.Session:
        if self._shared_session is not None:
            return self._shared_session
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._local.session = requests.Session()
        return session

    def geocode(self, place_name: str, state_name: str) -> Optional[Coordinates]:
        if not self._api_key:
            logger.debug("OPENCAGE_API_KEY not configured; skipping geocode of %r", place_name)
            return None

        query = build_query(place_name, state_name)
        params = {
            "q": query,
            "key": self._api_key,
            "limit": 1,
            "countrycode": config.GEOCODING_COUNTRY_CODE,
        }
        try:
            res = self.session().get(
                config.OPENCAGE_GEOCODE_URL,
                params=params,
                timeout=config.GEOCODING_TIMEOUT_SECONDS,
            )
            res.raise_for_status()
            data = res.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Geocoding failed for %r: %s", query, exc)
            return None

        results = data.get("results") if isinstance(data, dict) else None
        if not results:
            logger.info("Geocoder found no coordinates for %r", query)
            return None

        try:
            geometry = results[0]["geometry"]
            return Coordinates(lat=float(geometry["lat"]), lng=float(geometry["lng"]))
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Unexpected geocoder payload for %r: %s", query, exc)
            return None
