"""
test_geo.py
-----------
Fallback gazetteer lookups and the OpenCage client's soft failures.
All HTTP goes through a mocked requests.Session.
"""

from __future__ import annotations

import threading
from unittest.mock import MagicMock

import pytest
import requests

import config
from modules.geo import FALLBACK_COORDINATES, OpenCageGeocoder, lookup, normalize_key
from modules.geo.geocoding_client import build_query
from schemas.recommendation import Coordinates


# ── Gazetteer ─────────────────────────────────────────────────────────────────

def test_lookup_ignores_case_and_surrounding_whitespace():
    assert lookup("  MANALI ") == Coordinates(32.2432, 77.1892)
    assert normalize_key(" Port Blair ") == "port blair"


def test_lookup_is_exact_match_only():
    assert lookup("Manali Town") is None
    assert lookup("manal") is None


def test_gazetteer_is_read_only():
    with pytest.raises(TypeError):
        FALLBACK_COORDINATES["atlantis"] = Coordinates(0.0, 0.0)


# ── OpenCage client ───────────────────────────────────────────────────────────

def _session(payload=None, *, error=None, json_error=None):
    session = MagicMock(spec=requests.Session)
    if error is not None:
        session.get.side_effect = error
        return session
    response = MagicMock()
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    session.get.return_value = response
    return session


def test_geocode_returns_first_result():
    session = _session({"results": [{"geometry": {"lat": 15.01, "lng": 74.02}}]})
    coords = OpenCageGeocoder(api_key="k", session=session).geocode("Palolem", "Goa")

    assert coords == Coordinates(15.01, 74.02)
    _, kwargs = session.get.call_args
    assert kwargs["params"]["q"] == "Palolem, Goa, India"
    assert kwargs["params"]["key"] == "k"
    assert kwargs["params"]["limit"] == 1
    assert kwargs["params"]["countrycode"] == config.GEOCODING_COUNTRY_CODE
    assert kwargs["timeout"] == config.GEOCODING_TIMEOUT_SECONDS


def test_missing_key_skips_the_call(monkeypatch):
    monkeypatch.setattr(config, "OPENCAGE_API_KEY", "")
    session = _session()
    assert OpenCageGeocoder(session=session).geocode("Goa", "Goa") is None
    session.get.assert_not_called()


@pytest.mark.parametrize("session", [
    _session(error=requests.ConnectionError("refused")),
    _session(error=requests.Timeout("slow")),
    _session(json_error=ValueError("not json")),
    _session({"results": []}),
    _session({"status": {"code": 402}}),
    _session({"results": [{"geometry": {"lat": "north"}}]}),
])
def test_failures_return_none(session):
    assert OpenCageGeocoder(api_key="k", session=session).geocode("Goa", "Goa") is None


def test_http_error_status_returns_none():
    session = _session({})
    session.get.return_value.raise_for_status.side_effect = requests.HTTPError("401")
    assert OpenCageGeocoder(api_key="k", session=session).geocode("Goa", "Goa") is None


def test_build_query():
    assert build_query("Gokarna", "Karnataka") == "Gokarna, Karnataka, India"


def test_each_worker_thread_gets_its_own_session():
    geocoder = OpenCageGeocoder(api_key="k")
    seen = {}

    def grab(slot):
        seen[slot] = (geocoder.session(), geocoder.session())

    threads = [threading.Thread(target=grab, args=(i,)) for i in range(2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert seen[0][0] is seen[0][1]
    assert seen[0][0] is not seen[1][0]


def test_injected_session_is_shared():
    session = _session()
    geocoder = OpenCageGeocoder(api_key="k", session=session)
    assert geocoder.session() is session
