"""
test_place_extractor.py
-----------------------
Geocoder → gazetteer resolution order and the default place list.
"""

from __future__ import annotations

import asyncio

from conftest import FakeGeocoder
from modules.extraction.place_extractor import (
    DEFAULT_PLACES,
    ERROR,
    NO_PLACES,
    PlaceExtractor,
    extract_places,
)
from modules.geo import gazetteer
from schemas.recommendation import Coordinates

DEFAULT_NAMES = ["Manali", "Shimla", "Darjeeling", "Goa", "Jaipur"]


def _extract(text, geocoder, **kwargs):
    return asyncio.run(PlaceExtractor(geocoder, **kwargs).extract(text))


def test_geocoder_coordinates_win_over_gazetteer():
    live = Coordinates(32.25, 77.19)
    geocoder = FakeGeocoder({"Manali": live})

    result = _extract("1. Himachal Pradesh (Manali)", geocoder)

    assert not result.degraded
    assert (result.places[0].lat, result.places[0].lng) == (live.lat, live.lng)
    assert gazetteer.lookup("Manali") != live


def test_gazetteer_used_only_when_geocoder_has_nothing():
    consulted = []

    def fallback(name):
        consulted.append(name)
        return gazetteer.lookup(name)

    geocoder = FakeGeocoder({"Manali": Coordinates(32.25, 77.19)})
    result = _extract("1. Himachal Pradesh (Manali, Kasol)", geocoder, fallback=fallback)

    assert consulted == ["Kasol"]
    kasol = result.places[1]
    assert kasol.name == "Kasol"
    assert kasol.state == "Himachal Pradesh"
    assert (kasol.lat, kasol.lng) == (32.01, 77.3152)


def test_unresolvable_names_are_dropped():
    result = _extract("1. Nowhere (Atlantis, Goa)", FakeGeocoder())
    assert [p.name for p in result.places] == ["Goa"]
    assert result.candidates == 2


def test_input_order_and_duplicates_survive_parallel_lookup(beach_text):
    # Gokarna and the Andaman islands are not in the gazetteer
    geocoder = FakeGeocoder({
        "Gokarna": Coordinates(14.55, 74.32),
        "Port Blair": Coordinates(11.62, 92.73),
        "Havelock": Coordinates(11.97, 92.99),
    })
    result = _extract(beach_text, geocoder, max_concurrency=2)

    assert [p.name for p in result.places] == [
        "Palolem", "Anjuna", "Baga", "Varkala", "Kovalam",
        "Pondicherry", "Gokarna", "Port Blair", "Havelock",
    ]
    assert len(geocoder.calls) == 9

    twice = _extract("1. Goa (Baga)\n2. Goa (Baga)", FakeGeocoder())
    assert [p.name for p in twice.places] == ["Baga", "Baga"]


def test_no_headers_degrades_to_defaults():
    result = _extract("Sorry, I cannot help with that.", FakeGeocoder())
    assert result.degraded
    assert result.failure.reason == NO_PLACES
    assert [p.name for p in result.places_or_default()] == DEFAULT_NAMES


def test_geocoder_exception_only_affects_that_place():
    geocoder = FakeGeocoder(
        {"Palolem": Coordinates(15.0, 74.0)},
        error=ConnectionResetError("connection reset"),
        fail_on=("Anjuna",),
    )
    result = _extract("1. Goa (Palolem, Anjuna, Baga)\n2. Kerala (Varkala)", geocoder)

    assert not result.degraded
    assert [p.name for p in result.places] == ["Palolem", "Anjuna", "Baga", "Varkala"]
    assert (result.places[0].lat, result.places[0].lng) == (15.0, 74.0)
    anjuna = gazetteer.lookup("Anjuna")
    assert (result.places[1].lat, result.places[1].lng) == (anjuna.lat, anjuna.lng)


def test_geocoder_failing_everywhere_still_uses_gazetteer():
    result = _extract("1. Goa (Baga, Atlantis)", FakeGeocoder(error=RuntimeError("socket closed")))
    assert [p.name for p in result.places] == ["Baga"]


def test_unexpected_fallback_error_degrades_to_defaults():
    def broken(name):
        raise RuntimeError("table unavailable")

    result = _extract("1. Goa (Baga)", FakeGeocoder(), fallback=broken)
    assert result.failure.reason == ERROR
    assert "table unavailable" in result.failure.detail
    assert [p.name for p in result.places_or_default()] == DEFAULT_NAMES


def test_extract_places_is_never_empty():
    for text in ("", "plain prose", "1. Nowhere (Atlantis)"):
        places = extract_places(text, FakeGeocoder())
        assert places
        assert [p.name for p in places] == DEFAULT_NAMES


def test_default_copies_do_not_alias_the_constant():
    places = extract_places("", FakeGeocoder())
    places[0].name = "Changed"
    assert DEFAULT_PLACES[0].name == "Manali"
