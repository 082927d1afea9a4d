"""
test_parser.py
--------------
Header detection, parenthetical precedence and separator handling for
modules/extraction/parser.py.
"""

from __future__ import annotations

import pytest

from modules.extraction.parser import (
    COUNTRY_STATE,
    UNKNOWN_STATE,
    PlaceCandidate,
    is_destination_header,
    iter_candidates,
    normalize_name,
    split_header,
    split_place_names,
)


# ── Header detection ──────────────────────────────────────────────────────────

@pytest.mark.parametrize("line", [
    "1. Goa (Palolem)",
    "  12. Kerala",
    "3.Rajasthan (Jaipur)",
])
def test_numbered_lines_are_headers(line):
    assert is_destination_header(line)


@pytest.mark.parametrize("line", [
    "• Special: 1. not a header",
    "Goa (Palolem)",
    "**1. Goa**",
    "1 Goa",
    "",
])
def test_other_lines_are_not_headers(line):
    assert not is_destination_header(line)


# ── Separator normalization ───────────────────────────────────────────────────

def test_mixed_separators_split_into_four_names():
    assert split_place_names("Places A, Places B & Places C and Places D") == [
        "Places A", "Places B", "Places C", "Places D",
    ]


def test_and_inside_a_word_is_not_a_separator():
    assert split_place_names("Chandigarh, Anandpur Sahib") == ["Chandigarh", "Anandpur Sahib"]


def test_star_separator_and_nested_qualifiers():
    assert split_place_names("North Goa (Baga (beach)) * Panaji") == ["North Goa", "Panaji"]


def test_empty_fragments_are_dropped():
    assert split_place_names(" , & and ,Manali,, ") == ["Manali"]


def test_normalize_name_strips_markdown_and_whitespace():
    assert normalize_name("  **Munnar**:  ") == "Munnar"
    assert normalize_name("Port   Blair") == "Port Blair"


# ── Header splitting ──────────────────────────────────────────────────────────

def test_places_come_only_from_inside_the_parentheses():
    header = split_header("1. Goa Beaches (Palolem and Anjuna)")
    assert header.state == "Goa Beaches"
    assert header.place_names == ["Palolem", "Anjuna"]
    assert not header.standalone


def test_state_keeps_words_that_look_like_separators():
    header = split_header("5. Andaman and Nicobar Islands (Port Blair & Havelock)")
    assert header.state == "Andaman and Nicobar Islands"
    assert header.place_names == ["Port Blair", "Havelock"]


def test_markdown_around_the_state_is_removed():
    header = split_header("2. **Kerala** (Munnar, Alleppey)")
    assert header.state == "Kerala"
    assert header.place_names == ["Munnar", "Alleppey"]


def test_empty_state_becomes_unknown():
    header = split_header("4. (Hampi)")
    assert header.state == UNKNOWN_STATE
    assert header.place_names == ["Hampi"]


def test_unclosed_group_runs_to_end_of_line():
    header = split_header("3. Rajasthan (Jaipur, Udaipur")
    assert header.place_names == ["Jaipur", "Udaipur"]


def test_header_without_parentheses_is_a_standalone_place():
    header = split_header("2. Goa, a beach paradise")
    assert header.standalone
    assert header.state == COUNTRY_STATE
    assert header.place_names == ["Goa"]


# ── Full text ─────────────────────────────────────────────────────────────────

def test_iter_candidates_reads_every_header_in_order(beach_text):
    candidates = iter_candidates(beach_text)
    assert [c.name for c in candidates] == [
        "Palolem", "Anjuna", "Baga",
        "Varkala", "Kovalam",
        "Pondicherry",
        "Gokarna",
        "Port Blair", "Havelock",
    ]
    assert candidates[0] == PlaceCandidate("Palolem", "Goa")
    assert candidates[-1].state == "Andaman and Nicobar Islands"


def test_duplicates_are_kept():
    text = "1. Goa (Baga)\n2. Goa (Baga)"
    assert len(iter_candidates(text)) == 2


def test_text_without_headers_yields_nothing():
    assert iter_candidates("No numbered lines here.\n• Just bullets") == []
    assert iter_candidates("") == []
