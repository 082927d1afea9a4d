"""
modules/extraction/parser.py
----------------------------
Turns the generative model's free-text answer into place-name candidates.

The model is asked for headers shaped like

    1. Himachal Pradesh (Manali, Kasol & Spiti)

and every stage below handles one step of reading them:

  is_destination_header  — line classifier   (``^<int>.``)
  split_header           — header splitter   (state / parenthesised places)
  split_place_names      — separator tokenizer (``,`` ``&`` ``and`` ``*``)
  normalize_name         — trims whitespace and stray markdown from a name

Nothing here raises on odd formatting; unmatched input yields fewer
candidates.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional

UNKNOWN_STATE = "Unknown"
COUNTRY_STATE = "India"

_HEADER_RE = re.compile(r"^\d+\.")
_NUMBER_PREFIX_RE = re.compile(r"^\d+\.\s*")
_INNER_PARENS_RE = re.compile(r"\([^()]*\)")
_STAR_RE = re.compile(r"\s*\*\s*")
_SEPARATOR_RE = re.compile(r"\s*(?:,|&|\band\b)\s*", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")
_EDGE_CHARS = " \t*:;-–—.•_"


@dataclass
class DestinationHeader:
    state: str
    place_names: list[str] = field(default_factory=list)
    standalone: bool = False     # no parenthesised list; the header itself is the place


@dataclass(frozen=True)
class PlaceCandidate:
    name: str
    state: str


def is_destination_header(line: str) -> bool:
    return bool(_HEADER_RE.match(line.strip()))


def normalize_name(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip(_EDGE_CHARS)


def split_place_names(text: str) -> list[str]:
    """
    "Places A, Places B & Places C and Places D"
        → ["Places A", "Places B", "Places C", "Places D"]
    """
    # (India), (North Goa) ... nested qualifiers are dropped, innermost first
    previous = None
    while previous != text:
        previous = text
        text = _INNER_PARENS_RE.sub("", text)
    text = _STAR_RE.sub(", ", text)

    names = (normalize_name(part) for part in _SEPARATOR_RE.split(text))
    return [name for name in names if name]


def _first_group_span(text: str) -> Optional[tuple[int, int]]:
    """Span of the first balanced (...) group; an unclosed group runs to the end."""
    start = text.find("(")
    if start < 0:
        return None
    depth = 0
    for idx in range(start, len(text)):
        if text[idx] == "(":
            depth += 1
        elif text[idx] == ")":
            depth -= 1
            if depth == 0:
                return start, idx
    return start, len(text)


def split_header(line: str) -> DestinationHeader:
    body = _NUMBER_PREFIX_RE.sub("", line.strip(), count=1)

    span = _first_group_span(body)
    if span is not None:
        start, end = span
        state = normalize_name(body[:start]) or UNKNOWN_STATE
        return DestinationHeader(state=state, place_names=split_place_names(body[start + 1:end]))

    name = normalize_name(body.split(",", 1)[0])
    return DestinationHeader(
        state=COUNTRY_STATE,
        place_names=[name] if name else [],
        standalone=True,
    )


def iter_candidates(text: str) -> list[PlaceCandidate]:
    """All place candidates in first-seen order; duplicates are kept."""
    candidates: list[PlaceCandidate] = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line or not is_destination_header(line):
            continue
        header = split_header(line)
        candidates.extend(PlaceCandidate(name, header.state) for name in header.place_names)
    return candidates
