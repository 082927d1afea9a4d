"""
conftest.py
-----------
Shared fixtures. No test contacts Gemini or OpenCage; the pipeline event
log is switched off unless a test turns it back on.
"""

from __future__ import annotations

from typing import Optional

import pytest

import config
from schemas.recommendation import Coordinates

BEACH_RECOMMENDATIONS = """\
Here are five winter beach escapes reachable from Delhi on a 30k budget.

1. Goa (Palolem, Anjuna & Baga)
• Special: Golden sands and a relaxed shack culture.
• Attractions: Chapora Fort, Saturday night market.

2. Kerala (Varkala and Kovalam)
• Special: Cliff-top beaches along the Arabian Sea.

3. Puducherry (Pondicherry)
• Special: French quarter promenade.

4. Karnataka (Gokarna)
• Special: Quieter alternative to Goa.

5. Andaman and Nicobar Islands (Port Blair * Havelock)
• Special: Coral reefs and clear water.

• Budget Breakdown (Approximate for 7 Days): Transportation 10k, Accommodation 12k.
"""


class FakeGeocoder:
    """Answers from a fixed table; records every lookup in call order."""

    def __init__(
        self,
        known: Optional[dict[str, Coordinates]] = None,
        error: Optional[Exception] = None,
        fail_on: tuple[str, ...] = (),
    ):
        self.known = known or {}
        self.error = error
        self.fail_on = fail_on
        self.calls: list[tuple[str, str]] = []

    def geocode(self, place_name: str, state_name: str) -> Optional[Coordinates]:
        self.calls.append((place_name, state_name))
        if self.error is not None and (not self.fail_on or place_name in self.fail_on):
            raise self.error
        return self.known.get(place_name)


@pytest.fixture(autouse=True)
def _no_pipeline_log(monkeypatch):
    monkeypatch.setattr(config, "PIPELINE_LOG_ENABLED", False)


@pytest.fixture
def beach_text() -> str:
    return BEACH_RECOMMENDATIONS
