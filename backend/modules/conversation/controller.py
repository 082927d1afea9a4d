"""
modules/conversation/controller.py
----------------------------------
Four-question chat flow that collects UserPreferences and asks for
recommendations.

    ASK_PLACE_TYPE → ASK_BUDGET → ASK_SEASON → ASK_SOURCE
        → AWAITING_RECOMMENDATION → ASK_MORE_RECOMMENDATIONS → (restart | END)

Each ASK_* step validates the answer (modules/validation) and re-asks with
a corrective message until it passes; there is no retry limit. A failed
recommendation call returns the flow to ASK_SOURCE with the earlier answers
kept, so sending the origin again retries. END accepts no further input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Awaitable, Callable, Optional, Protocol

from modules.errors import SmartTourError
from modules.validation import validate_answer
from schemas.recommendation import Place, UserPreferences

logger = logging.getLogger(__name__)


class ConversationState(str, Enum):
    ASK_PLACE_TYPE = "ask_place_type"
    ASK_BUDGET = "ask_budget"
    ASK_SEASON = "ask_season"
    ASK_SOURCE = "ask_source"
    AWAITING_RECOMMENDATION = "awaiting_recommendation"
    ASK_MORE_RECOMMENDATIONS = "ask_more_recommendations"
    END = "end"


QUESTIONS: dict[ConversationState, str] = {
    ConversationState.ASK_PLACE_TYPE: "What kind of place do you want to visit? Mountain, Beach, Historical, City, Village, etc.",
    ConversationState.ASK_BUDGET: "What is your budget in INR? Example: 30k",
    ConversationState.ASK_SEASON: "What month or season do you want to visit in? Example July or Monsoon",
    ConversationState.ASK_SOURCE: "Where will you be travelling from?",
}

GREETING = "👋 Hi! I'm your Smart Tour travel guide! "
ASK_MORE = "Do you need more recommendations? (yes/no)"
RECOMMENDATION_FAILED = (
    "I'm having trouble connecting to my travel database right now. "
    "Please try again in a few moments."
)
CLOSING = (
    "Thank you for using Smart Tour! I hope you found the recommendations helpful. "
    "Feel free to come back anytime you're planning your next adventure!"
)

# state → (answer field, next state)
_STEPS: dict[ConversationState, tuple[str, ConversationState]] = {
    ConversationState.ASK_PLACE_TYPE: ("place_type", ConversationState.ASK_BUDGET),
    ConversationState.ASK_BUDGET: ("budget", ConversationState.ASK_SEASON),
    ConversationState.ASK_SEASON: ("season", ConversationState.ASK_SOURCE),
    ConversationState.ASK_SOURCE: ("source", ConversationState.AWAITING_RECOMMENDATION),
}


class RecommendationLike(Protocol):
    recommendations: str
    places: list[Place]


RecommendFn = Callable[[UserPreferences], Awaitable[RecommendationLike]]


@dataclass
class ChatTurn:
    messages: list[str] = field(default_factory=list)
    state: ConversationState = ConversationState.ASK_PLACE_TYPE
    places: list[Place] = field(default_factory=list)
    recommendations: Optional[str] = None


class ConversationController:
    def __init__(self, recommend: RecommendFn) -> None:
        self._recommend = recommend
        self.state = ConversationState.ASK_PLACE_TYPE
        self.answers: dict[str, str] = {}
        self.places: list[Place] = []

    def greeting(self) -> str:
        return GREETING + QUESTIONS[ConversationState.ASK_PLACE_TYPE]

    async def handle(self, text: str) -> ChatTurn:
        if not text or not text.strip() or self.state is ConversationState.END:
            return self._turn([])

        if self.state is ConversationState.ASK_MORE_RECOMMENDATIONS:
            return self._handle_more(text)

        step = _STEPS.get(self.state)
        if step is None:
            # a recommendation request is still in flight
            return self._turn([])

        answer_field, next_state = step
        result = validate_answer(answer_field, text)
        if not result:
            return self._turn(result.errors)

        self.answers[answer_field] = text.strip().lower()
        self.state = next_state
        if next_state is not ConversationState.AWAITING_RECOMMENDATION:
            return self._turn([QUESTIONS[next_state]])
        return await self._request_recommendations()

    # ── internals ─────────────────────────────────────────────────────────

    async def _request_recommendations(self) -> ChatTurn:
        prefs = UserPreferences(**self.answers)
        try:
            result = await self._recommend(prefs)
        except SmartTourError as exc:
            logger.error("Recommendation request failed: %s", exc)
            return self._recommendation_failed()
        except Exception:
            logger.exception("Unexpected error while requesting recommendations")
            return self._recommendation_failed()

        self.places = list(result.places)
        self.state = ConversationState.ASK_MORE_RECOMMENDATIONS
        turn = self._turn([result.recommendations, ASK_MORE])
        turn.recommendations = result.recommendations
        return turn

    def _recommendation_failed(self) -> ChatTurn:
        self.state = ConversationState.ASK_SOURCE
        return self._turn([RECOMMENDATION_FAILED])

    def _handle_more(self, text: str) -> ChatTurn:
        if "yes" in text.lower():
            self.answers = {}
            self.places = []
            self.state = ConversationState.ASK_PLACE_TYPE
            return self._turn([QUESTIONS[ConversationState.ASK_PLACE_TYPE]])

        self.state = ConversationState.END
        return self._turn([CLOSING])

    def _turn(self, messages: list[str]) -> ChatTurn:
        return ChatTurn(messages=messages, state=self.state, places=list(self.places))
