"""
api/routes/chat.py
------------------
POST /chat — drives the four-question conversation over HTTP.

Flow:
  1. POST /chat {message: ""}                → new session_id + greeting
  2. POST /chat {session_id, message: "..."} → next question, corrective
                                               message, or recommendations

Sessions live in an in-memory store; they are lost on restart and dropped
once the conversation reaches END.
"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, HTTPException

from modules.conversation import ConversationController, ConversationState
from modules.recommendation.service import RecommendationResult, build_recommendation_service
from schemas.recommendation import ChatRequest, ChatResponse, UserPreferences

router = APIRouter()

# ── In-memory session store ────────────────────────────────────────────────────
# key: session_id (str uuid4) → ConversationController
_store: dict[str, ConversationController] = {}


async def _recommend(prefs: UserPreferences) -> RecommendationResult:
    return await build_recommendation_service().recommend(prefs)


def get_session(session_id: str) -> ConversationController:
    """Retrieve a stored conversation or raise 404."""
    controller = _store.get(session_id)
    if controller is None:
        raise HTTPException(
            status_code=404,
            detail=f"Session '{session_id}' not found. Start a new chat without session_id.",
        )
    return controller


@router.post("/chat", summary="Send one message to the travel questionnaire", response_model=ChatResponse)
async def chat(req: ChatRequest) -> ChatResponse:
    messages: list[str] = []
    if req.session_id:
        session_id = req.session_id
        controller = get_session(session_id)
    else:
        session_id = str(uuid.uuid4())
        controller = ConversationController(_recommend)
        _store[session_id] = controller
        messages.append(controller.greeting())

    turn = await controller.handle(req.message)
    messages.extend(turn.messages)
    if turn.state is ConversationState.END:
        _store.pop(session_id, None)

    return ChatResponse(
        session_id=session_id,
        state=turn.state.value,
        messages=messages,
        places=turn.places,
        recommendations=turn.recommendations,
    )
