"""
api/routes/generate.py
----------------------
POST /generate — plain text completion, body {prompt} → {response}.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from modules.errors import MissingParameter, SmartTourError
from modules.recommendation.service import generate_text
from schemas.recommendation import GenerateRequest, GenerateResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/generate", summary="Generic Gemini text completion", response_model=GenerateResponse)
async def generate(req: Optional[GenerateRequest] = None):
    prompt = req.prompt if req else None
    if not prompt or not prompt.strip():
        raise MissingParameter("prompt")

    try:
        text = await asyncio.to_thread(generate_text, prompt)
    except SmartTourError:
        raise
    except Exception:
        logger.exception("Error calling Gemini API")
        return JSONResponse(status_code=500, content={"error": "Failed to generate response"})

    return {"response": text}
