"""
llm.py
------
Gemini client for the recommendation pipeline and the /generate endpoint.

Retry policy: one call per candidate model (config.GEMINI_MODELS), in order,
stopping at the first successful response. No backoff. When every model
fails, UpstreamError is raised, chained to the last failure.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types as genai_types

import config
from modules.errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)

ALL_MODELS_FAILED = "Failed to get response from Gemini API after trying multiple models"


def first_candidate_text(response) -> str:
    """Text of the first candidate's first part; "" when the shape is unexpected."""
    try:
        text = response.candidates[0].content.parts[0].text
    except (AttributeError, IndexError, TypeError):
        return ""
    return text or ""


class GeminiClient:
    def __init__(self, api_key: Optional[str] = None, models: Optional[Sequence[str]] = None):
        api_key = config.GEMINI_API_KEY if api_key is None else api_key
        if not api_key:
            raise ConfigurationError("Gemini API key not configured", cause="GEMINI_API_KEY is unset")

        self._models = list(models or config.GEMINI_MODELS)
        self._client = genai.Client(
            api_key=api_key,
            http_options={"timeout": config.LLM_TIMEOUT_SECONDS * 1000},   # milliseconds
        )

    @property
    def models(self) -> list[str]:
        return list(self._models)

    def generate(
        self,
        prompt: str,
        *,
        max_output_tokens: int,
        use_search: bool = False,
        on_model_failure: Optional[Callable[[str, Exception], None]] = None,
    ) -> str:
        """First successful model's text. ``on_model_failure(model, exc)`` runs once per failed model."""
        generation_config = genai_types.GenerateContentConfig(
            temperature=config.GEMINI_TEMPERATURE,
            top_k=config.GEMINI_TOP_K,
            top_p=config.GEMINI_TOP_P,
            max_output_tokens=max_output_tokens,
            tools=[genai_types.Tool(google_search=genai_types.GoogleSearch())] if use_search else None,
        )

        last_error: Optional[Exception] = None
        for model in self._models:
            try:
                response = self._client.models.generate_content(
                    model=model,
                    contents=prompt,
                    config=generation_config,
                )
            except (genai_errors.APIError, httpx.HTTPError) as exc:
                logger.warning("Gemini API error with model %s: %s", model, exc)
                last_error = exc
                if on_model_failure is not None:
                    on_model_failure(model, exc)
                continue
            return first_candidate_text(response)

        logger.error("All Gemini models failed (%s)", ", ".join(self._models) or "none configured")
        raise UpstreamError(ALL_MODELS_FAILED) from last_error
