"""
modules/errors.py
-----------------
Exception hierarchy shared by the recommendation pipeline and the HTTP layer.

  SmartTourError
    ├── MissingParameter    → HTTP 400 (request field absent or empty)
    ├── ConfigurationError  → HTTP 500 (credential unset)
    └── UpstreamError       → HTTP 500 (every candidate model failed)

Geocoding and extraction failures are never raised; they degrade inside
modules/extraction (see ExtractionResult).
"""

from __future__ import annotations


class SmartTourError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 500

    @property
    def public_message(self) -> str:
        return str(self)


class MissingParameter(SmartTourError):
    status_code = 400

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing required parameter: {field}")
        self.field = field


class ConfigurationError(SmartTourError):
    """A required credential is unset.

    ``cause`` names the setting for the server log; callers only ever see
    the generic message.
    """

    def __init__(self, message: str, *, cause: str = "") -> None:
        super().__init__(message)
        self.cause = cause


class UpstreamError(SmartTourError):
    """Every candidate model failed or answered with a non-OK status."""
