"""
Pipeline event log — append-only, one JSON object per line (.jsonl).

Usage:
    from modules.observability.logger import PipelineEventLog

    events = PipelineEventLog()
    events.record(request_id, "recommendation_requested", {"place_type": "beach"})

Records land in  <PIPELINE_LOG_DIR>/pipeline-<YYYYMMDD>.jsonl  (UTC date).
Disabled entirely when PIPELINE_LOG_ENABLED=false.
"""

from __future__ import annotations

import json
import logging
import os
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path

import config

logger = logging.getLogger(__name__)


def new_request_id() -> str:
    return uuid.uuid4().hex[:12]


class PipelineEventLog:
    """Thread-safe JSONL writer for recommendation pipeline events."""

    def __init__(self, logs_dir: Path | str | None = None, enabled: bool | None = None) -> None:
        self._logs_dir = Path(logs_dir) if logs_dir else config.PIPELINE_LOG_DIR
        self._enabled = config.PIPELINE_LOG_ENABLED if enabled is None else enabled
        self._lock = threading.Lock()

    @property
    def enabled(self) -> bool:
        return self._enabled

    def path_for(self, when: datetime) -> Path:
        return self._logs_dir / f"pipeline-{when:%Y%m%d}.jsonl"

    def record(self, request_id: str, event_type: str, payload: dict) -> None:
        """Append one event. I/O failures are logged, never raised to the caller."""
        if not self._enabled:
            return

        now = datetime.now(timezone.utc)
        line = json.dumps(
            {
                "timestamp": now.isoformat(),
                "request_id": request_id,
                "event_type": event_type,
                "payload": payload,
            },
            default=str,
            ensure_ascii=False,
        ) + "\n"

        try:
            with self._lock:
                os.makedirs(self._logs_dir, exist_ok=True)
                with open(self.path_for(now), "a", encoding="utf-8") as fh:
                    fh.write(line)
        except OSError as exc:
            logger.warning("Could not write pipeline event %s: %s", event_type, exc)
