"""modules/observability — pipeline event log."""

from modules.observability.logger import PipelineEventLog, new_request_id

__all__ = ["PipelineEventLog", "new_request_id"]
