from __future__ import annotations

from core.settings.base import HandlersBaseSettings


class PipelineSettings(HandlersBaseSettings):
    """
    Handler pipeline settings.

    Environment:
        HANDLERS_TRACE_STEPS -> trace_steps (log every pipeline step at DEBUG)
    """

    trace_steps: bool = False
