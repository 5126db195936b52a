"""Generate a structured task list for an objective through an LLM."""
from __future__ import annotations

from datetime import datetime, timezone
import logging
from time import perf_counter
from typing import Optional

from app.observability.metrics import log_metric
from app.observability.tracing import trace
from app.services.llm.base import LLMClient
from app.services.prompt_builder import render_prompt
from app.services.response_parser import parse_response
from app.services.task_models import GenerationRequest, GenerationResult

logger = logging.getLogger(__name__)


def generate_tasks(
    request: GenerationRequest,
    client: LLMClient,
    *,
    request_id: Optional[str] = None,
) -> GenerationResult:
    """Render the prompt, call the LLM once and parse its reply.

    Errors raised by ``client`` propagate unchanged; an unparseable reply is
    not an error and yields the single fallback task instead.
    """
    logger.info("Generating tasks for objective: %s", request.objective)
    trace_metadata = {
        "provider": client.label,
        "max_tasks": request.max_tasks,
        "detail_level": request.detail_level,
        "llm_input_text": request.objective[:500],
    }

    with trace("tasks.generate", metadata=trace_metadata, request_id=request_id) as span:
        prompt = render_prompt(request)

        start = perf_counter()
        raw_reply = client.complete(prompt)
        llm_duration_ms = (perf_counter() - start) * 1000
        logger.debug("LLM Response: %s", raw_reply)

        parsed = parse_response(raw_reply)
        if span:
            span.update(
                metadata={
                    **trace_metadata,
                    "task_count": len(parsed.tasks),
                    "structured": parsed.structured,
                    "llm_output_text": raw_reply[:500],
                }
            )

    log_metric("llm.completion.duration_ms", llm_duration_ms, metadata={"provider": client.label})
    log_metric("tasks.generated", len(parsed.tasks), metadata={"provider": client.label})
    log_metric("tasks.parse.fallback", 0 if parsed.structured else 1, metadata={"provider": client.label})

    return GenerationResult(
        original_objective=request.objective,
        tasks=tuple(parsed.tasks),
        generated_at=datetime.now(timezone.utc),
        model=client.label,
    )
