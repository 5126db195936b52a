"""Task generation routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from app.api.schemas.task_generation import TaskGenerationRequest, TaskGenerationResponse
from app.core.config import settings
from app.core.errors import ErrorResponse
from app.services.llm.base import LLMClient
from app.services.llm.factory import get_llm_client
from app.services.task_generator import generate_tasks
from app.services.task_models import GenerationRequest

HEALTH_MESSAGE = "Smart Task Generator is running!"

router = APIRouter(prefix=f"{settings.api_v1_prefix}/tasks", tags=["Task Generator"])


@router.post(
    "/generate",
    response_model=TaskGenerationResponse,
    summary="Generate tasks",
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
def generate_tasks_endpoint(
    payload: TaskGenerationRequest,
    http_request: Request,
    client: LLMClient = Depends(get_llm_client),
) -> TaskGenerationResponse:
    """Generate a structured task list from an objective."""
    request = GenerationRequest(
        objective=payload.objective,
        max_tasks=payload.max_tasks,
        detail_level=payload.detail_level,
    )
    result = generate_tasks(request, client, request_id=getattr(http_request.state, "request_id", None))
    return TaskGenerationResponse.from_result(result)


@router.get("/health", response_class=PlainTextResponse, summary="Health check")
def tasks_health() -> str:
    """Check that the service is running."""
    return HEALTH_MESSAGE
