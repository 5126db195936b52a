"""Pydantic schemas for the task generation endpoint."""
from __future__ import annotations

from datetime import datetime
from typing import Any, List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.services.task_models import DEFAULT_DETAIL_LEVEL, DEFAULT_MAX_TASKS, GenerationResult, Task


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TaskGenerationRequest(CamelModel):
    objective: str = Field(
        ...,
        min_length=10,
        max_length=1000,
        description="The main objective to be broken down into tasks",
        examples=["Develop a mobile food delivery app"],
    )
    max_tasks: int = Field(default=DEFAULT_MAX_TASKS, ge=1, le=50, description="Maximum number of tasks to generate")
    detail_level: Literal["low", "medium", "high"] = Field(
        default=DEFAULT_DETAIL_LEVEL,
        description="Level of detail for each task",
    )

    @field_validator("objective", mode="before")
    @classmethod
    def strip_objective(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value


class TaskPayload(CamelModel):
    order: int = Field(..., examples=[1])
    title: str = Field(..., examples=["Define project requirements and scope"])
    description: str
    priority: str = Field(..., examples=["high"])
    estimated_hours: int = Field(..., examples=[16])
    dependencies: List[str] = Field(default_factory=list, examples=[["1", "2"]])

    @classmethod
    def from_task(cls, task: Task) -> "TaskPayload":
        return cls(
            order=task.order,
            title=task.title,
            description=task.description,
            priority=task.priority,
            estimated_hours=task.estimated_hours,
            dependencies=list(task.dependencies),
        )


class TaskGenerationResponse(CamelModel):
    original_objective: str
    tasks: List[TaskPayload]
    generated_at: datetime
    model: str = Field(..., description="AI provider/model used to generate the tasks")

    @classmethod
    def from_result(cls, result: GenerationResult) -> "TaskGenerationResponse":
        return cls(
            original_objective=result.original_objective,
            tasks=[TaskPayload.from_task(task) for task in result.tasks],
            generated_at=result.generated_at,
            model=result.model,
        )
