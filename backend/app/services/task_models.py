"""Value objects shared by the prompt builder, the response parser and the API layer."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Tuple

DETAIL_LEVELS = ("low", "medium", "high")
PRIORITIES = ("high", "medium", "low")

DEFAULT_MAX_TASKS = 10
DEFAULT_DETAIL_LEVEL = "medium"


@dataclass(frozen=True)
class GenerationRequest:
    """An objective to break down, plus the advisory knobs passed to the LLM."""

    objective: str
    max_tasks: int = DEFAULT_MAX_TASKS
    detail_level: str = DEFAULT_DETAIL_LEVEL

    def __post_init__(self) -> None:
        if not self.objective or not self.objective.strip():
            raise ValueError("objective must not be blank")
        if self.max_tasks < 1:
            raise ValueError("max_tasks must be positive")


@dataclass(frozen=True)
class Task:
    order: int
    title: str
    description: str
    priority: str
    estimated_hours: int
    dependencies: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class GenerationResult:
    original_objective: str
    tasks: Tuple[Task, ...]
    generated_at: datetime
    model: str
