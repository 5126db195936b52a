"""Prompt rendering for task generation.

The block layout requested here is the format ``app.services.response_parser``
matches; the two must change together.
"""
from __future__ import annotations

from app.services.task_models import GenerationRequest

PROMPT_TEMPLATE = (
    "You are an assistant specialized in project planning and organization.\n"
    "\n"
    "Provided objective: {objective}\n"
    "\n"
    "Please break down this objective into a structured task list.\n"
    "\n"
    "Rules:\n"
    "- Generate a maximum of {max_tasks} tasks\n"
    "- Detail level: {detail_level}\n"
    "- Each task must have: order, title, description, priority (high/medium/low), estimated hours\n"
    "- Identify dependencies between tasks when applicable\n"
    "- Separate consecutive tasks with a blank line\n"
    "\n"
    "Expected response format (use exactly this format):\n"
    "\n"
    "TASK 1:\n"
    "Title: [task title]\n"
    "Description: [detailed description]\n"
    "Priority: [high/medium/low]\n"
    "Estimate: [number] hours\n"
    'Dependencies: [task numbers separated by commas, or "none"]\n'
    "\n"
    "TASK 2:\n"
    "...\n"
    "\n"
    "Be specific, practical and organize the tasks logically.\n"
)


def render_prompt(request: GenerationRequest) -> str:
    """Render the user prompt for ``request``; identical input gives identical output."""
    return PROMPT_TEMPLATE.format(
        objective=request.objective,
        max_tasks=request.max_tasks,
        detail_level=request.detail_level,
    )
