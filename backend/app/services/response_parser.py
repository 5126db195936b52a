"""Turn a free-text LLM reply into structured tasks.

Replies are expected to follow the block layout requested by
``app.services.prompt_builder``::

    TASK 1:
    Title: Define scope
    Description: Gather requirements
    Priority: high
    Estimate: 4 hours
    Dependencies: none

Blocks that do not fit the layout are skipped. When no block fits, the whole
reply is wrapped in a single fallback task so callers always get a result.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import re
from typing import Dict, List, Optional, Tuple

from app.services.task_models import Task

logger = logging.getLogger(__name__)

FALLBACK_TITLE = "Generated Tasks"
FALLBACK_PRIORITY = "medium"
NO_DEPENDENCY_MARKERS = {"none", "nenhuma"}
FIELD_ORDER = ("title", "description", "priority", "estimate", "dependencies")

_HEADER_RE = re.compile(r"^[ \t]*TASK[ \t]+(\d+)[ \t]*:[ \t]*$", re.IGNORECASE | re.MULTILINE)
_LABEL_RE = re.compile(r"[ \t]*(title|description|priority|estimate|dependencies)[ \t]*:[ \t]*(.*)", re.IGNORECASE)
_ESTIMATE_RE = re.compile(r"(\d+)[ \t]*hours?\b", re.IGNORECASE)
_DEPENDENCY_SPLIT_RE = re.compile(r"[,;]")


@dataclass
class ParseResult:
    tasks: List[Task]
    structured: bool


def parse_tasks(raw_text: str) -> List[Task]:
    """Return the tasks found in ``raw_text``; never empty, never raises."""
    return parse_response(raw_text).tasks


def parse_response(raw_text: str) -> ParseResult:
    """Parse ``raw_text`` and report whether any well-formed block was found."""
    text = (raw_text or "").replace("\r\n", "\n")
    tasks = [task for task in (_parse_block(order, body) for order, body in _iter_blocks(text)) if task]

    if not tasks:
        logger.warning("Could not parse structured response. Returning raw response.")
        return ParseResult(tasks=[fallback_task(raw_text)], structured=False)
    return ParseResult(tasks=tasks, structured=True)


def fallback_task(raw_text: str) -> Task:
    """Wrap an unparseable reply, verbatim, as a single task."""
    return Task(
        order=1,
        title=FALLBACK_TITLE,
        description=raw_text or "",
        priority=FALLBACK_PRIORITY,
        estimated_hours=0,
        dependencies=(),
    )


def parse_dependencies(value: Optional[str]) -> Tuple[str, ...]:
    """Split a ``Dependencies:`` value on commas/semicolons into opaque tokens."""
    if value is None:
        return ()
    cleaned = value.strip()
    if not cleaned or cleaned.lower() in NO_DEPENDENCY_MARKERS:
        return ()
    tokens = (token.strip() for token in _DEPENDENCY_SPLIT_RE.split(cleaned))
    return tuple(token for token in tokens if token)


def _iter_blocks(text: str):
    headers = list(_HEADER_RE.finditer(text))
    for index, header in enumerate(headers):
        end = headers[index + 1].start() if index + 1 < len(headers) else len(text)
        yield int(header.group(1)), text[header.end():end]


def _parse_block(order: int, body: str) -> Optional[Task]:
    fields = _read_fields(body)
    estimate = _ESTIMATE_RE.match(fields["estimate"].strip()) if fields else None
    if not fields or not estimate or not fields["title"].strip() or not fields["priority"].strip():
        logger.debug("Skipping malformed block for TASK %s", order)
        return None
    return Task(
        order=order,
        title=fields["title"].strip(),
        description=fields["description"].strip(),
        priority=fields["priority"].strip().lower(),
        estimated_hours=int(estimate.group(1)),
        dependencies=parse_dependencies(fields["dependencies"]),
    )


def _read_fields(body: str) -> Optional[Dict[str, str]]:
    """Collect the labelled fields of one block, which must appear in ``FIELD_ORDER``.

    Blank lines between fields are skipped. The description runs until the
    ``Priority:`` line, so it may span several lines. Returns None as soon as
    an unexpected line appears or the block ends before ``Dependencies:``.
    """
    fields: Dict[str, str] = {}
    description: Optional[List[str]] = None
    for line in body.split("\n"):
        label, value = _split_label(line)
        if description is not None:
            if label != "priority":
                description.append(line)
                continue
            fields["description"] = "\n".join(description)
            description = None
        elif not line.strip():
            continue
        elif label != FIELD_ORDER[len(fields)]:
            return None

        if label == "description":
            description = [value]
            continue
        fields[label] = value
        if label == "dependencies":
            return fields
    return None


def _split_label(line: str) -> Tuple[Optional[str], str]:
    match = _LABEL_RE.match(line)
    if not match:
        return None, line
    return match.group(1).lower(), match.group(2)
