"""Task input assembly and rendering into provider context text."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Protocol

from .models import TaskDefinition

DEPENDENCIES_KEY = "dependencies"
INPUT_KEY = "input"


class ContextRenderer(Protocol):
    def __call__(self, task: TaskDefinition, payload: object) -> str: ...


def assemble_input(
    task: TaskDefinition, own_input: object, results: Mapping[str, str]
) -> object:
    """Merge a task's own input with the outputs of its declared dependencies.

    Tasks without dependencies receive their own input unchanged. Only the
    task's declared dependencies are read from ``results``; callers must only
    dispatch a task once every dependency has a result.
    """

    if not task.dependencies:
        return own_input

    deps = {dep: results[dep] for dep in sorted(task.dependencies)}
    if isinstance(own_input, Mapping):
        merged = dict(own_input)
        merged[DEPENDENCIES_KEY] = deps
        return merged

    out: dict[str, object] = {}
    if own_input is not None:
        out[INPUT_KEY] = own_input
    out[DEPENDENCIES_KEY] = deps
    return out


def _to_text(payload: object) -> str:
    if isinstance(payload, str):
        return payload
    return json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False, default=str)


def render_payload(task: TaskDefinition, payload: object) -> str:
    """Render only the assembled input: strings as-is, everything else as JSON."""

    return _to_text(payload)


def render_prompt(task: TaskDefinition, payload: object) -> str:
    """Render the task description and its input as an instruction prompt."""

    return (
        f"Task: {task.description}\n\n"
        f"Input:\n{_to_text(payload)}\n\n"
        "Complete this task according to your role and capabilities."
    )
