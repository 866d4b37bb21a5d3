"""Immutable run report returned to callers."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .models import RunOutcome, RunStatus, TaskDefinition, TaskRunState, TaskStatus, WorkflowRun


class TaskReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    task_id: str
    description: str
    agent_id: str
    status: TaskStatus
    input: Any = None
    output: str | None = None
    error: str | None = None
    error_reason: str | None = None
    round: int | None = Field(default=None, description="Round in which the task was dispatched")
    blocked_by: list[str] = Field(
        default_factory=list,
        description="Dependencies that never completed (only set for tasks left pending)",
    )


class WorkflowRunReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    run_id: str
    workflow_id: str
    status: RunStatus
    outcome: RunOutcome
    rounds: int
    entry_task_id: str
    tasks: list[TaskReport]
    results: dict[str, str]
    started_at: datetime
    finished_at: datetime

    @computed_field  # type: ignore[prop-decorator]
    @property
    def duration_seconds(self) -> float:
        return (self.finished_at - self.started_at).total_seconds()

    def task(self, task_id: str) -> TaskReport:
        for t in self.tasks:
            if t.task_id == task_id:
                return t
        raise KeyError(task_id)

    def tasks_with(self, status: TaskStatus) -> list[str]:
        return [t.task_id for t in self.tasks if t.status is status]


def _task_report(
    definition: TaskDefinition, state: TaskRunState, results: dict[str, str]
) -> TaskReport:
    blocked_by: list[str] = []
    if state.status is TaskStatus.PENDING:
        blocked_by = sorted(d for d in definition.dependencies if d not in results)
    return TaskReport(
        task_id=state.task_id,
        description=definition.description,
        agent_id=definition.agent_id,
        status=state.status,
        input=state.input,
        output=state.output,
        error=state.error,
        error_reason=state.error_reason,
        round=state.round,
        blocked_by=blocked_by,
    )


def build_report(
    run: WorkflowRun,
    tasks: tuple[TaskDefinition, ...],
    *,
    entry_task_id: str,
    finished_at: datetime,
) -> WorkflowRunReport:
    """Snapshot a terminal run. Tasks are listed in template order."""

    if run.outcome is None:
        raise ValueError(f"Run {run.run_id} has not reached a terminal state")

    return WorkflowRunReport(
        run_id=run.run_id,
        workflow_id=run.workflow_id,
        status=run.status,
        outcome=run.outcome,
        rounds=run.rounds,
        entry_task_id=entry_task_id,
        tasks=[_task_report(t, run.task_states[t.id], run.results) for t in tasks],
        results=dict(run.results),
        started_at=run.started_at,
        finished_at=finished_at,
    )
