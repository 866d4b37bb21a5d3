"""Domain types for agents, workflow templates and per-run state."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .errors import InvalidWorkflowError, ProviderErrorReason


class TaskStatus(str, Enum):
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class RunStatus(str, Enum):
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class RunOutcome(str, Enum):
    """Why a run reached its terminal status.

    ``RunStatus.FAILED`` covers three distinct situations; the outcome keeps
    them apart in the report.
    """

    COMPLETED = "completed"
    TASK_FAILED = "task_failed"
    DEADLOCKED = "deadlocked"
    TIMED_OUT = "timed_out"


@dataclass(frozen=True, slots=True)
class Agent:
    """A named worker.

    ``role`` is free text handed to the capability provider as execution
    context. Capabilities are descriptive tags only; dispatch never reads them.
    """

    id: str
    name: str
    role: str
    capabilities: frozenset[str] = frozenset()

    @staticmethod
    def create(
        *, id: str, name: str, role: str, capabilities: Iterable[str] = ()
    ) -> Agent:
        return Agent(id=id, name=name, role=role, capabilities=frozenset(capabilities))


@dataclass(frozen=True, slots=True)
class TaskDefinition:
    id: str
    description: str
    agent_id: str
    dependencies: frozenset[str] = frozenset()

    @staticmethod
    def create(
        *, id: str, description: str, agent_id: str, dependencies: Iterable[str] = ()
    ) -> TaskDefinition:
        return TaskDefinition(
            id=id,
            description=description,
            agent_id=agent_id,
            dependencies=frozenset(dependencies),
        )


@dataclass(frozen=True, slots=True)
class WorkflowTemplate:
    """A named, ordered set of tasks with dependency edges.

    ``entry_task_id`` names the task seeded with the caller's initial input.
    When omitted the first task in ``tasks`` is the entry task.

    Acyclicity is not checked here; see ``WorkflowCatalog(strict=True)``.
    """

    id: str
    name: str
    tasks: tuple[TaskDefinition, ...]
    description: str = ""
    entry_task_id: str | None = None

    def __post_init__(self) -> None:
        if not self.tasks:
            raise InvalidWorkflowError(f"Workflow {self.id!r} has no tasks")

        seen: set[str] = set()
        for task in self.tasks:
            if task.id in seen:
                raise InvalidWorkflowError(
                    f"Workflow {self.id!r} has duplicate task id {task.id!r}"
                )
            seen.add(task.id)

        if self.entry_task_id is not None and self.entry_task_id not in seen:
            raise InvalidWorkflowError(
                f"Workflow {self.id!r} entry task {self.entry_task_id!r} is not one of its tasks"
            )

    @property
    def entry_task(self) -> TaskDefinition:
        if self.entry_task_id is None:
            return self.tasks[0]
        return self.task(self.entry_task_id)

    @property
    def task_ids(self) -> list[str]:
        return [t.id for t in self.tasks]

    def task(self, task_id: str) -> TaskDefinition:
        for t in self.tasks:
            if t.id == task_id:
                return t
        raise KeyError(task_id)

    def agent_ids(self) -> list[str]:
        """Distinct agent ids referenced by the tasks, in task order."""

        out: list[str] = []
        for t in self.tasks:
            if t.agent_id not in out:
                out.append(t.agent_id)
        return out


@dataclass(slots=True)
class TaskRunState:
    """Mutable state of one task within one run."""

    task_id: str
    status: TaskStatus = TaskStatus.PENDING
    input: object = None
    output: str | None = None
    error: str | None = None
    error_reason: ProviderErrorReason | None = None
    round: int | None = None
    started_at: datetime | None = None
    finished_at: datetime | None = None


@dataclass(slots=True)
class WorkflowRun:
    """One ephemeral execution of a template. Discarded once reported."""

    run_id: str
    workflow_id: str
    started_at: datetime
    task_states: dict[str, TaskRunState] = field(default_factory=dict)
    results: dict[str, str] = field(default_factory=dict)
    status: RunStatus = RunStatus.RUNNING
    outcome: RunOutcome | None = None
    rounds: int = 0

    def tasks_with(self, status: TaskStatus) -> list[TaskRunState]:
        return [s for s in self.task_states.values() if s.status is status]
