"""Round-based workflow scheduler.

Each round dispatches every ready task to a thread pool and waits for all of
them to settle before the next ready set is computed. Worker threads only
call the provider; they hand their outcome back to the coordinating thread,
which is the single writer of run state.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Callable, Mapping
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass
from datetime import UTC, datetime

from agent_workflow_orchestrator.llm.provider import CapabilityProvider

from .context import ContextRenderer, assemble_input, render_payload
from .errors import InvalidWorkflowError, ProviderError, ProviderErrorReason
from .models import (
    Agent,
    RunOutcome,
    RunStatus,
    TaskDefinition,
    TaskRunState,
    TaskStatus,
    WorkflowRun,
    WorkflowTemplate,
)
from .registry import AgentRegistry, WorkflowCatalog
from .report import WorkflowRunReport, build_report

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass(frozen=True, slots=True)
class _TaskOutcome:
    task_id: str
    output: str | None = None
    error: str | None = None
    reason: ProviderErrorReason | None = None
    finished_at: datetime | None = None


class WorkflowRunner:
    """Executes workflow templates to a terminal state.

    Args:
        agents: Registry used to resolve each task's agent.
        workflows: Catalog of templates.
        provider: Executes individual tasks.
        max_workers: Upper bound on concurrent provider calls per round.
            ``None`` runs the whole ready set at once.
        run_timeout_seconds: Run deadline, checked before each round. Tasks
            never dispatched by then stay pending and the run fails with
            ``RunOutcome.TIMED_OUT``.
        renderer: Turns a task and its assembled input into provider context.
        clock: Monotonic clock (tests).
    """

    def __init__(
        self,
        *,
        agents: AgentRegistry,
        workflows: WorkflowCatalog,
        provider: CapabilityProvider,
        max_workers: int | None = None,
        run_timeout_seconds: float | None = None,
        renderer: ContextRenderer = render_payload,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_workers is not None and max_workers < 1:
            raise ValueError("max_workers must be positive")
        self.agents = agents
        self.workflows = workflows
        self.provider = provider
        self.max_workers = max_workers
        self.run_timeout_seconds = run_timeout_seconds
        self.renderer = renderer
        self._clock = clock

    def run(
        self,
        workflow_id: str,
        initial_input: object = None,
        *,
        task_inputs: Mapping[str, object] | None = None,
    ) -> WorkflowRunReport:
        """Run a workflow and block until it is terminal.

        Args:
            workflow_id: Registered template id.
            initial_input: Seed input of the template's entry task.
            task_inputs: Additional seed inputs keyed by task id.

        Returns:
            The full report. Task failures and deadlocks are reported, not raised.

        Raises:
            NotFoundError: Unknown workflow, or a task references an unknown agent.
            InvalidWorkflowError: ``task_inputs`` names a task outside the workflow.
        """
        template = self.workflows.get(workflow_id)
        agents = {agent_id: self.agents.get(agent_id) for agent_id in template.agent_ids()}

        extra_inputs = dict(task_inputs or {})
        unknown = sorted(set(extra_inputs) - set(template.task_ids))
        if unknown:
            raise InvalidWorkflowError(
                f"Inputs given for tasks not in workflow {workflow_id!r}: {', '.join(unknown)}"
            )

        run = self._start(template, initial_input, extra_inputs)
        deadline = (
            self._clock() + self.run_timeout_seconds
            if self.run_timeout_seconds is not None
            else None
        )

        logger.info(
            "Workflow run started",
            extra={"run_id": run.run_id, "workflow_id": workflow_id, "tasks": len(template.tasks)},
        )

        timed_out = False
        while True:
            if deadline is not None and self._clock() >= deadline:
                timed_out = True
                logger.warning(
                    "Workflow run deadline exceeded",
                    extra={"run_id": run.run_id, "rounds": run.rounds},
                )
                break

            ready = self._ready_tasks(template, run)
            if not ready:
                # Rounds only advance after full settlement, so nothing is running here.
                pending = [s.task_id for s in run.tasks_with(TaskStatus.PENDING)]
                if pending:
                    logger.warning(
                        "Workflow deadlocked: pending tasks cannot become ready",
                        extra={"run_id": run.run_id, "pending": pending},
                    )
                break

            run.rounds += 1
            self._run_round(run, ready, agents)

        self._finish(run, timed_out=timed_out)
        report = build_report(
            run,
            template.tasks,
            entry_task_id=template.entry_task.id,
            finished_at=_utc_now(),
        )
        logger.info(
            "Workflow run finished",
            extra={
                "run_id": run.run_id,
                "workflow_id": workflow_id,
                "status": run.status.value,
                "outcome": report.outcome.value,
                "rounds": run.rounds,
            },
        )
        return report

    def _start(
        self,
        template: WorkflowTemplate,
        initial_input: object,
        extra_inputs: dict[str, object],
    ) -> WorkflowRun:
        run = WorkflowRun(
            run_id=uuid.uuid4().hex,
            workflow_id=template.id,
            started_at=_utc_now(),
        )
        for task in template.tasks:
            run.task_states[task.id] = TaskRunState(task_id=task.id)

        run.task_states[template.entry_task.id].input = initial_input
        for task_id, value in extra_inputs.items():
            run.task_states[task_id].input = value
        return run

    @staticmethod
    def _ready_tasks(template: WorkflowTemplate, run: WorkflowRun) -> list[TaskDefinition]:
        return [
            task
            for task in template.tasks
            if run.task_states[task.id].status is TaskStatus.PENDING
            and all(dep in run.results for dep in task.dependencies)
        ]

    def _run_round(
        self, run: WorkflowRun, ready: list[TaskDefinition], agents: dict[str, Agent]
    ) -> None:
        logger.info(
            "Dispatching round",
            extra={"run_id": run.run_id, "round": run.rounds, "tasks": [t.id for t in ready]},
        )

        dispatch: list[tuple[TaskDefinition, str]] = []
        for task in ready:
            state = run.task_states[task.id]
            state.status = TaskStatus.RUNNING
            state.round = run.rounds
            state.started_at = _utc_now()
            try:
                state.input = assemble_input(task, state.input, run.results)
                context = self.renderer(task, state.input)
            except Exception as e:
                self._apply(
                    run,
                    _TaskOutcome(
                        task_id=task.id,
                        error=f"Cannot build task context: {type(e).__name__}: {e}",
                        reason="invalid_input",
                        finished_at=_utc_now(),
                    ),
                )
                continue
            dispatch.append((task, context))

        if not dispatch:
            return

        workers = min(self.max_workers or len(dispatch), len(dispatch))
        with ThreadPoolExecutor(
            max_workers=workers, thread_name_prefix=f"workflow-{run.run_id[:8]}"
        ) as executor:
            futures = [
                executor.submit(self._invoke, task.id, agents[task.agent_id].role, context)
                for task, context in dispatch
            ]
            wait(futures)

        for future in futures:
            self._apply(run, future.result())

    def _invoke(self, task_id: str, role: str, context: str) -> _TaskOutcome:
        try:
            output = self.provider.execute(role, context)
        except ProviderError as e:
            return _TaskOutcome(
                task_id=task_id, error=str(e), reason=e.reason, finished_at=_utc_now()
            )
        except Exception as e:
            logger.exception("Provider raised an unexpected error", extra={"task_id": task_id})
            return _TaskOutcome(
                task_id=task_id,
                error=f"{type(e).__name__}: {e}",
                reason="provider_error",
                finished_at=_utc_now(),
            )

        if not isinstance(output, str):
            return _TaskOutcome(
                task_id=task_id,
                error=f"Provider returned {type(output).__name__}, expected text",
                reason="malformed_response",
                finished_at=_utc_now(),
            )
        return _TaskOutcome(task_id=task_id, output=output, finished_at=_utc_now())

    @staticmethod
    def _apply(run: WorkflowRun, outcome: _TaskOutcome) -> None:
        state = run.task_states[outcome.task_id]
        state.finished_at = outcome.finished_at
        if outcome.output is not None:
            state.status = TaskStatus.COMPLETED
            state.output = outcome.output
            run.results[outcome.task_id] = outcome.output
            logger.info(
                "Task completed",
                extra={"run_id": run.run_id, "task_id": outcome.task_id, "round": state.round},
            )
        else:
            state.status = TaskStatus.FAILED
            state.error = outcome.error
            state.error_reason = outcome.reason
            logger.warning(
                "Task failed",
                extra={
                    "run_id": run.run_id,
                    "task_id": outcome.task_id,
                    "round": state.round,
                    "reason": outcome.reason,
                    "error": outcome.error,
                },
            )

    @staticmethod
    def _finish(run: WorkflowRun, *, timed_out: bool) -> None:
        states = run.task_states.values()
        if all(s.status is TaskStatus.COMPLETED for s in states):
            run.status = RunStatus.COMPLETED
            run.outcome = RunOutcome.COMPLETED
            return

        run.status = RunStatus.FAILED
        if timed_out:
            run.outcome = RunOutcome.TIMED_OUT
        elif any(s.status is TaskStatus.PENDING for s in states):
            run.outcome = RunOutcome.DEADLOCKED
        else:
            run.outcome = RunOutcome.TASK_FAILED
