"""In-memory registries for agents and workflow templates.

Both are plain lookup tables owned by whichever process hosts the runner.
Registration overwrites by id (last write wins).
"""

from __future__ import annotations

import logging
from graphlib import CycleError, TopologicalSorter

from .errors import CyclicDependencyError, InvalidWorkflowError, NotFoundError
from .models import Agent, WorkflowTemplate

logger = logging.getLogger(__name__)


class AgentRegistry:
    def __init__(self) -> None:
        self._agents: dict[str, Agent] = {}

    def register(self, agent: Agent) -> None:
        if agent.id in self._agents:
            logger.info("Replacing registered agent", extra={"agent_id": agent.id})
        self._agents[agent.id] = agent

    def get(self, agent_id: str) -> Agent:
        try:
            return self._agents[agent_id]
        except KeyError:
            raise NotFoundError("agent", agent_id) from None

    def list(self) -> list[Agent]:
        """Registered agents in insertion order."""

        return list(self._agents.values())

    def __contains__(self, agent_id: object) -> bool:
        return agent_id in self._agents

    def __len__(self) -> int:
        return len(self._agents)


def validate_template(template: WorkflowTemplate) -> None:
    """Check that dependencies stay inside the template and form a DAG.

    Raises:
        InvalidWorkflowError: A dependency names a task outside the template.
        CyclicDependencyError: The dependency graph contains a cycle.
    """

    known = set(template.task_ids)
    for task in template.tasks:
        missing = sorted(task.dependencies - known)
        if missing:
            raise InvalidWorkflowError(
                f"Task {task.id!r} in workflow {template.id!r} depends on unknown tasks: "
                f"{', '.join(missing)}"
            )

    graph = {task.id: set(task.dependencies) for task in template.tasks}
    try:
        TopologicalSorter(graph).prepare()
    except CycleError as e:
        cycle = [str(node) for node in e.args[1]]
        raise CyclicDependencyError(template.id, cycle) from None


class WorkflowCatalog:
    """Workflow templates by id.

    With ``strict=True`` every template is validated with
    :func:`validate_template` before it is stored. Without it a cyclic
    template is accepted and will deadlock when run.
    """

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict
        self._templates: dict[str, WorkflowTemplate] = {}

    def register(self, template: WorkflowTemplate) -> None:
        if self.strict:
            validate_template(template)
        if template.id in self._templates:
            logger.info("Replacing registered workflow", extra={"workflow_id": template.id})
        self._templates[template.id] = template

    def get(self, workflow_id: str) -> WorkflowTemplate:
        try:
            return self._templates[workflow_id]
        except KeyError:
            raise NotFoundError("workflow", workflow_id) from None

    def list(self) -> list[WorkflowTemplate]:
        return list(self._templates.values())

    def __contains__(self, workflow_id: object) -> bool:
        return workflow_id in self._templates

    def __len__(self) -> int:
        return len(self._templates)
