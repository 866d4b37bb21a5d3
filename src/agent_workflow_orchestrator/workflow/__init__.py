"""Workflow engine: registries, templates and the round-based runner.

A workflow template is a DAG of tasks, each assigned to an agent. The runner
executes a template in rounds: every task whose dependencies have completed is
dispatched concurrently, and the next round starts once all of them settle.
"""

from .errors import (
    CyclicDependencyError,
    InvalidWorkflowError,
    NotFoundError,
    OrchestratorError,
    ProviderError,
)
from .models import (
    Agent,
    RunOutcome,
    RunStatus,
    TaskDefinition,
    TaskStatus,
    WorkflowTemplate,
)
from .registry import AgentRegistry, WorkflowCatalog, validate_template
from .report import TaskReport, WorkflowRunReport
from .runner import WorkflowRunner

__all__ = [
    "Agent",
    "AgentRegistry",
    "CyclicDependencyError",
    "InvalidWorkflowError",
    "NotFoundError",
    "OrchestratorError",
    "ProviderError",
    "RunOutcome",
    "RunStatus",
    "TaskDefinition",
    "TaskReport",
    "TaskStatus",
    "WorkflowCatalog",
    "WorkflowRunReport",
    "WorkflowRunner",
    "WorkflowTemplate",
    "validate_template",
]
