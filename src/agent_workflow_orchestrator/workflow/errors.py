"""Error taxonomy for the workflow engine.

Structural errors (unknown ids, malformed templates) are raised before a run
starts. Provider failures are captured per task and never escape the round
loop. A deadlock is a run outcome, not an exception.
"""

from __future__ import annotations

from typing import Literal

# "invalid_input" is recorded by the runner when a task's context cannot be built.
ProviderErrorReason = Literal[
    "timeout", "rate_limited", "malformed_response", "provider_error", "invalid_input"
]


class OrchestratorError(Exception):
    pass


class NotFoundError(OrchestratorError, LookupError):
    """Raised when an agent or workflow id is not registered."""

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(f"Unknown {kind}: {key!r}")
        self.kind = kind
        self.key = key


class InvalidWorkflowError(OrchestratorError, ValueError):
    pass


class CyclicDependencyError(InvalidWorkflowError):
    """Raised by strict registration when task dependencies form a cycle."""

    def __init__(self, workflow_id: str, cycle: list[str]) -> None:
        path = " -> ".join(cycle)
        super().__init__(f"Workflow {workflow_id!r} has a dependency cycle: {path}")
        self.workflow_id = workflow_id
        self.cycle = cycle


class ProviderError(OrchestratorError):
    """A single capability invocation failed."""

    def __init__(self, message: str, *, reason: ProviderErrorReason = "provider_error") -> None:
        super().__init__(message)
        self.reason: ProviderErrorReason = reason
