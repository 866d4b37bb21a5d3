"""Test configuration and fixtures."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field

import pytest

from agent_workflow_orchestrator.llm.provider import CapabilityProvider
from agent_workflow_orchestrator.workflow.errors import ProviderError
from agent_workflow_orchestrator.workflow.models import Agent, TaskDefinition, WorkflowTemplate
from agent_workflow_orchestrator.workflow.registry import AgentRegistry, WorkflowCatalog

_SETTINGS_ENV_VARS = (
    "LOG_LEVEL",
    "PROVIDER",
    "ORCHESTRATOR_PROVIDER",
    "OPENAI_API_KEY",
    "ORCHESTRATOR_OPENAI_API_KEY",
    "OPENAI_MODEL",
    "ORCHESTRATOR_OPENAI_MODEL",
    "MAX_WORKERS",
    "ORCHESTRATOR_MAX_WORKERS",
    "RUN_TIMEOUT_SECONDS",
    "ORCHESTRATOR_RUN_TIMEOUT_SECONDS",
    "STRICT_WORKFLOWS",
    "ORCHESTRATOR_STRICT_WORKFLOWS",
)


@pytest.fixture(autouse=True)
def _isolated_settings_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep the developer's environment and `.env` out of settings-driven tests."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """`configure_logging` replaces root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@dataclass
class Call:
    role: str
    context: str
    started: float
    finished: float


@dataclass
class ScriptedProvider(CapabilityProvider):
    """Echo provider with per-role failures, delays and hooks, recording every call."""

    fail_roles: set[str] = field(default_factory=set)
    delay: float = 0.0
    before: Callable[[str, str], None] | None = None
    calls: list[Call] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._lock = threading.Lock()

    def execute(self, role: str, context: str) -> str:
        started = time.monotonic()
        try:
            if self.before is not None:
                self.before(role, context)
            if self.delay:
                time.sleep(self.delay)
            if role in self.fail_roles:
                raise ProviderError(f"scripted failure for {role}", reason="rate_limited")
            return context
        finally:
            with self._lock:
                self.calls.append(Call(role, context, started, time.monotonic()))

    def roles_called(self) -> list[str]:
        return sorted(c.role for c in self.calls)

    def call_for(self, role: str) -> Call:
        (call,) = [c for c in self.calls if c.role == role]
        return call


def make_template(
    workflow_id: str,
    graph: dict[str, Iterable[str]],
    *,
    agent_id: str | None = None,
    entry_task_id: str | None = None,
) -> WorkflowTemplate:
    """Build a template from ``{task_id: dependencies}``.

    Each task is assigned to ``agent_id``, or to an agent named after the task.
    """
    return WorkflowTemplate(
        id=workflow_id,
        name=workflow_id,
        entry_task_id=entry_task_id,
        tasks=tuple(
            TaskDefinition.create(
                id=task_id,
                description=f"task {task_id}",
                agent_id=agent_id or task_id,
                dependencies=deps,
            )
            for task_id, deps in graph.items()
        ),
    )


@pytest.fixture
def agents() -> AgentRegistry:
    """Registry with an `echo` agent plus one agent per letter A-F (role == id)."""
    registry = AgentRegistry()
    registry.register(Agent.create(id="echo", name="Echo", role="echo"))
    for letter in "ABCDEF":
        registry.register(Agent.create(id=letter, name=f"Agent {letter}", role=letter))
    return registry


@pytest.fixture
def workflows() -> WorkflowCatalog:
    return WorkflowCatalog()


@pytest.fixture
def provider() -> ScriptedProvider:
    return ScriptedProvider()


@pytest.fixture
def template_factory() -> Callable[..., WorkflowTemplate]:
    return make_template
