"""Unit tests for the agent registry and workflow catalog."""

from __future__ import annotations

import pytest

from agent_workflow_orchestrator.workflow.errors import (
    CyclicDependencyError,
    InvalidWorkflowError,
    NotFoundError,
)
from agent_workflow_orchestrator.workflow.models import Agent
from agent_workflow_orchestrator.workflow.registry import (
    AgentRegistry,
    WorkflowCatalog,
    validate_template,
)


def test_agent_get_returns_registered_value() -> None:
    registry = AgentRegistry()
    agent = Agent.create(id="writer", name="Writer", role="Write.", capabilities=["prose"])
    registry.register(agent)

    assert registry.get("writer") is agent
    assert registry.get("writer").capabilities == frozenset({"prose"})
    assert "writer" in registry


def test_agent_get_unknown_raises_not_found() -> None:
    with pytest.raises(NotFoundError) as exc_info:
        AgentRegistry().get("nobody")

    assert exc_info.value.kind == "agent"
    assert exc_info.value.key == "nobody"
    assert isinstance(exc_info.value, LookupError)


def test_agent_register_overwrites_and_keeps_insertion_order() -> None:
    registry = AgentRegistry()
    registry.register(Agent.create(id="a", name="A", role="first"))
    registry.register(Agent.create(id="b", name="B", role="second"))
    registry.register(Agent.create(id="a", name="A2", role="replaced"))

    assert [a.id for a in registry.list()] == ["a", "b"]
    assert registry.get("a").role == "replaced"
    assert len(registry) == 2


def test_agent_list_is_restartable() -> None:
    registry = AgentRegistry()
    registry.register(Agent.create(id="a", name="A", role="r"))

    listed = registry.list()
    listed.clear()

    assert [a.id for a in registry.list()] == ["a"]


def test_catalog_get_and_list(template_factory) -> None:
    catalog = WorkflowCatalog()
    first = template_factory("one", {"A": []})
    second = template_factory("two", {"A": [], "B": ["A"]})
    catalog.register(first)
    catalog.register(second)

    assert catalog.get("two") is second
    assert [t.id for t in catalog.list()] == ["one", "two"]

    with pytest.raises(NotFoundError) as exc_info:
        catalog.get("three")
    assert exc_info.value.kind == "workflow"


def test_catalog_overwrites_by_id(template_factory) -> None:
    catalog = WorkflowCatalog()
    catalog.register(template_factory("w", {"A": []}))
    replacement = template_factory("w", {"B": []})
    catalog.register(replacement)

    assert catalog.get("w") is replacement
    assert len(catalog) == 1


def test_non_strict_catalog_accepts_cycles(template_factory) -> None:
    catalog = WorkflowCatalog()
    catalog.register(template_factory("loop", {"A": ["B"], "B": ["A"]}))

    assert "loop" in catalog


def test_strict_catalog_reports_cycle_members(template_factory) -> None:
    catalog = WorkflowCatalog(strict=True)

    with pytest.raises(CyclicDependencyError) as exc_info:
        catalog.register(template_factory("loop", {"A": [], "B": ["A", "D"], "C": ["B"], "D": ["C"]}))

    err = exc_info.value
    assert err.workflow_id == "loop"
    assert set(err.cycle) == {"B", "C", "D"}
    assert isinstance(err, InvalidWorkflowError)


def test_strict_catalog_rejects_self_dependency(template_factory) -> None:
    with pytest.raises(CyclicDependencyError):
        WorkflowCatalog(strict=True).register(template_factory("self", {"A": ["A"]}))


def test_strict_catalog_rejects_dangling_dependency(template_factory) -> None:
    catalog = WorkflowCatalog(strict=True)

    with pytest.raises(InvalidWorkflowError, match="unknown tasks: Z"):
        catalog.register(template_factory("dangling", {"A": [], "B": ["A", "Z"]}))
    assert "dangling" not in catalog


def test_validate_template_accepts_dag(template_factory) -> None:
    validate_template(template_factory("dag", {"A": [], "B": ["A"], "C": ["A"], "D": ["B", "C"]}))
