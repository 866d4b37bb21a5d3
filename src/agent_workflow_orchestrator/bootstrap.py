"""Wire registries, provider and runner from settings."""

from __future__ import annotations

import logging

from agent_workflow_orchestrator.config import OrchestratorSettings
from agent_workflow_orchestrator.llm.factory import ProviderFactory
from agent_workflow_orchestrator.llm.provider import CapabilityProvider
from agent_workflow_orchestrator.workflow.builtin import load_builtin_catalog
from agent_workflow_orchestrator.workflow.context import render_payload, render_prompt
from agent_workflow_orchestrator.workflow.registry import AgentRegistry, WorkflowCatalog
from agent_workflow_orchestrator.workflow.runner import WorkflowRunner

logger = logging.getLogger(__name__)


def build_runner(
    settings: OrchestratorSettings, provider: CapabilityProvider | None = None
) -> WorkflowRunner:
    """Create a runner over fresh registries holding the built-in catalog.

    LLM-backed providers get the instruction-style context; the echo provider
    gets the bare task input.
    """

    agents = AgentRegistry()
    workflows = WorkflowCatalog(strict=settings.strict_workflows)
    load_builtin_catalog(agents, workflows)

    if provider is None:
        provider = ProviderFactory.create(settings)

    renderer = render_prompt if settings.provider == "openai" else render_payload

    logger.info(
        "Workflow runner ready",
        extra={"agents": len(agents), "workflows": len(workflows), "provider": settings.provider},
    )
    return WorkflowRunner(
        agents=agents,
        workflows=workflows,
        provider=provider,
        max_workers=settings.max_workers,
        run_timeout_seconds=settings.run_timeout_seconds,
        renderer=renderer,
    )
