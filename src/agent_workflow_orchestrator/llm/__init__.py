"""LLM package initialization."""

from agent_workflow_orchestrator.llm.echo_provider import EchoProvider
from agent_workflow_orchestrator.llm.factory import ProviderFactory
from agent_workflow_orchestrator.llm.provider import CapabilityProvider

__all__ = [
    "CapabilityProvider",
    "EchoProvider",
    "ProviderFactory",
]
