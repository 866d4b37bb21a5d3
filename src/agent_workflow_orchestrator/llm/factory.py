"""Factory for creating capability providers."""

import logging

from agent_workflow_orchestrator.config import OrchestratorSettings
from agent_workflow_orchestrator.llm.echo_provider import EchoProvider
from agent_workflow_orchestrator.llm.openai_provider import OpenAIProvider
from agent_workflow_orchestrator.llm.provider import CapabilityProvider

logger = logging.getLogger(__name__)


class ProviderFactory:
    """Factory for creating capability provider instances."""

    @staticmethod
    def create(settings: OrchestratorSettings) -> CapabilityProvider:
        """Create a capability provider based on settings.

        Args:
            settings: Settings specifying the provider.

        Returns:
            Configured provider instance.

        Raises:
            ValueError: If provider type is not supported.
        """
        logger.info(f"Creating capability provider: {settings.provider}")

        if settings.provider == "openai":
            return OpenAIProvider(settings)
        elif settings.provider == "echo":
            return EchoProvider()
        else:
            raise ValueError(f"Unsupported capability provider: {settings.provider}")
