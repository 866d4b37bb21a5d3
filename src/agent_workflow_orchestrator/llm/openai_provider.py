"""OpenAI capability provider implementation."""

import logging

import openai
from openai import OpenAI

from agent_workflow_orchestrator.config import OrchestratorSettings
from agent_workflow_orchestrator.llm.provider import CapabilityProvider
from agent_workflow_orchestrator.workflow.errors import ProviderError

logger = logging.getLogger(__name__)


class OpenAIProvider(CapabilityProvider):
    """Runs each task as a chat completion.

    The agent role is sent as the system message and the task context as the
    user message.
    """

    def __init__(self, settings: OrchestratorSettings, client: OpenAI | None = None) -> None:
        """Initialize the OpenAI provider.

        Args:
            settings: Orchestrator settings.
            client: Preconfigured client (tests); built from settings when omitted.

        Raises:
            ValueError: If API key is not provided.
        """
        if client is None:
            if not settings.openai_api_key:
                raise ValueError("OpenAI API key is required")
            client = OpenAI(
                api_key=settings.openai_api_key,
                timeout=settings.provider_timeout_seconds,
                max_retries=0,
            )

        self.client = client
        self.model = settings.openai_model
        self.temperature = settings.openai_temperature
        self.max_tokens = settings.openai_max_tokens

        logger.info(f"OpenAI provider initialized with model: {self.model}")

    def execute(self, role: str, context: str) -> str:
        logger.debug(f"Executing task with context: {context[:100]}...")

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": role},
                    {"role": "user", "content": context},
                ],
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except openai.APITimeoutError as e:
            raise ProviderError(f"OpenAI request timed out: {e}", reason="timeout") from e
        except openai.RateLimitError as e:
            raise ProviderError(f"OpenAI rate limit: {e}", reason="rate_limited") from e
        except openai.OpenAIError as e:
            raise ProviderError(f"OpenAI request failed: {e}") from e

        if not response.choices:
            raise ProviderError("OpenAI returned no choices", reason="malformed_response")

        content = response.choices[0].message.content or ""
        if not content.strip():
            raise ProviderError("OpenAI returned an empty response", reason="malformed_response")

        logger.debug(f"Generated {len(content)} characters")
        return content
