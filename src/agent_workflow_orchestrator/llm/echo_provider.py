"""Offline provider that echoes the task context back."""

import logging
from collections.abc import Iterable

from agent_workflow_orchestrator.llm.provider import CapabilityProvider
from agent_workflow_orchestrator.workflow.errors import ProviderError

logger = logging.getLogger(__name__)


class EchoProvider(CapabilityProvider):
    """Returns the context unchanged.

    Useful for smoke-testing workflow wiring without network access. Any
    context containing one of ``fail_markers`` raises ``ProviderError``.
    """

    def __init__(self, fail_markers: Iterable[str] = ()) -> None:
        self.fail_markers = tuple(fail_markers)

    def execute(self, role: str, context: str) -> str:
        for marker in self.fail_markers:
            if marker in context:
                raise ProviderError(f"Echo provider configured to fail on {marker!r}")

        logger.debug(f"Echoing {len(context)} characters")
        return context
