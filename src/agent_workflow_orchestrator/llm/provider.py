"""Abstract base class for capability providers."""

from abc import ABC, abstractmethod


class CapabilityProvider(ABC):
    """Executes the work of a single task.

    This interface allows pluggable backends (OpenAI, echo, test doubles).
    Implementations may be slow and are called from worker threads, one call
    per dispatched task.
    """

    @abstractmethod
    def execute(self, role: str, context: str) -> str:
        """Perform one task.

        Args:
            role: The assigned agent's role description.
            context: The rendered task context.

        Returns:
            Output text of the task.

        Raises:
            ProviderError: The call timed out, was rate limited, returned a
                malformed or empty response, or failed on the provider side.
        """
        pass
