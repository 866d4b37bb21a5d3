"""Agent Workflow Orchestrator.

Runs declarative workflows of interdependent agent tasks:
- in-memory agent and workflow registries
- a round-based scheduler with dependency-correct parallel dispatch
- pluggable capability providers (echo, OpenAI)
- a CLI and a thin FastAPI adapter
"""

__version__ = "0.1.0"

from agent_workflow_orchestrator.config import OrchestratorSettings

__all__ = ["__version__", "OrchestratorSettings"]
