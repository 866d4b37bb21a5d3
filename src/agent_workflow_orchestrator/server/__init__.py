"""FastAPI server adapter for agent-workflow-orchestrator.

Design intent:
- Keep scheduling logic in `agent_workflow_orchestrator.workflow.*`
- Keep server-specific concerns (routing, status codes) here
"""

from __future__ import annotations

__all__ = ["create_app"]

from agent_workflow_orchestrator.server.app import create_app
