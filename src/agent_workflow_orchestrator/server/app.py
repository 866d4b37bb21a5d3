"""FastAPI app factory.

Endpoints are intentionally thin wrappers over the workflow runner.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from agent_workflow_orchestrator import __version__
from agent_workflow_orchestrator.bootstrap import build_runner
from agent_workflow_orchestrator.config import OrchestratorSettings
from agent_workflow_orchestrator.server.models import ApiAgent, ApiWorkflow, RunWorkflowRequest
from agent_workflow_orchestrator.workflow.errors import InvalidWorkflowError, NotFoundError
from agent_workflow_orchestrator.workflow.report import WorkflowRunReport
from agent_workflow_orchestrator.workflow.runner import WorkflowRunner

logger = logging.getLogger(__name__)


def create_app(runner: WorkflowRunner | None = None) -> FastAPI:
    if runner is None:
        runner = build_runner(OrchestratorSettings())

    app = FastAPI(
        title="Agent Workflow Orchestrator",
        version=__version__,
        description="REST API over the workflow runner and its registries.",
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    # Expose the runner for request handlers that want to read it.
    app.state.runner = runner

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": __version__}

    @app.get("/api/agents", response_model=list[ApiAgent])
    def list_agents() -> list[ApiAgent]:
        return [ApiAgent.from_agent(a) for a in runner.agents.list()]

    @app.get("/api/workflows", response_model=list[ApiWorkflow])
    def list_workflows() -> list[ApiWorkflow]:
        return [ApiWorkflow.from_template(w) for w in runner.workflows.list()]

    @app.get("/api/workflows/{workflow_id}", response_model=ApiWorkflow)
    def get_workflow(workflow_id: str) -> ApiWorkflow:
        try:
            return ApiWorkflow.from_template(runner.workflows.get(workflow_id))
        except NotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e)) from e

    # Sync handler: FastAPI runs it in its threadpool, so a long run doesn't block the loop.
    @app.post("/api/workflows/run", response_model=WorkflowRunReport)
    def run_workflow(request: RunWorkflowRequest) -> WorkflowRunReport:
        try:
            return runner.run(
                request.workflow_id, request.input, task_inputs=request.task_inputs
            )
        except NotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e)) from e
        except InvalidWorkflowError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e

    return app
