"""Unit tests for the REST adapter."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from agent_workflow_orchestrator.bootstrap import build_runner
from agent_workflow_orchestrator.config import OrchestratorSettings
from agent_workflow_orchestrator.server.app import create_app


@pytest.fixture
def client(provider) -> TestClient:
    return TestClient(create_app(build_runner(OrchestratorSettings(), provider=provider)))


def test_health_and_listing(client: TestClient) -> None:
    assert client.get("/api/health").json()["status"] == "ok"

    agents = client.get("/api/agents").json()
    assert {a["id"] for a in agents} >= {"content-analyzer", "quality-controller"}

    workflows = client.get("/api/workflows").json()
    assert [w["id"] for w in workflows] == ["card-generation", "trend-analysis"]


def test_get_workflow(client: TestClient) -> None:
    resp = client.get("/api/workflows/trend-analysis")

    assert resp.status_code == 200
    assert [t["id"] for t in resp.json()["tasks"]] == [
        "extract-signals",
        "analyze-trends",
        "validate-analysis",
    ]
    assert client.get("/api/workflows/missing").status_code == 404


def test_run_workflow_returns_report(client: TestClient) -> None:
    resp = client.post(
        "/api/workflows/run",
        json={"workflow_id": "card-generation", "input": {"url": "https://example.com"}},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "completed"
    assert body["outcome"] == "completed"
    assert body["rounds"] == 3
    assert set(body["results"]) == {
        "analyze-content",
        "generate-image",
        "enhance-content",
        "quality-check",
    }


def test_run_workflow_errors(client: TestClient) -> None:
    missing = client.post("/api/workflows/run", json={"workflow_id": "missing"})
    assert missing.status_code == 404

    bad_inputs = client.post(
        "/api/workflows/run",
        json={"workflow_id": "trend-analysis", "task_inputs": {"nope": 1}},
    )
    assert bad_inputs.status_code == 400

    assert client.post("/api/workflows/run", json={}).status_code == 422


def test_create_app_builds_runner_from_settings() -> None:
    app = create_app()

    assert len(app.state.runner.workflows) == 2
