"""Pydantic models for the REST server."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from agent_workflow_orchestrator.workflow.models import Agent, WorkflowTemplate


class ApiAgent(BaseModel):
    id: str
    name: str
    role: str
    capabilities: list[str]

    @classmethod
    def from_agent(cls, agent: Agent) -> ApiAgent:
        return cls(
            id=agent.id,
            name=agent.name,
            role=agent.role,
            capabilities=sorted(agent.capabilities),
        )


class ApiTask(BaseModel):
    id: str
    description: str
    agent_id: str
    dependencies: list[str]


class ApiWorkflow(BaseModel):
    id: str
    name: str
    description: str
    entry_task_id: str
    tasks: list[ApiTask]

    @classmethod
    def from_template(cls, template: WorkflowTemplate) -> ApiWorkflow:
        return cls(
            id=template.id,
            name=template.name,
            description=template.description,
            entry_task_id=template.entry_task.id,
            tasks=[
                ApiTask(
                    id=t.id,
                    description=t.description,
                    agent_id=t.agent_id,
                    dependencies=sorted(t.dependencies),
                )
                for t in template.tasks
            ],
        )


class RunWorkflowRequest(BaseModel):
    workflow_id: str = Field(min_length=1)
    input: Any = None
    task_inputs: dict[str, Any] = Field(default_factory=dict)
