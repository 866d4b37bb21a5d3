#!/usr/bin/env python3
"""Programmatic workflow example.

This demonstrates using the orchestrator components directly:

* register agents and a workflow template on isolated registries
* run it with the offline echo provider
* print the per-task report
"""

from __future__ import annotations

import argparse
from typing import Sequence

from agent_workflow_orchestrator.llm.echo_provider import EchoProvider
from agent_workflow_orchestrator.logging import configure_logging
from agent_workflow_orchestrator.workflow import (
    Agent,
    AgentRegistry,
    TaskDefinition,
    WorkflowCatalog,
    WorkflowRunner,
    WorkflowTemplate,
)


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a small fan-out workflow (example).")
    parser.add_argument("--input", default="hello", help="Initial input of the entry task")
    parser.add_argument(
        "--fail-on",
        default="",
        help="Make the echo provider fail for any context containing this text (optional)",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging(args.log_level)

    agents = AgentRegistry()
    agents.register(Agent.create(id="echo", name="Echo", role="Repeat the input."))

    workflows = WorkflowCatalog(strict=True)
    workflows.register(
        WorkflowTemplate(
            id="fan-out",
            name="Fan out",
            entry_task_id="a",
            tasks=(
                TaskDefinition.create(id="a", description="Seed", agent_id="echo"),
                TaskDefinition.create(
                    id="b", description="Left", agent_id="echo", dependencies=["a"]
                ),
                TaskDefinition.create(
                    id="c", description="Right", agent_id="echo", dependencies=["a"]
                ),
            ),
        )
    )

    markers = [args.fail_on] if args.fail_on else []
    runner = WorkflowRunner(agents=agents, workflows=workflows, provider=EchoProvider(markers))
    report = runner.run("fan-out", args.input)

    print(f"Run {report.run_id}: {report.status.value} ({report.outcome.value})")
    for task in report.tasks:
        detail = task.error or task.output or ", ".join(task.blocked_by)
        print(f"  {task.task_id:<4} {task.status.value:<10} round={task.round} {detail!r}")
    return 0 if report.outcome.value == "completed" else 1


if __name__ == "__main__":
    raise SystemExit(main())
