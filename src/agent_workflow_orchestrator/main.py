"""CLI entrypoint for the workflow orchestrator."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from agent_workflow_orchestrator import __version__
from agent_workflow_orchestrator.bootstrap import build_runner
from agent_workflow_orchestrator.config import OrchestratorSettings
from agent_workflow_orchestrator.logging import configure_logging
from agent_workflow_orchestrator.workflow.errors import InvalidWorkflowError, NotFoundError
from agent_workflow_orchestrator.workflow.models import RunStatus

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="workflow-orchestrator",
        description="Run agent workflows with dependency-ordered parallel rounds",
    )
    parser.add_argument(
        "--version", action="version", version=f"agent-workflow-orchestrator {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("agents", help="List registered agents")
    subparsers.add_parser("workflows", help="List registered workflow templates")

    run = subparsers.add_parser("run", help="Run a workflow and print its report as JSON")
    run.add_argument("--workflow", required=True, help="Workflow id, e.g. 'card-generation'")
    source = run.add_mutually_exclusive_group()
    source.add_argument("--input", default=None, help="Initial input text for the entry task")
    source.add_argument(
        "--input-json",
        default=None,
        help="Initial input for the entry task as a JSON document",
    )

    return parser


def _print_json(payload: object) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = OrchestratorSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    try:
        runner = build_runner(settings)

        if args.command == "agents":
            _print_json(
                [
                    {
                        "id": a.id,
                        "name": a.name,
                        "role": a.role,
                        "capabilities": sorted(a.capabilities),
                    }
                    for a in runner.agents.list()
                ]
            )
            return 0

        if args.command == "workflows":
            _print_json(
                [
                    {
                        "id": w.id,
                        "name": w.name,
                        "description": w.description,
                        "entry_task_id": w.entry_task.id,
                        "tasks": [
                            {
                                "id": t.id,
                                "agent_id": t.agent_id,
                                "dependencies": sorted(t.dependencies),
                            }
                            for t in w.tasks
                        ],
                    }
                    for w in runner.workflows.list()
                ]
            )
            return 0

        if args.command == "run":
            initial_input: object = args.input
            if args.input_json is not None:
                try:
                    initial_input = json.loads(args.input_json)
                except json.JSONDecodeError as e:
                    print(f"Invalid --input-json: {e}", file=sys.stderr)
                    return 2

            report = runner.run(args.workflow, initial_input)
            _print_json(report.model_dump(mode="json"))
            return 0 if report.status is RunStatus.COMPLETED else 1

        logger.error("Unknown command", extra={"command": args.command})
        return 2

    except (NotFoundError, InvalidWorkflowError) as e:
        logger.warning(str(e))
        print(str(e), file=sys.stderr)
        return 2

    except Exception:
        logger.exception("Command failed")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
