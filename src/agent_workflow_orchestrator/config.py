"""Configuration for the workflow orchestrator.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

Registries are not configured here; they are populated in code at startup
(see :mod:`agent_workflow_orchestrator.workflow.builtin`).
"""

from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class OrchestratorSettings(BaseSettings):
    """Settings for the workflow runner and its capability provider.

    Environment variables:
    - LOG_LEVEL                            (optional)
    - ORCHESTRATOR_PROVIDER                (optional, "echo" or "openai")
    - OPENAI_API_KEY                       (required for the openai provider)
    - ORCHESTRATOR_OPENAI_MODEL            (optional)
    - ORCHESTRATOR_MAX_WORKERS             (optional)
    - ORCHESTRATOR_RUN_TIMEOUT_SECONDS     (optional)
    - ORCHESTRATOR_STRICT_WORKFLOWS        (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `OrchestratorSettings(_env_file=path_to_env)`.
    """

    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("log_level", "LOG_LEVEL"),
        description="Root logging level",
    )

    provider: Literal["echo", "openai"] = Field(
        default="echo",
        validation_alias=AliasChoices("provider", "ORCHESTRATOR_PROVIDER"),
        description="Capability provider used to execute tasks",
    )

    openai_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "openai_api_key", "ORCHESTRATOR_OPENAI_API_KEY", "OPENAI_API_KEY"
        ),
        description="OpenAI API key",
    )
    openai_model: str = Field(
        default="gpt-4",
        validation_alias=AliasChoices("openai_model", "ORCHESTRATOR_OPENAI_MODEL"),
        description="OpenAI model to use",
    )
    openai_temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        validation_alias=AliasChoices("openai_temperature", "ORCHESTRATOR_OPENAI_TEMPERATURE"),
        description="Temperature for OpenAI model",
    )
    openai_max_tokens: int = Field(
        default=2000,
        gt=0,
        validation_alias=AliasChoices("openai_max_tokens", "ORCHESTRATOR_OPENAI_MAX_TOKENS"),
        description="Maximum tokens generated per task",
    )
    provider_timeout_seconds: float = Field(
        default=120.0,
        gt=0,
        validation_alias=AliasChoices(
            "provider_timeout_seconds", "ORCHESTRATOR_PROVIDER_TIMEOUT_SECONDS"
        ),
        description="Timeout for a single provider call",
    )

    max_workers: int | None = Field(
        default=None,
        gt=0,
        validation_alias=AliasChoices("max_workers", "ORCHESTRATOR_MAX_WORKERS"),
        description="Upper bound on concurrent tasks per round (None = round width)",
    )
    run_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        validation_alias=AliasChoices("run_timeout_seconds", "ORCHESTRATOR_RUN_TIMEOUT_SECONDS"),
        description="Overall run deadline, checked before each round",
    )
    strict_workflows: bool = Field(
        default=True,
        validation_alias=AliasChoices("strict_workflows", "ORCHESTRATOR_STRICT_WORKFLOWS"),
        description="Reject cyclic or dangling-dependency workflows at registration",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def _require_provider_credentials(self) -> OrchestratorSettings:
        if self.provider == "openai" and not (self.openai_api_key or "").strip():
            raise ValueError("OPENAI_API_KEY is required for the openai provider")
        return self
