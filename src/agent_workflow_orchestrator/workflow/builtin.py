"""Agents and workflows shipped with the content platform.

These are static data registered at startup; hosts can register more (or
overwrite these) on the same registries.
"""

from __future__ import annotations

from .models import Agent, TaskDefinition, WorkflowTemplate
from .registry import AgentRegistry, WorkflowCatalog

BUILTIN_AGENTS: tuple[Agent, ...] = (
    Agent.create(
        id="content-analyzer",
        name="Content Analyst",
        role=(
            "You are a professional content analyst. Analyse the topic, keywords and core "
            "arguments of an article; assess its quality, depth and value; extract key "
            "information and quotable lines; classify its difficulty and intended audience; "
            "and produce an accurate summary with tags. Stay objective and professional."
        ),
        capabilities=(
            "content_analysis",
            "keyword_extraction",
            "quality_assessment",
            "categorization",
        ),
    ),
    Agent.create(
        id="image-generator",
        name="Image Generator",
        role=(
            "You are a creative image designer. From the article content, write a visual "
            "description and concise prompts for a simple line-art illustration that is "
            "closely related to the topic, and offer several style options."
        ),
        capabilities=("image_generation", "visual_design", "creative_thinking", "style_adaptation"),
    ),
    Agent.create(
        id="content-enhancer",
        name="Content Enhancer",
        role=(
            "You are a content enhancement expert. Improve the title, sharpen the summary "
            "around the core value, add relevant background and context, and suggest "
            "reflection questions and further reading."
        ),
        capabilities=(
            "content_optimization",
            "title_generation",
            "summary_enhancement",
            "educational_design",
        ),
    ),
    Agent.create(
        id="trend-analyst",
        name="Trend Analyst",
        role=(
            "You are a technology and business trend analyst. Identify trend signals in the "
            "content, analyse their impact and opportunities, assess market shifts and give "
            "forward-looking strategic recommendations."
        ),
        capabilities=(
            "trend_analysis",
            "market_research",
            "strategic_thinking",
            "future_prediction",
        ),
    ),
    Agent.create(
        id="quality-controller",
        name="Quality Controller",
        role=(
            "You are a strict quality reviewer. Check the accuracy and credibility of the "
            "content, verify sources, assess completeness and logic, and return improvement "
            "suggestions together with a quality score."
        ),
        capabilities=(
            "quality_control",
            "fact_checking",
            "accuracy_verification",
            "standard_compliance",
        ),
    ),
)

BUILTIN_WORKFLOWS: tuple[WorkflowTemplate, ...] = (
    WorkflowTemplate(
        id="card-generation",
        name="Card generation",
        description="Generate a high-quality content card from a source article",
        entry_task_id="analyze-content",
        tasks=(
            TaskDefinition.create(
                id="analyze-content",
                description="Analyse the source content",
                agent_id="content-analyzer",
            ),
            TaskDefinition.create(
                id="generate-image",
                description="Design the card illustration",
                agent_id="image-generator",
                dependencies=["analyze-content"],
            ),
            TaskDefinition.create(
                id="enhance-content",
                description="Enhance title, summary and context",
                agent_id="content-enhancer",
                dependencies=["analyze-content"],
            ),
            TaskDefinition.create(
                id="quality-check",
                description="Review the generated card",
                agent_id="quality-controller",
                dependencies=["generate-image", "enhance-content"],
            ),
        ),
    ),
    WorkflowTemplate(
        id="trend-analysis",
        name="Trend analysis",
        description="Analyse trends and future directions in the content",
        entry_task_id="extract-signals",
        tasks=(
            TaskDefinition.create(
                id="extract-signals",
                description="Extract trend signals",
                agent_id="content-analyzer",
            ),
            TaskDefinition.create(
                id="analyze-trends",
                description="Analyse the trends",
                agent_id="trend-analyst",
                dependencies=["extract-signals"],
            ),
            TaskDefinition.create(
                id="validate-analysis",
                description="Validate the analysis",
                agent_id="quality-controller",
                dependencies=["analyze-trends"],
            ),
        ),
    ),
)


def load_builtin_catalog(agents: AgentRegistry, workflows: WorkflowCatalog) -> None:
    for agent in BUILTIN_AGENTS:
        agents.register(agent)
    for template in BUILTIN_WORKFLOWS:
        workflows.register(template)
