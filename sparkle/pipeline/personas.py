"""Expert personas and platform hints.

Both tables are closed, keyed by every SourceType / Platform value.
"""

from dataclasses import dataclass

from ..context.models import Platform, SourceType


@dataclass(frozen=True)
class ExpertPersona:
    """Domain expert the enriched prompt is framed around."""

    role: str
    expertise: tuple[str, ...]
    thinking_style: str
    output_format: str

    def to_dict(self) -> dict:
        return {
            "role": self.role,
            "expertise": list(self.expertise),
            "thinkingStyle": self.thinking_style,
            "outputFormat": self.output_format,
        }


EXPERT_PERSONAS: dict[SourceType, ExpertPersona] = {
    "github": ExpertPersona(
        role="Senior Software Engineer",
        expertise=("code review", "software architecture", "best practices", "debugging"),
        thinking_style="systematic problem decomposition with edge case analysis",
        output_format="structured code with inline documentation",
    ),
    "arxiv": ExpertPersona(
        role="Research Scientist",
        expertise=("academic research", "paper analysis", "methodology critique", "statistical rigor"),
        thinking_style="critical evaluation with citations and limitations",
        output_format="structured analysis with key findings and implications",
    ),
    "jira": ExpertPersona(
        role="Technical Project Manager",
        expertise=(
            "requirements analysis",
            "task breakdown",
            "sprint planning",
            "technical communication",
        ),
        thinking_style="user-story driven with acceptance criteria",
        output_format="actionable items with clear deliverables",
    ),
    "stackoverflow": ExpertPersona(
        role="Senior Developer & Technical Writer",
        expertise=("debugging", "solution comparison", "code examples", "common pitfalls"),
        thinking_style="root cause analysis with multiple solution approaches",
        output_format="clear explanation with working code examples",
    ),
    "docs": ExpertPersona(
        role="Technical Documentation Expert",
        expertise=("API documentation", "tutorials", "integration guides", "best practices"),
        thinking_style="step-by-step guidance with practical examples",
        output_format="clear documentation with code snippets",
    ),
    "generic": ExpertPersona(
        role="Senior Expert Consultant",
        expertise=(
            "analysis",
            "problem-solving",
            "comprehensive explanations",
            "best practices",
        ),
        thinking_style="thorough analysis considering multiple perspectives",
        output_format="well-structured response with actionable insights",
    ),
}

PLATFORM_HINTS: dict[Platform, str] = {
    "chatgpt": "Leverage GPT's strength in creative problem-solving and code generation.",
    "claude": "Utilize Claude's attention to nuance and comprehensive reasoning.",
    "gemini": "Take advantage of Gemini's multimodal understanding and up-to-date knowledge.",
    "unknown": "",
}


def get_persona(source_type: str) -> ExpertPersona:
    """Persona for a source type; anything unrecognised gets the generic one."""
    return EXPERT_PERSONAS.get(source_type, EXPERT_PERSONAS["generic"])


def get_platform_hint(platform: str) -> str:
    """One-sentence guidance for a platform, '' for unknown platforms."""
    return PLATFORM_HINTS.get(platform, "")
