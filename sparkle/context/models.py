"""Shared types and limits for page context.

SourceType, Platform and ContextLevel are closed sets expressed as Literal
aliases with a tuple of their values for runtime checks.
"""

from dataclasses import dataclass, field
from typing import Literal, Optional

from .tokens import estimate_tokens

SourceType = Literal["github", "arxiv", "jira", "stackoverflow", "docs", "generic"]
SOURCE_TYPES: tuple[str, ...] = ("github", "arxiv", "jira", "stackoverflow", "docs", "generic")

Platform = Literal["chatgpt", "claude", "gemini", "unknown"]
PLATFORMS: tuple[str, ...] = ("chatgpt", "claude", "gemini", "unknown")

# Ordered low -> high
ContextLevel = Literal["low", "medium", "high"]

# Token and context limits
MAX_TOKENS = 2000
MAX_CHARS = 8000
LATENCY_BUDGET_MS = 500

CONTEXT_LIMITS = {
    "MAX_TOKENS": MAX_TOKENS,
    "MAX_CHARS": MAX_CHARS,
    "LATENCY_BUDGET_MS": LATENCY_BUDGET_MS,
}

UNTITLED_PAGE = "Untitled Page"


@dataclass(frozen=True)
class PageContext:
    """Immutable snapshot of the page a prompt is written against."""

    title: str
    url: str
    domain: str = ""
    source_type: SourceType = "generic"
    text_content: str = ""
    metadata: dict[str, str] = field(default_factory=dict)
    token_count: Optional[int] = None  # derived from text_content when omitted

    def __post_init__(self) -> None:
        if self.token_count is None:
            object.__setattr__(self, "token_count", estimate_tokens(self.text_content))

    def to_dict(self) -> dict:
        """Convert to the camelCase shape used across the request boundary."""
        return {
            "title": self.title,
            "url": self.url,
            "domain": self.domain,
            "sourceType": self.source_type,
            "textContent": self.text_content,
            "metadata": dict(self.metadata),
            "tokenCount": self.token_count,
        }


@dataclass(frozen=True)
class QuickContext:
    """Minimal page context for instant feedback, without any text harvesting."""

    title: str
    url: str
    domain: str
    source_type: SourceType
