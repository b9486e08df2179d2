"""Context readiness scoring.

Two independent derivations of a ContextLevel:
- from the token count alone (cheap, used once a PageContext exists)
- from a 0-100 readiness score over title, text, source type and metadata
"""

from dataclasses import dataclass

from ..config.settings import settings
from .models import UNTITLED_PAGE, ContextLevel, PageContext

HIGH_TOKEN_THRESHOLD = 500
MEDIUM_TOKEN_THRESHOLD = 100

HIGH_SCORE_THRESHOLD = 70
MEDIUM_SCORE_THRESHOLD = 40


@dataclass(frozen=True)
class ContextReadiness:
    """Score plus both level derivations for one context."""

    score: int
    level: ContextLevel  # from score
    token_level: ContextLevel  # from token count


def level_from_token_count(token_count: int) -> ContextLevel:
    """high above 500 tokens, medium above 100, otherwise low."""
    if token_count > HIGH_TOKEN_THRESHOLD:
        return "high"
    if token_count > MEDIUM_TOKEN_THRESHOLD:
        return "medium"
    return "low"


def calculate_context_score(context: PageContext) -> int:
    """Readiness score in [0, 100].

    - Title present (not the placeholder): +20
    - Text volume: up to +40, linear in token_count / settings.max_tokens
    - Known source type: +20
    - Metadata: +4 per entry, up to +20
    """
    score = 0.0

    if context.title and context.title != UNTITLED_PAGE:
        score += 20

    score += min(40, context.token_count / max(1, settings.max_tokens) * 40)

    if context.source_type != "generic":
        score += 20

    score += min(20, len(context.metadata) * 4)

    # int(x + 0.5) rounds halves up; the sum is never negative
    return int(min(100, score) + 0.5)


def level_from_score(score: int) -> ContextLevel:
    """high above 70, medium above 40, otherwise low."""
    if score > HIGH_SCORE_THRESHOLD:
        return "high"
    if score > MEDIUM_SCORE_THRESHOLD:
        return "medium"
    return "low"


def assess_context(context: PageContext) -> ContextReadiness:
    """Score a context and derive both levels."""
    score = calculate_context_score(context)
    return ContextReadiness(
        score=score,
        level=level_from_score(score),
        token_level=level_from_token_count(context.token_count),
    )
