"""Data models for enrichment inputs and results."""

import time
from dataclasses import dataclass, field

from ..context.models import PageContext
from .personas import ExpertPersona


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class UserIntent:
    """The user's request as typed, untrimmed."""

    text: str
    timestamp: int = field(default_factory=_now_ms)  # epoch milliseconds


@dataclass(frozen=True)
class BehemothPrompt:
    """An enriched prompt plus the inputs and metrics that produced it."""

    original: UserIntent
    enriched: str
    persona: ExpertPersona
    context: PageContext
    expansion_ratio: float  # len(enriched) / max(1, len(original.text))
    processing_time_ms: float
