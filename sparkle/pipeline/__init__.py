"""Enrichment pipeline: personas, prompt assembly and output validation."""

from .enrichment import enrich_prompt, quick_enrich
from .models import BehemothPrompt, UserIntent
from .personas import EXPERT_PERSONAS, PLATFORM_HINTS, ExpertPersona, get_persona, get_platform_hint
from .validator import PromptValidator, ValidationResult, validate_enriched_prompt

__all__ = [
    "EXPERT_PERSONAS",
    "PLATFORM_HINTS",
    "BehemothPrompt",
    "ExpertPersona",
    "PromptValidator",
    "UserIntent",
    "ValidationResult",
    "enrich_prompt",
    "get_persona",
    "get_platform_hint",
    "quick_enrich",
    "validate_enriched_prompt",
]
