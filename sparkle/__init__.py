"""Magic Sparkle: context-aware prompt enrichment."""

from .app import handle_enhance_request
from .context import PageContext, calculate_context_score, scrape_page_context
from .pipeline import BehemothPrompt, enrich_prompt, quick_enrich, validate_enriched_prompt

__version__ = "0.1.0"

__all__ = [
    "BehemothPrompt",
    "PageContext",
    "calculate_context_score",
    "enrich_prompt",
    "handle_enhance_request",
    "quick_enrich",
    "scrape_page_context",
    "validate_enriched_prompt",
]
