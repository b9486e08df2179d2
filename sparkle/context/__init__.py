"""Page context: classification, extraction and readiness scoring."""

from .classifier import detect_platform, detect_source_type, is_supported_platform, normalize_platform
from .document import DocumentView, HtmlDocument, StaticDocument
from .extractor import (
    build_page_context,
    extract_metadata,
    extract_text_content,
    scrape_page_context,
    scrape_quick_context,
)
from .models import (
    CONTEXT_LIMITS,
    LATENCY_BUDGET_MS,
    MAX_CHARS,
    MAX_TOKENS,
    ContextLevel,
    PageContext,
    Platform,
    QuickContext,
    SourceType,
)
from .scorer import (
    ContextReadiness,
    assess_context,
    calculate_context_score,
    level_from_score,
    level_from_token_count,
)
from .tokens import estimate_tokens, truncate_to_token_budget

__all__ = [
    "CONTEXT_LIMITS",
    "LATENCY_BUDGET_MS",
    "MAX_CHARS",
    "MAX_TOKENS",
    "ContextLevel",
    "ContextReadiness",
    "DocumentView",
    "HtmlDocument",
    "PageContext",
    "Platform",
    "QuickContext",
    "SourceType",
    "StaticDocument",
    "assess_context",
    "build_page_context",
    "calculate_context_score",
    "detect_platform",
    "detect_source_type",
    "estimate_tokens",
    "extract_metadata",
    "extract_text_content",
    "is_supported_platform",
    "level_from_score",
    "level_from_token_count",
    "normalize_platform",
    "scrape_page_context",
    "scrape_quick_context",
    "truncate_to_token_budget",
]
