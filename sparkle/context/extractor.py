"""Budgeted page-text extraction.

Harvests a priority-ordered excerpt from a DocumentView:

1. Headings
2. Code blocks
3. Main-content paragraphs
4. Active selection (prepended, outside the running budget)

Tiers 1-3 run as a fixed list of stages over one shared TokenBudget. The
budget charges every emitted part including its prefix and joining separator,
so their combined text never exceeds ``max_tokens * 4`` characters.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from ..config.settings import settings
from .classifier import detect_source_type, extract_domain
from .document import DocumentView, HtmlDocument
from .models import UNTITLED_PAGE, PageContext, QuickContext
from .tokens import estimate_tokens, truncate_to_token_budget

logger = logging.getLogger(__name__)

PART_SEPARATOR = "\n\n"

HEADING_PREFIX = "[Heading] "
CODE_PREFIX = "[Code]\n"
SELECTION_PREFIX = "[Selected Text] "

MAX_CODE_TOKENS = 500
MAX_SELECTION_TOKENS = 300
MIN_PARAGRAPH_CHARS = 50  # shorter paragraphs are navigation/boilerplate
MIN_SELECTION_CHARS = 10

META_VALUE_CHARS = 200
OG_DESCRIPTION_CHARS = 300


class TokenBudget:
    """Accumulates excerpt parts without ever exceeding max_tokens."""

    def __init__(self, max_tokens: int):
        self.max_tokens = max_tokens
        self.used = 0
        self.parts: list[str] = []

    @property
    def remaining(self) -> int:
        return self.max_tokens - self.used

    def cost(self, part: str) -> int:
        """Tokens charged for appending part, separator included."""
        separator = PART_SEPARATOR if self.parts else ""
        return estimate_tokens(separator + part)

    def offer(self, part: str) -> bool:
        """Append part if it fits the remaining budget. Never appends partially."""
        tokens = self.cost(part)
        if tokens > self.remaining:
            return False
        self.parts.append(part)
        self.used += tokens
        return True


@dataclass
class StageResult:
    """What one extraction stage contributed."""

    stage: str
    parts_added: int
    tokens_used: int


def _extract_headings(document: DocumentView, budget: TokenBudget) -> int:
    added = 0
    for raw in document.headings():
        text = raw.strip()
        # A heading that doesn't fit is skipped; later, shorter ones may still fit
        if text and budget.remaining > 0 and budget.offer(f"{HEADING_PREFIX}{text}"):
            added += 1
    return added


def _extract_code_blocks(document: DocumentView, budget: TokenBudget) -> int:
    added = 0
    for raw in document.code_blocks():
        text = raw.strip()
        if not text or budget.remaining <= 0:
            continue
        allowance = min(MAX_CODE_TOKENS, budget.remaining - budget.cost(CODE_PREFIX))
        truncated = truncate_to_token_budget(text, allowance)
        if truncated and budget.offer(f"{CODE_PREFIX}{truncated}"):
            added += 1
    return added


def _extract_main_content(document: DocumentView, budget: TokenBudget) -> int:
    added = 0
    for raw in document.main_paragraphs():
        text = raw.strip()
        if len(text) > MIN_PARAGRAPH_CHARS and budget.remaining > 0 and budget.offer(text):
            added += 1
    return added


# Priority order
EXTRACTION_STAGES: list[tuple[str, Callable[[DocumentView, TokenBudget], int]]] = [
    ("headings", _extract_headings),
    ("code", _extract_code_blocks),
    ("main_content", _extract_main_content),
]


def run_extraction_stages(document: DocumentView, budget: TokenBudget) -> list[StageResult]:
    """Run every budgeted stage in priority order against one shared budget."""
    results = []
    for name, stage in EXTRACTION_STAGES:
        before = budget.used
        added = stage(document, budget)
        results.append(StageResult(stage=name, parts_added=added, tokens_used=budget.used - before))
    return results


def extract_text_content(document: DocumentView, max_tokens: Optional[int] = None) -> str:
    """Build the prioritized, token-budgeted excerpt of a document.

    Args:
        document: Read-only document view to harvest from.
        max_tokens: Token budget for headings, code and paragraphs
            (default: settings.max_tokens).

    Returns:
        Excerpt with parts separated by blank lines; '' when the document
        offers nothing usable.
    """
    if max_tokens is None:
        max_tokens = settings.max_tokens

    budget = TokenBudget(max_tokens)
    for result in run_extraction_stages(document, budget):
        logger.debug(
            "[EXTRACT] %s: %d parts, %d tokens",
            result.stage,
            result.parts_added,
            result.tokens_used,
        )

    parts = list(budget.parts)

    # Selection always wins a place at the front, independent of the budget above
    selection = document.selection().strip()
    if len(selection) > MIN_SELECTION_CHARS:
        truncated = truncate_to_token_budget(selection, min(MAX_SELECTION_TOKENS, max_tokens))
        if truncated:
            parts.insert(0, f"{SELECTION_PREFIX}{truncated}")

    return PART_SEPARATOR.join(parts)


def extract_metadata(document: HtmlDocument) -> dict[str, str]:
    """Collect meta tag values keyed by name/property.

    Values are capped at 200 characters, og:description at 300; og:title is
    kept in full.
    """
    metadata: dict[str, str] = {}

    for name, content in document.meta_tags():
        metadata[name] = content[:META_VALUE_CHARS]

    # og:title is kept whole
    og_title = document.meta_content("og:title")
    if og_title:
        metadata["og:title"] = og_title

    # og:description gets a longer allowance than other tags
    og_description = document.meta_content("og:description")
    if og_description:
        metadata["og:description"] = og_description[:OG_DESCRIPTION_CHARS]

    return metadata


def build_page_context(
    document: DocumentView,
    url: str,
    title: str = "",
    metadata: Optional[dict[str, str]] = None,
    max_tokens: Optional[int] = None,
) -> PageContext:
    """Assemble a PageContext from any DocumentView plus page identity."""
    text_content = extract_text_content(document, max_tokens)
    return PageContext(
        title=title or UNTITLED_PAGE,
        url=url,
        domain=extract_domain(url),
        source_type=detect_source_type(url),
        text_content=text_content,
        metadata=dict(metadata or {}),
        token_count=estimate_tokens(text_content),
    )


def scrape_page_context(
    html: str,
    url: str,
    selection: str = "",
    max_tokens: Optional[int] = None,
) -> PageContext:
    """Scrape a full PageContext from page HTML.

    Args:
        html: Page markup.
        url: Page URL; decides domain and source type.
        selection: Text the user currently has selected on the page.
        max_tokens: Extraction budget (default: settings.max_tokens).

    Returns:
        PageContext with budgeted text content and capped metadata.
    """
    start = time.perf_counter()

    document = HtmlDocument(html, selection=selection)
    context = build_page_context(
        document,
        url,
        title=document.title(),
        metadata=extract_metadata(document),
        max_tokens=max_tokens,
    )

    elapsed_ms = (time.perf_counter() - start) * 1000
    if elapsed_ms > settings.latency_budget_ms * settings.scrape_warning_ratio:
        logger.warning("[SCRAPE] Context scraping took %.0fms for %s", elapsed_ms, url)
    else:
        logger.debug("[SCRAPE] %d tokens from %s in %.1fms", context.token_count, url, elapsed_ms)

    return context


def scrape_quick_context(html: str, url: str) -> QuickContext:
    """Title, URL, domain and source type only; used for instant feedback."""
    return QuickContext(
        title=HtmlDocument(html).title() or "Untitled",
        url=url,
        domain=extract_domain(url),
        source_type=detect_source_type(url),
    )
