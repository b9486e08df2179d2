"""Prompt enrichment: turns a short user request into a structured expert prompt.

Sections, in fixed order:
1. Persona preamble
2. Context grounding (title, URL, source type, metadata, page excerpt)
3. User request, quoted verbatim after trimming
4. Chain-of-thought wrapper
5. Platform hint (known platforms only)
6. Quality-assurance checklist

Composition is deterministic; only the timing metric varies between calls.
"""

import logging
import time

from ..config.settings import settings
from ..context.models import PageContext
from ..prompts import render
from .models import BehemothPrompt, UserIntent
from .personas import ExpertPersona, get_persona, get_platform_hint

logger = logging.getLogger(__name__)

GROUNDING_META_KEYS = ("description", "og:description", "keywords")
META_SNIPPET_CHARS = 150
CONTENT_EXCERPT_CHARS = 2000
MIN_CONTENT_TOKENS = 50  # excerpts this small add noise rather than grounding


def build_persona_preamble(persona: ExpertPersona) -> str:
    """Opening sentence casting the model as the persona."""
    return render(
        "persona_preamble",
        role=persona.role,
        expertise=", ".join(persona.expertise),
        thinking_style=persona.thinking_style,
        output_format=persona.output_format,
    )


def build_context_grounding(context: PageContext) -> str:
    """Labeled reference section describing the page the user is on.

    Title and URL are always present, so the section is never empty.
    """
    lines = [
        "**Reference Context:**",
        f'- Page: "{context.title}"',
        f"- URL: {context.url}",
    ]

    if context.source_type != "generic":
        lines.append(f"- Source Type: {context.source_type.upper()}")

    for key in GROUNDING_META_KEYS:
        value = context.metadata.get(key)
        if value:
            lines.append(f"- {key}: {value[:META_SNIPPET_CHARS]}")

    if context.text_content and context.token_count > MIN_CONTENT_TOKENS:
        lines.append("\n**Page Content Summary:**")
        lines.append("```")
        lines.append(context.text_content[:CONTENT_EXCERPT_CHARS])
        lines.append("```")

    return "\n".join(lines)


def build_thinking_process(persona: ExpertPersona) -> str:
    """Chain-of-thought scaffold naming the persona's thinking style."""
    return render("thinking_process", thinking_style=persona.thinking_style)


def build_quality_assurance() -> str:
    """Closing self-review checklist."""
    return render("quality_assurance")


def enrich_prompt(
    user_text: str,
    context: PageContext,
    platform: str = "unknown",
) -> BehemothPrompt:
    """Compose the enriched prompt for a request on a given page.

    Args:
        user_text: Raw user request (trimmed for display, untrimmed for metrics).
        context: Page snapshot from the content extractor.
        platform: Target chat platform; unknown values get no platform hint.

    Returns:
        BehemothPrompt with the enriched text, persona, and metrics.
    """
    start = time.perf_counter()
    original = UserIntent(text=user_text)

    persona = get_persona(context.source_type)

    parts = [
        build_persona_preamble(persona),
        "",
        build_context_grounding(context),
        "",
        "---",
        "## User Request",
        "",
        f'"{user_text.strip()}"',
        "",
        "---",
        build_thinking_process(persona),
    ]

    platform_hint = get_platform_hint(platform)
    if platform_hint:
        parts.append(f"\n*Note: {platform_hint}*")

    parts.append("")
    parts.append(build_quality_assurance())

    enriched = "\n".join(parts)

    processing_time_ms = (time.perf_counter() - start) * 1000
    expansion_ratio = len(enriched) / max(1, len(user_text))

    warn_after_ms = settings.latency_budget_ms * settings.latency_warning_ratio
    if processing_time_ms > warn_after_ms:
        logger.warning(
            "[ENRICH] Enrichment took %.0fms (budget: %.0fms)",
            processing_time_ms,
            settings.latency_budget_ms,
        )

    return BehemothPrompt(
        original=original,
        enriched=enriched,
        persona=persona,
        context=context,
        expansion_ratio=expansion_ratio,
        processing_time_ms=processing_time_ms,
    )


def quick_enrich(user_text: str, platform: str = "unknown") -> str:
    """Minimal enrichment with the generic persona and no page context.

    The platform is accepted for call-site symmetry with enrich_prompt but
    does not change the output.
    """
    return render(
        "quick_enrich",
        persona_preamble=build_persona_preamble(get_persona("generic")),
        request=user_text.strip(),
    )
