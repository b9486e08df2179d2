"""Request boundary for prompt enhancement.

Turns a raw request body into an EnhanceResponse. Nothing raises past this
point: bad input and unexpected failures both come back as
``success=False`` responses, and processing time is always reported.
"""

import logging
import time
from typing import Any, Optional

from pydantic import ValidationError

from ..config.settings import settings
from ..context.models import PageContext
from ..pipeline.enrichment import enrich_prompt
from ..pipeline.models import BehemothPrompt
from ..pipeline.validator import validate_enriched_prompt
from .models import EnhanceRequest, EnhanceResponse, ValidationReport

logger = logging.getLogger(__name__)


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


def _failure(error: str, start: float) -> EnhanceResponse:
    return EnhanceResponse(success=False, error=error, processing_time_ms=_elapsed_ms(start))


def build_validation_report(result: BehemothPrompt) -> ValidationReport:
    """Run the quality checks and package them with the metrics they judged."""
    validation = validate_enriched_prompt(result)
    return ValidationReport(
        valid=validation.valid,
        issues=validation.issues,
        expansion_ratio=result.expansion_ratio,
        processing_time_ms=result.processing_time_ms,
    )


def handle_enhance_request(body: Optional[dict[str, Any]]) -> EnhanceResponse:
    """Validate a request body, run enrichment and report the outcome.

    Args:
        body: Request dict with ``userText``, ``context`` and optional
            ``platform``. ``context`` may be a camelCase dict or a PageContext.

    Returns:
        EnhanceResponse; failures carry a descriptive error message.
    """
    response, _ = process_enhance_request(body)
    return response


def process_enhance_request(
    body: Optional[dict[str, Any]],
) -> tuple[EnhanceResponse, Optional[ValidationReport]]:
    """Like handle_enhance_request, also returning the quality report.

    The report judges the same enrichment run the response carries; it is
    None when the request failed.
    """
    start = time.perf_counter()

    try:
        if not isinstance(body, dict):
            body = {}

        user_text = body.get("userText")
        if not user_text or not isinstance(user_text, str):
            return _failure("Missing or invalid user text", start), None

        raw_context = body.get("context")
        if not raw_context:
            return _failure("Missing page context", start), None
        if isinstance(raw_context, PageContext):
            raw_context = raw_context.to_dict()

        try:
            request = EnhanceRequest.model_validate(
                {"userText": user_text, "context": raw_context, "platform": body.get("platform")}
            )
        except ValidationError as e:
            logger.info("[ENHANCE] Rejected page context: %s", e)
            return _failure(f"Invalid page context: {e.error_count()} validation error(s)", start), None

        result = enrich_prompt(request.user_text, request.context.to_page_context(), request.platform)

        report = build_validation_report(result)
        if not report.valid:
            logger.info("[ENHANCE] Quality issues: %s", "; ".join(report.issues))

        processing_time_ms = _elapsed_ms(start)
        logger.info(
            "[ENHANCE] Enrichment completed: %d -> %d chars (%.1fx) in %.0fms, within budget: %s",
            len(user_text),
            len(result.enriched),
            result.expansion_ratio,
            processing_time_ms,
            processing_time_ms < settings.latency_budget_ms,
        )

        response = EnhanceResponse(
            success=True,
            enriched_prompt=result.enriched,
            processing_time_ms=processing_time_ms,
        )
        return response, report

    except Exception as e:
        logger.exception("[ENHANCE] Enhancement error")
        return _failure(str(e) or "Unknown error occurred", start), None
