"""Request boundary between the content surface and the enrichment pipeline."""

from .handler import build_validation_report, handle_enhance_request, process_enhance_request
from .models import EnhanceRequest, EnhanceResponse, PageContextPayload, ValidationReport

__all__ = [
    "EnhanceRequest",
    "EnhanceResponse",
    "PageContextPayload",
    "ValidationReport",
    "build_validation_report",
    "handle_enhance_request",
    "process_enhance_request",
]
