"""Pydantic request/response models for the enrichment boundary.

Field names are snake_case in Python and camelCase on the wire.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from ..context.classifier import normalize_platform
from ..context.models import SOURCE_TYPES, PageContext


class WireModel(BaseModel):
    """Base for models exchanged as camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        """Serialize with camelCase keys, omitting absent optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class PageContextPayload(WireModel):
    """Page context as sent by the content surface."""

    title: str
    url: str
    domain: str = ""
    source_type: str = "generic"
    text_content: str = ""
    metadata: dict[str, str] = {}
    token_count: Optional[int] = None

    @field_validator("source_type")
    @classmethod
    def validate_source_type(cls, v: str) -> str:
        # Unrecognised categories get the generic persona
        return v if v in SOURCE_TYPES else "generic"

    def to_page_context(self) -> PageContext:
        return PageContext(
            title=self.title,
            url=self.url,
            domain=self.domain,
            source_type=self.source_type,
            text_content=self.text_content,
            metadata=dict(self.metadata),
            token_count=self.token_count,
        )


class EnhanceRequest(WireModel):
    """Request body for a prompt enhancement."""

    user_text: str
    context: PageContextPayload
    platform: str = "unknown"

    @field_validator("platform", mode="before")
    @classmethod
    def validate_platform(cls, v: Optional[str]) -> str:
        return normalize_platform(v)


class EnhanceResponse(WireModel):
    """Response body for a prompt enhancement.

    enriched_prompt is set iff success; error is set iff not.
    """

    success: bool
    enriched_prompt: Optional[str] = None
    error: Optional[str] = None
    processing_time_ms: float


class ValidationReport(WireModel):
    """Diagnostic view of an enriched prompt's quality checks."""

    valid: bool
    issues: list[str] = []
    expansion_ratio: float
    processing_time_ms: float
