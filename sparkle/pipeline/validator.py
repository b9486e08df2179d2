"""Quality checks for enriched prompts.

Advisory only: every check runs, issues accumulate, nothing raises.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..config.settings import settings
from .models import BehemothPrompt


@dataclass
class ValidationResult:
    """Outcome of validating one enriched prompt."""

    valid: bool
    issues: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"valid": self.valid, "issues": list(self.issues)}


class PromptValidator:
    """Checks expansion, latency and length of an enriched prompt."""

    def __init__(
        self,
        min_expansion_ratio: Optional[float] = None,
        latency_budget_ms: Optional[float] = None,
        min_enriched_length: Optional[int] = None,
    ):
        """Initialize thresholds, defaulting to the configured ones."""
        self.min_expansion_ratio = (
            settings.min_expansion_ratio if min_expansion_ratio is None else min_expansion_ratio
        )
        self.latency_budget_ms = (
            settings.latency_budget_ms if latency_budget_ms is None else latency_budget_ms
        )
        self.min_enriched_length = (
            settings.min_enriched_length if min_enriched_length is None else min_enriched_length
        )

    def validate(self, prompt: BehemothPrompt) -> ValidationResult:
        """
        Validate an enriched prompt against the quality thresholds.

        Returns ValidationResult with:
        - valid: True if no issues were found
        - issues: one message per failed check
        """
        issues = []

        if prompt.expansion_ratio < self.min_expansion_ratio:
            issues.append(
                f"Low expansion ratio: {prompt.expansion_ratio:.1f}x "
                f"(target: >{self.min_expansion_ratio:g}x)"
            )

        if prompt.processing_time_ms > self.latency_budget_ms:
            issues.append(f"Exceeded latency budget: {prompt.processing_time_ms:.0f}ms")

        if len(prompt.enriched) < self.min_enriched_length:
            issues.append("Enriched prompt too short")

        return ValidationResult(valid=len(issues) == 0, issues=issues)


def validate_enriched_prompt(prompt: BehemothPrompt) -> ValidationResult:
    """Validate with the configured thresholds."""
    return PromptValidator().validate(prompt)
