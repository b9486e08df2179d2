"""URL classification: content-domain source type and chat platform.

Both lookups walk an ordered rule list and return the first match.
"""

import re
from typing import Optional
from urllib.parse import urlparse

from .models import PLATFORMS, Platform, SourceType

# Order matters: first match wins
SOURCE_PATTERNS: list[tuple[re.Pattern, SourceType]] = [
    (re.compile(r"github\.com"), "github"),
    (re.compile(r"arxiv\.org"), "arxiv"),
    (re.compile(r"jira|atlassian"), "jira"),
    (re.compile(r"stackoverflow\.com|stackexchange\.com"), "stackoverflow"),
    (re.compile(r"docs\.|documentation|readme", re.IGNORECASE), "docs"),
]

PLATFORM_PATTERNS: list[tuple[re.Pattern, Platform]] = [
    (re.compile(r"chat\.openai\.com"), "chatgpt"),
    (re.compile(r"chatgpt\.com"), "chatgpt"),
    (re.compile(r"claude\.ai"), "claude"),
    (re.compile(r"gemini\.google\.com"), "gemini"),
]


def detect_source_type(url: str) -> SourceType:
    """Map a page URL to its content-domain category, 'generic' if nothing matches."""
    for pattern, source_type in SOURCE_PATTERNS:
        if pattern.search(url):
            return source_type
    return "generic"


def detect_platform(url: str) -> Platform:
    """Identify which chat platform a URL belongs to."""
    for pattern, platform in PLATFORM_PATTERNS:
        if pattern.search(url):
            return platform
    return "unknown"


def is_supported_platform(url: str) -> bool:
    """Check if URL is on one of the known chat platforms."""
    return detect_platform(url) != "unknown"


def normalize_platform(value: Optional[str]) -> Platform:
    """Coerce an arbitrary platform value into the known set."""
    if isinstance(value, str) and value in PLATFORMS:
        return value  # type: ignore[return-value]
    return "unknown"


def extract_domain(url: str) -> str:
    """Return the host part of a URL ('' when the string has none)."""
    try:
        return urlparse(url).hostname or ""
    except ValueError:
        # e.g. an unbalanced IPv6 bracket
        return ""
