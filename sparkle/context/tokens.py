"""Token estimation and budget truncation (~4 characters per token)."""

import math

CHARS_PER_TOKEN = 4
TRUNCATION_MARKER = "\n[...truncated...]"
# Characters reserved at the cut point; the marker itself is slightly shorter.
TRUNCATION_RESERVE = 20


def estimate_tokens(text: str) -> int:
    """Rough token count: ceil(len / 4)."""
    return math.ceil(len(text) / CHARS_PER_TOKEN)


def truncate_to_token_budget(text: str, max_tokens: int) -> str:
    """Cut text down to a token budget, marking the cut.

    Text that already fits is returned unchanged. Otherwise the first
    ``max_tokens * 4 - 20`` characters are kept and the truncation marker
    appended, so the result never exceeds ``max_tokens * 4`` characters
    (budgets with no room for content before the marker yield an empty
    string).
    """
    max_chars = max(0, max_tokens) * CHARS_PER_TOKEN
    if len(text) <= max_chars:
        return text
    if max_chars <= TRUNCATION_RESERVE:
        return ""
    return text[: max_chars - TRUNCATION_RESERVE] + TRUNCATION_MARKER
