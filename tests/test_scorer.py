"""Tests for context readiness scoring and level derivation."""

import pytest

from sparkle.config.settings import settings
from sparkle.context.models import PageContext
from sparkle.context.scorer import (
    assess_context,
    calculate_context_score,
    level_from_score,
    level_from_token_count,
)


def make_context(**overrides) -> PageContext:
    fields = {
        "title": "Untitled Page",
        "url": "https://example.com",
        "domain": "example.com",
        "source_type": "generic",
        "text_content": "",
        "metadata": {},
        "token_count": 0,
    }
    fields.update(overrides)
    return PageContext(**fields)


class TestLevelFromTokenCount:
    """Tests for the token-count level thresholds."""

    @pytest.mark.parametrize(
        "tokens,expected",
        [
            (0, "low"),
            (100, "low"),
            (101, "medium"),
            (500, "medium"),
            (501, "high"),
            (2000, "high"),
        ],
    )
    def test_boundaries(self, tokens, expected):
        assert level_from_token_count(tokens) == expected


class TestCalculateContextScore:
    """Tests for the 0-100 readiness score."""

    def test_minimal_context_scores_zero(self):
        assert calculate_context_score(make_context()) == 0

    def test_real_title_adds_20(self):
        assert calculate_context_score(make_context(title="Real Page Title")) == 20

    def test_empty_title_adds_nothing(self):
        assert calculate_context_score(make_context(title="")) == 0

    def test_full_token_budget_adds_40(self):
        assert calculate_context_score(make_context(token_count=2000)) == 40

    def test_token_points_are_capped(self):
        assert calculate_context_score(make_context(token_count=10_000)) == 40

    def test_token_points_are_linear(self):
        assert calculate_context_score(make_context(token_count=1000)) == 20

    def test_token_points_follow_configured_budget(self, monkeypatch):
        monkeypatch.setattr(settings, "max_tokens", 1000)

        assert calculate_context_score(make_context(token_count=1000)) == 40
        assert calculate_context_score(make_context(token_count=500)) == 20

    def test_known_source_adds_20(self):
        context = make_context(url="https://github.com", source_type="github")

        assert calculate_context_score(context) == 20

    def test_metadata_adds_4_per_entry(self):
        context = make_context(
            metadata={"description": "Test", "keywords": "test", "author": "Test Author"}
        )

        assert calculate_context_score(context) == 12

    def test_metadata_points_are_capped(self):
        context = make_context(metadata={f"k{i}": "v" for i in range(10)})

        assert calculate_context_score(context) == 20

    def test_score_capped_at_100(self):
        context = make_context(
            title="Full Page Title",
            url="https://github.com/user/repo",
            source_type="github",
            text_content="A" * 10000,
            metadata={
                "description": "Test",
                "keywords": "test",
                "author": "Author",
                "og": "value",
                "twitter": "card",
                "extra": "data",
            },
            token_count=2000,
        )

        assert calculate_context_score(context) == 100

    def test_half_points_round_up(self):
        """25 tokens is worth exactly 0.5 points."""
        assert calculate_context_score(make_context(token_count=25)) == 1

    def test_always_an_integer_in_range(self):
        for tokens in (0, 1, 37, 999, 1999, 5000):
            score = calculate_context_score(make_context(title="T", token_count=tokens))
            assert isinstance(score, int)
            assert 0 <= score <= 100

    def test_deterministic(self):
        context = make_context(title="Title", token_count=333, metadata={"one": "value"})

        assert calculate_context_score(context) == calculate_context_score(context)


class TestLevelFromScore:
    """Tests for the score level thresholds."""

    @pytest.mark.parametrize(
        "score,expected",
        [(0, "low"), (40, "low"), (41, "medium"), (70, "medium"), (71, "high"), (100, "high")],
    )
    def test_boundaries(self, score, expected):
        assert level_from_score(score) == expected


class TestAssessContext:
    """Tests for the combined readiness view."""

    def test_rich_github_context(self):
        context = make_context(
            title="Repo",
            source_type="github",
            metadata={"description": "d", "keywords": "k"},
            token_count=800,
        )

        readiness = assess_context(context)

        # 20 title + 16 tokens + 20 source + 8 metadata
        assert readiness.score == 64
        assert readiness.level == "medium"
        assert readiness.token_level == "high"

    def test_empty_context(self):
        readiness = assess_context(make_context())

        assert readiness.score == 0
        assert readiness.level == "low"
        assert readiness.token_level == "low"
