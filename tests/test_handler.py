"""Tests for the enhancement request boundary."""

import pytest

from sparkle.app import handler as handler_module
from sparkle.app.handler import handle_enhance_request, process_enhance_request
from sparkle.app.models import EnhanceRequest


@pytest.fixture
def github_payload(github_context) -> dict:
    return github_context.to_dict()


class TestHandleEnhanceRequest:
    """Tests for request validation and success responses."""

    def test_success(self, github_payload):
        response = handle_enhance_request(
            {"userText": "How do I fix this bug?", "context": github_payload, "platform": "chatgpt"}
        )

        assert response.success is True
        assert response.error is None
        assert "Senior Software Engineer" in response.enriched_prompt
        assert "How do I fix this bug?" in response.enriched_prompt
        assert response.processing_time_ms >= 0

    @pytest.mark.parametrize("user_text", [None, "", 42, ["list"]])
    def test_missing_or_invalid_user_text(self, github_payload, user_text):
        response = handle_enhance_request({"userText": user_text, "context": github_payload})

        assert response.success is False
        assert response.error == "Missing or invalid user text"
        assert response.enriched_prompt is None
        assert response.processing_time_ms >= 0

    def test_whitespace_text_is_accepted(self, github_payload):
        response = handle_enhance_request({"userText": "   ", "context": github_payload})

        assert response.success is True

    @pytest.mark.parametrize("context", [None, {}, ""])
    def test_missing_context(self, context):
        response = handle_enhance_request({"userText": "Test", "context": context})

        assert response.success is False
        assert response.error == "Missing page context"

    @pytest.mark.parametrize("body", [None, "not a dict", 7])
    def test_body_not_a_dict(self, body):
        response = handle_enhance_request(body)

        assert response.success is False
        assert response.error == "Missing or invalid user text"

    def test_missing_platform_defaults_to_unknown(self, github_payload):
        response = handle_enhance_request({"userText": "Test", "context": github_payload})

        assert response.success is True
        assert "*Note:" not in response.enriched_prompt

    def test_unknown_platform_gets_no_hint(self, github_payload):
        response = handle_enhance_request(
            {"userText": "Test", "context": github_payload, "platform": "bing"}
        )

        assert response.success is True
        assert "*Note:" not in response.enriched_prompt

    def test_persona_follows_source_type(self, arxiv_context):
        response = handle_enhance_request({"userText": "Summarize", "context": arxiv_context.to_dict()})

        assert "Research Scientist" in response.enriched_prompt

    def test_page_context_instance_accepted(self, github_context):
        response = handle_enhance_request({"userText": "Test", "context": github_context})

        assert response.success is True
        assert "- Source Type: GITHUB" in response.enriched_prompt

    def test_unrecognised_source_type_gets_generic_persona(self):
        context = {"title": "Wiki page", "url": "https://wiki.example.com", "sourceType": "wiki"}

        response = handle_enhance_request({"userText": "Test", "context": context})

        assert response.success is True
        assert "Senior Expert Consultant" in response.enriched_prompt

    def test_token_count_derived_when_absent(self):
        context = {"title": "T", "url": "https://example.com", "textContent": "B" * 400}

        response = handle_enhance_request({"userText": "Test", "context": context})

        assert "**Page Content Summary:**" in response.enriched_prompt

    def test_invalid_context(self):
        response = handle_enhance_request({"userText": "Test", "context": {"title": "No URL"}})

        assert response.success is False
        assert response.error == "Invalid page context: 1 validation error(s)"


class TestHandlerFailures:
    """Tests for unexpected errors inside enrichment."""

    def test_exception_message_returned(self, github_payload, monkeypatch):
        def boom(*args, **kwargs):
            raise RuntimeError("persona table exploded")

        monkeypatch.setattr(handler_module, "enrich_prompt", boom)

        response = handle_enhance_request({"userText": "Test", "context": github_payload})

        assert response.success is False
        assert response.error == "persona table exploded"
        assert response.processing_time_ms >= 0

    def test_exception_without_message(self, github_payload, monkeypatch):
        def boom(*args, **kwargs):
            raise RuntimeError()

        monkeypatch.setattr(handler_module, "enrich_prompt", boom)

        response = handle_enhance_request({"userText": "Test", "context": github_payload})

        assert response.error == "Unknown error occurred"


class TestWireFormat:
    """Tests for camelCase serialization."""

    def test_success_wire_keys(self, github_payload):
        wire = handle_enhance_request({"userText": "Test", "context": github_payload}).to_wire()

        assert set(wire) == {"success", "enrichedPrompt", "processingTimeMs"}

    def test_error_wire_omits_prompt(self):
        wire = handle_enhance_request({"userText": ""}).to_wire()

        assert set(wire) == {"success", "error", "processingTimeMs"}
        assert wire["success"] is False

    def test_request_accepts_camel_case(self, github_payload):
        request = EnhanceRequest.model_validate(
            {"userText": "Hi", "context": github_payload, "platform": "gemini"}
        )

        assert request.user_text == "Hi"
        assert request.context.source_type == "github"
        assert request.context.token_count == 250
        assert request.platform == "gemini"

    def test_request_normalizes_platform(self, github_payload):
        request = EnhanceRequest.model_validate(
            {"userText": "Hi", "context": github_payload, "platform": None}
        )

        assert request.platform == "unknown"


class TestProcessEnhanceRequest:
    """Tests for the response plus quality report variant."""

    def test_report_matches_response(self, github_payload):
        text = "How do I fix this bug?"

        response, report = process_enhance_request({"userText": text, "context": github_payload})

        assert response.success is True
        assert report.valid is True
        assert report.expansion_ratio == len(response.enriched_prompt) / len(text)
        assert report.processing_time_ms <= response.processing_time_ms

    def test_no_report_on_failure(self):
        response, report = process_enhance_request({"userText": "Test"})

        assert response.error == "Missing page context"
        assert report is None
