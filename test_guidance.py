"""
Tests for the quick-feedback requester.
"""
import pytest

from script_toolkit.guidance import GUIDANCE_FALLBACK, GuidanceRequester
from script_toolkit.models import ResultStatus
from script_toolkit.prompts import GUIDANCE_SYSTEM_PROMPT


class TestGuidanceRequester:

    @pytest.mark.asyncio
    async def test_returns_stripped_feedback(self, fake_client, sample_script):
        requester = GuidanceRequester(fake_client)

        text = await requester.request_guidance(sample_script)

        assert text == "Let us hear the hum of the monitor before Jane reacts."
        assert requester.state.status == ResultStatus.SUCCEEDED
        assert requester.state.text == text
        assert requester.is_loading is False

    @pytest.mark.asyncio
    async def test_requests_bounded_output(self, fake_client, sample_script):
        requester = GuidanceRequester(fake_client)

        await requester.request_guidance(sample_script)

        call = fake_client.calls[0]
        assert call["instruction"] == GUIDANCE_SYSTEM_PROMPT
        assert call["output_schema"] is None
        assert call["max_tokens"] == 100
        assert call["temperature"] == 0.8
        assert call["thinking_budget"] == 50

    @pytest.mark.asyncio
    async def test_failure_becomes_fallback(self, make_client, sample_script):
        client = make_client(errors={"guidance": RuntimeError("quota exceeded for key sk-secret")})
        requester = GuidanceRequester(client)

        text = await requester.request_guidance(sample_script)

        assert text == GUIDANCE_FALLBACK
        assert requester.state.status == ResultStatus.FAILED
        assert "sk-secret" not in requester.state.text
        assert "sk-secret" not in (requester.state.error or "")
        assert requester.is_loading is False

    @pytest.mark.asyncio
    async def test_repeated_requests_are_independent(self, make_client, sample_script):
        client = make_client()
        requester = GuidanceRequester(client)

        first = await requester.request_guidance(sample_script)
        client.responses["guidance"] = "Cut the second line."
        second = await requester.request_guidance(sample_script)

        assert first != second
        assert requester.state.text == "Cut the second line."
        assert len(client.calls) == 2

    def test_reset_clears_feedback(self, fake_client):
        requester = GuidanceRequester(fake_client)
        requester.state.text = "old note"

        requester.reset()

        assert requester.state.text == ""
        assert requester.state.status is None
