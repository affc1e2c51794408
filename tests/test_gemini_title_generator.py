from unittest.mock import Mock, patch

import pytest
import requests

from poper.domain.exceptions import ConfigurationError, UpstreamError
from poper.infrastructure.adapters.services.gemini_title_generator import GeminiTitleGenerator


def _response(payload=None, status_code=200):
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.ok = status_code < 400
    response.json.return_value = payload
    return response


def _generated(text):
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


class TestGeminiTitleGenerator:
    @pytest.fixture
    def generator(self, settings):
        return GeminiTitleGenerator(settings)

    def test_missing_key_is_a_configuration_error(self, unconfigured_settings):
        with pytest.raises(ConfigurationError) as exc_info:
            GeminiTitleGenerator(unconfigured_settings)

        assert exc_info.value.missing == ["GEMINI_API_KEY"]

    @pytest.mark.asyncio
    async def test_generate_returns_first_candidate_text(self, generator):
        with patch("requests.request", return_value=_response(_generated("Up, Toy Story 3"))) as mock_request:
            text = await generator.generate("suggest something")

        assert text == "Up, Toy Story 3"
        mock_request.assert_called_once_with(
            "POST",
            "https://generativelanguage.googleapis.com/v1beta/models/gemini-1.5-flash:generateContent",
            params={"key": "gemini-test-key"},
            json={
                "contents": [{"parts": [{"text": "suggest something"}]}],
                "generationConfig": {"maxOutputTokens": 150, "temperature": 0.4},
            },
            timeout=20.0,
        )

    @pytest.mark.asyncio
    async def test_non_success_status_raises(self, generator):
        with patch("requests.request", return_value=_response({"error": {}}, status_code=429)):
            with pytest.raises(UpstreamError, match="Failed to get suggestions") as exc_info:
                await generator.generate("prompt")

        assert exc_info.value.source == "suggestion"

    @pytest.mark.asyncio
    async def test_transport_error_raises(self, generator):
        with patch("requests.request", side_effect=requests.Timeout("slow")):
            with pytest.raises(UpstreamError, match="Failed to get suggestions"):
                await generator.generate("prompt")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"candidates": []},
            {"candidates": [{"content": {"parts": []}}]},
            {"candidates": [{"finishReason": "SAFETY"}]},
            _generated(""),
            _generated("   "),
        ],
    )
    async def test_empty_text_raises(self, generator, payload):
        with patch("requests.request", return_value=_response(payload)):
            with pytest.raises(UpstreamError, match="empty response"):
                await generator.generate("prompt")
