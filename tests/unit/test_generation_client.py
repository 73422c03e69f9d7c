"""Unit tests for GenerationClient using httpx.MockTransport."""

import json
import logging

import httpx
import pytest
import pytest_check as check

from query_finder.generation.client import GenerationClient, GenerationError
from query_finder.generation.config import GenerationConfig

PARIS = {"candidates": [{"content": {"parts": [{"text": "Paris"}]}}]}


def make_client(
    config: GenerationConfig,
    handler,
) -> GenerationClient:
    return GenerationClient(config=config, transport=httpx.MockTransport(handler))


class TestGenerateSuccess:
    """Tests for well-formed exchanges."""

    async def test_returns_first_candidate_text(
        self, generation_config: GenerationConfig
    ) -> None:
        """The answer is candidates[0].content.parts[0].text."""
        client = make_client(generation_config, lambda request: httpx.Response(200, json=PARIS))

        assert await client.generate("Capital of France?") == "Paris"

    async def test_request_shape(self, generation_config: GenerationConfig) -> None:
        """One POST with the key as query parameter and the prompt as sole part."""
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json=PARIS)

        await make_client(generation_config, handler).generate("hello")

        check.equal(len(captured), 1)
        request = captured[0]
        check.equal(request.method, "POST")
        check.equal(request.url.host, "example.test")
        check.equal(
            request.url.path, "/v1beta/models/gemini-2.0-flash-exp:generateContent"
        )
        check.equal(request.url.params["key"], "test-key")
        check.equal(
            json.loads(request.content),
            {"contents": [{"parts": [{"text": "hello"}]}]},
        )

    async def test_api_key_not_logged(
        self, generation_config: GenerationConfig, caplog: pytest.LogCaptureFixture
    ) -> None:
        """No log record, at any level, carries the key from the request URL."""
        caplog.set_level(logging.DEBUG)
        client = make_client(generation_config, lambda request: httpx.Response(200, json=PARIS))

        await client.generate("q")

        for record in caplog.records:
            check.is_not_in("test-key", record.getMessage())

    async def test_ignores_extra_fields(self, generation_config: GenerationConfig) -> None:
        """Fields beyond the ones read are tolerated."""
        body = {
            "candidates": [
                {
                    "content": {"parts": [{"text": "Paris"}], "role": "model"},
                    "finishReason": "STOP",
                },
                {"content": {"parts": [{"text": "Lyon"}]}},
            ],
            "usageMetadata": {"totalTokenCount": 7},
        }
        client = make_client(generation_config, lambda request: httpx.Response(200, json=body))

        assert await client.generate("q") == "Paris"


class TestGenerateFailure:
    """Tests for failures mapped to GenerationError."""

    @pytest.mark.parametrize("status_code", [400, 403, 429, 500, 503])
    async def test_error_status(
        self, generation_config: GenerationConfig, status_code: int
    ) -> None:
        client = make_client(
            generation_config,
            lambda request: httpx.Response(status_code, json={"error": {"code": status_code}}),
        )

        with pytest.raises(GenerationError, match=f"HTTP {status_code}"):
            await client.generate("q")

    async def test_connection_error(self, generation_config: GenerationConfig) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(GenerationError, match="Connection failed"):
            await make_client(generation_config, handler).generate("q")

    async def test_error_message_hides_api_key(
        self, generation_config: GenerationConfig
    ) -> None:
        """The request URL carries the key; error text must not."""
        client = make_client(generation_config, lambda request: httpx.Response(500))

        with pytest.raises(GenerationError) as exc_info:
            await client.generate("q")

        assert "test-key" not in str(exc_info.value)

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"candidates": []},
            {"candidates": [{}]},
            {"candidates": [{"content": {}}]},
            {"candidates": [{"content": {"parts": []}}]},
            {"candidates": [{"content": {"parts": [{}]}}]},
            {"promptFeedback": {"blockReason": "SAFETY"}},
        ],
    )
    async def test_malformed_response(
        self, generation_config: GenerationConfig, body: dict
    ) -> None:
        """Any deviation from the expected shape is an error."""
        client = make_client(generation_config, lambda request: httpx.Response(200, json=body))

        with pytest.raises(GenerationError, match="Malformed"):
            await client.generate("q")

    async def test_invalid_json(self, generation_config: GenerationConfig) -> None:
        client = make_client(
            generation_config, lambda request: httpx.Response(200, content=b"<html>")
        )

        with pytest.raises(GenerationError, match="Malformed"):
            await client.generate("q")
