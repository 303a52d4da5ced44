"""
Tests for the Groq completion gateway error mapping.
"""

from types import SimpleNamespace

import groq
import httpx
import pytest

from channel_api.errors import UpstreamError
from channel_api.services.completion_gateway import CompletionGateway

REQUEST = httpx.Request("POST", "https://api.groq.com/openai/v1/chat/completions")


class FakeCompletions:
    def __init__(self, result):
        self.result = result
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


def make_gateway(result):
    completions = FakeCompletions(result)
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return CompletionGateway(client, model="test-model", max_tokens=64), completions


def response_with(content):
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.mark.asyncio
async def test_complete_sends_question_as_only_message():
    gateway, completions = make_gateway(response_with("4"))

    assert await gateway.complete("2+2?") == "4"

    call = completions.calls[0]
    assert call["model"] == "test-model"
    assert call["messages"] == [{"role": "user", "content": "2+2?"}]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [
        groq.APIConnectionError(request=REQUEST),
        groq.APITimeoutError(request=REQUEST),
        groq.RateLimitError(
            "quota exceeded",
            response=httpx.Response(429, request=REQUEST),
            body=None,
        ),
    ],
)
async def test_provider_errors_become_upstream_errors(error):
    gateway, _ = make_gateway(error)

    with pytest.raises(UpstreamError):
        await gateway.complete("2+2?")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [SimpleNamespace(choices=[]), response_with(None), response_with("")],
)
async def test_malformed_responses_become_upstream_errors(response):
    gateway, _ = make_gateway(response)

    with pytest.raises(UpstreamError):
        await gateway.complete("2+2?")
