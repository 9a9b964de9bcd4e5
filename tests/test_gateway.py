"""Tests for the gateway service outside HTTP."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from google.genai import errors as genai_errors
from pydantic import ValidationError

from omnicode.core.errors import (
    AuthenticationError,
    ErrorKind,
    UpstreamFatalError,
    UpstreamTransientError,
)
from omnicode.models.message import ChatRequest
from omnicode.services.gateway import parse_bearer_token
from omnicode.services.llm.gemini import GeminiProvider


def _request(uid="u1"):
    return ChatRequest(uid=uid, message="hi", history=[{"role": "user", "text": "hi", "type": "text"}])


@pytest.mark.parametrize("header", [None, "", "Bearer", "Bearer   ", "Token abc", "bearer abc"])
def test_parse_bearer_token_rejects(header):
    with pytest.raises(AuthenticationError):
        parse_bearer_token(header)


def test_parse_bearer_token():
    assert parse_bearer_token("Bearer abc.def") == "abc.def"


def test_handle_returns_ai_response(gateway):
    message = asyncio.run(gateway.handle(_request(), "Bearer token-u1"))
    assert message.role == "agent"
    assert message.type == "ai_response"
    assert message.text == "Hello!"


def test_exhausted_transient_errors(gateway, fake_llm):
    fake_llm.outcomes = [TimeoutError("upstream timeout")]
    with pytest.raises(UpstreamTransientError) as excinfo:
        asyncio.run(gateway.handle(_request(), "Bearer token-u1"))
    assert excinfo.value.kind == ErrorKind.UPSTREAM_TRANSIENT
    assert excinfo.value.status_code == 500


def test_exhausted_client_errors_are_fatal(gateway, fake_llm):
    fake_llm.outcomes = [
        genai_errors.ClientError(400, {"error": {"code": 400, "message": "API key not valid", "status": "INVALID_ARGUMENT"}})
    ]
    with pytest.raises(UpstreamFatalError) as excinfo:
        asyncio.run(gateway.handle(_request(), "Bearer token-u1"))
    assert excinfo.value.kind == ErrorKind.UPSTREAM_FATAL
    assert len(fake_llm.calls) == 3


def test_history_conversion_happens_before_retries(gateway, store):
    client = MagicMock()
    gateway.llm = GeminiProvider(client=client, model="gemini-1.5-flash")
    # Bypasses request parsing to reach the provider with a malformed turn
    request = ChatRequest(
        uid="u1",
        message="hi",
        history=[{"role": "user", "text": 123}, {"role": "agent", "text": "x"}, {"role": "user", "text": "hi"}],
    )

    with patch("omnicode.core.retry.asyncio.sleep", new=AsyncMock()) as sleep:
        with pytest.raises(ValidationError):
            asyncio.run(gateway.handle(request, "Bearer token-u1"))

    sleep.assert_not_called()
    client.aio.chats.create.assert_not_called()
    assert asyncio.run(store.get("u1")) is None
