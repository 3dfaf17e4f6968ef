"""Tests for the Gemini gateway, using a stub in place of the SDK client."""

from __future__ import annotations

import asyncio
from types import SimpleNamespace

import pytest  # type: ignore

from app.config import Settings
from app.exceptions import GatewayError
from app.services.gemini_service import GeminiGateway


class StubModels:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def generate_content(self, model, contents):
        self.calls.append((model, contents))
        if self.error:
            raise self.error
        return self.response


def make_gateway(models: StubModels, model_name: str = "gemini-flash-latest") -> GeminiGateway:
    settings = Settings(gemini_api_key=None, gemini_model=model_name)
    return GeminiGateway(settings, client=SimpleNamespace(models=models))


def test_generate_returns_reply_text() -> None:
    models = StubModels(response=SimpleNamespace(text='{"score": 9}'))
    gateway = make_gateway(models, "gemini-test")
    assert asyncio.run(gateway.generate("grade this")) == '{"score": 9}'
    assert models.calls == [("gemini-test", "grade this")]


def test_unconfigured_gateway_fails() -> None:
    gateway = GeminiGateway(Settings(gemini_api_key=None))
    assert not gateway.configured
    with pytest.raises(GatewayError):
        asyncio.run(gateway.generate("hello"))


def test_sdk_errors_become_gateway_errors() -> None:
    models = StubModels(error=RuntimeError("401 API key invalid"))
    with pytest.raises(GatewayError) as excinfo:
        asyncio.run(make_gateway(models).generate("hello"))
    assert isinstance(excinfo.value.cause, RuntimeError)
    assert len(models.calls) == 1


def test_reply_without_text_fails() -> None:
    models = StubModels(response=SimpleNamespace(text=None))
    with pytest.raises(GatewayError):
        asyncio.run(make_gateway(models).generate("hello"))
