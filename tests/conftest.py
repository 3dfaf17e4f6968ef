"""Shared fixtures: a test app wired to a fake Gemini gateway."""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

import pytest  # type: ignore
from fastapi.testclient import TestClient

from app.config import Settings
from app.dependencies import get_gemini_gateway
from app.main import create_app


class FakeGateway:
    """Stands in for GeminiGateway; returns a canned reply and records prompts."""

    def __init__(self, reply: Union[str, Exception] = "[]"):
        self.reply = reply
        self.prompts: List[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if isinstance(self.reply, Exception):
            raise self.reply
        return self.reply


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def settings(upload_dir: Path) -> Settings:
    return Settings(gemini_api_key=None, upload_dir=str(upload_dir))


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def client(settings: Settings, gateway: FakeGateway) -> TestClient:
    app = create_app(settings)
    app.dependency_overrides[get_gemini_gateway] = lambda: gateway
    return TestClient(app)
