from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from clipnote.api.app import create_app
from clipnote.core.config import Settings


class FakeGateway:
    """Stands in for the Gemini call; records prompts and replays a canned outcome."""

    def __init__(self, text: str = "# Title\n## Key Points\n- one", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.prompts: list[str] = []

    async def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def settings() -> Settings:
    return Settings(GEMINI_API_KEY="test-key", _env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def client(settings: Settings, gateway: FakeGateway) -> Iterator[TestClient]:
    app = create_app(settings, gateway=gateway)
    with TestClient(app) as test_client:
        yield test_client
