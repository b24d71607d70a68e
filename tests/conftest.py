import json
from typing import Any, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from itinerary_api.ai.openai_client import get_http_client
from itinerary_api.core.config import Settings, get_request_settings
from itinerary_api.main import app

TEST_API_KEY = "sk-test-0123456789abcdefghijklmnop"

SUCCESS_BODY = {
    "id": "chatcmpl-123",
    "object": "chat.completion",
    "model": "gpt-4o-2024-08-06",
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": "Day 1..."},
            "finish_reason": "stop",
        }
    ],
    "usage": {"prompt_tokens": 12, "completion_tokens": 3, "total_tokens": 15},
}


class FakeUpstream:
    """Stands in for the completions endpoint; builds a fresh response per call."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.content: bytes = json.dumps(SUCCESS_BODY).encode()
        self.error: Optional[Exception] = None

    def reply(self, status_code: int, body: Any = None, text: Optional[str] = None) -> None:
        self.status_code = status_code
        self.content = (text if text is not None else json.dumps(body)).encode()

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.content)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def make_client(upstream):
    def _make(api_key: str = TEST_API_KEY) -> TestClient:
        app.dependency_overrides[get_request_settings] = lambda: Settings(openai_api_key=api_key)

        async def _http_client():
            async with httpx.AsyncClient(transport=httpx.MockTransport(upstream.handle)) as client:
                yield client

        app.dependency_overrides[get_http_client] = _http_client
        return TestClient(app, raise_server_exceptions=False)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()


@pytest.fixture
def success_body():
    return SUCCESS_BODY


@pytest.fixture
def api_key():
    return TEST_API_KEY
