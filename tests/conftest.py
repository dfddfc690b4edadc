"""Pytest fixtures for prediction-guard-client tests."""

import json
import os
from unittest.mock import patch

import httpx
import pytest

from prediction_guard.client import Client
from prediction_guard.config import Settings

TEST_URL = "https://api.test.local"
TEST_API_KEY = "test-api-key"


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    env_vars = {
        "PREDICTIONGUARD_API_KEY": TEST_API_KEY,
        "PREDICTIONGUARD_URL": TEST_URL,
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def settings(mock_env_vars) -> Settings:
    """Create Settings instance with mocked environment."""
    return Settings(_env_file=None)


class FakeAPI:
    """httpx.MockTransport handler serving canned responses per (method, path)."""

    def __init__(self):
        self.routes: dict[tuple[str, str], tuple[int, dict]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, status: int = 200, **kwargs) -> None:
        self.routes[(method, path)] = (status, kwargs)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last_request.content)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"error": f"no route for {request.url.path}"})
        status, kwargs = route
        return httpx.Response(status, **kwargs)


@pytest.fixture
def fake_api() -> FakeAPI:
    return FakeAPI()


@pytest.fixture
def client(settings, fake_api) -> Client:
    """Client whose requests are answered by ``fake_api``."""
    return Client(settings, transport=httpx.MockTransport(fake_api))
