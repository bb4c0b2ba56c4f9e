import pytest
import requests
from fastapi.testclient import TestClient

from bfhl.config import Settings
from bfhl.main import create_app

EMAIL = "student@example.com"


class FakeAIClient:
    """Stands in for GeminiClient; records prompts, answers or raises."""

    def __init__(self, answer="Mumbai", error=None):
        self.answer = answer
        self.error = error
        self.prompts = []

    def ask(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.answer


class FakeResponse:
    def __init__(self, payload=None, status_code=200, json_error=None):
        self.payload = payload
        self.status_code = status_code
        self.json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")

    def json(self):
        if self.json_error is not None:
            raise self.json_error
        return self.payload


@pytest.fixture
def settings() -> Settings:
    return Settings(official_email=EMAIL, gemini_api_key="test-key")


@pytest.fixture
def ai_client() -> FakeAIClient:
    return FakeAIClient()


@pytest.fixture
def client(settings, ai_client) -> TestClient:
    return TestClient(create_app(settings, ai_client=ai_client))
