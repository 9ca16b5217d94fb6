import json

import httpx
import pytest
from fastapi.testclient import TestClient

from notes_summarizer.main import app
from notes_summarizer.utils.config import Settings, get_settings
from notes_summarizer.utils.http_client import get_http_client


class FakeProvider:
    """Records outbound requests and answers them with `handler`."""

    def __init__(self):
        self.requests = []
        self.handler = lambda request: httpx.Response(200, json={})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def respond(self, status_code=200, **kwargs):
        self.handler = lambda request: httpx.Response(status_code, **kwargs)

    def fail(self, message="connection refused"):
        def handler(request):
            raise httpx.ConnectError(message, request=request)

        self.handler = handler

    def last_json(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        hf_api_key="hf_test",
        hf_api_url="https://hf.test/models/facebook/bart-large-cnn",
        brevo_api_key="xkeysib-test",
        brevo_sender_email="notes@example.com",
        brevo_api_url="https://brevo.test/v3/smtp/email",
        static_dir=str(tmp_path),
    )


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def http_client(provider):
    return httpx.AsyncClient(transport=httpx.MockTransport(provider))


@pytest.fixture
def client(settings, http_client):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_http_client] = lambda: http_client
    yield TestClient(app)
    app.dependency_overrides.clear()
