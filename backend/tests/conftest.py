import os

import httpx
import pytest

os.environ.setdefault("CORS_ORIGINS", "http://localhost")

from app.core.settings import Settings


class ProviderStub:
    """Stands in for the Brevo endpoint and records every request it gets."""

    def __init__(self, status_code: int = 201, exc: Exception | None = None):
        self.status_code = status_code
        self.exc = exc
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, json={"messageId": "<stub@brevo>"})

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def mail_settings():
    return Settings(
        brevo_api_key="test-key",
        sender_email="site@example.org",
        sender_name="Example site",
        recipient_email="inbox@example.org",
        brevo_api_url="https://brevo.test/v3/smtp/email",
        _env_file=None,
    )


@pytest.fixture
def unconfigured_settings():
    return Settings(brevo_api_key=None, sender_email=None, _env_file=None)


@pytest.fixture
def provider():
    return ProviderStub()
