import json

import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.settings import get_settings
from app.dependencies import get_mail_client
from app.lib.contact_form import CREDENTIALS_ERROR, SERVER_ERROR
from app.main import app

from conftest import ProviderStub

FORM = {"name": "", "email": "user@example.com", "message": "Hello there"}


@pytest.fixture
def wire(mail_settings):
    """Point the app at the given settings and a stubbed provider."""

    def _wire(stub: ProviderStub, settings=mail_settings):
        async def _client():
            async with stub.client() as client:
                yield client

        app.dependency_overrides[get_settings] = lambda: settings
        app.dependency_overrides[get_mail_client] = _client
        return TestClient(app)

    yield _wire
    app.dependency_overrides.clear()


def test_form_post_success(wire, provider):
    client = wire(provider)
    resp = client.post("/api/contact", data=FORM)
    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    assert len(provider.requests) == 1
    assert json.loads(provider.requests[0].content)["replyTo"] == {"email": "user@example.com"}


def test_json_post_success_on_site_route(wire, provider):
    client = wire(provider)
    resp = client.post("/contact", json=FORM)
    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    assert len(provider.requests) == 1


def test_bot_gets_success_and_nothing_is_sent(wire, provider):
    client = wire(provider)
    resp = client.post("/api/contact", data={**FORM, "name": "spam bot", "email": "nope"})
    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    assert provider.requests == []


def test_invalid_email_is_400(wire, provider):
    client = wire(provider)
    resp = client.post("/api/contact", data={**FORM, "email": "not-an-email"})
    assert resp.status_code == 400
    assert "email" in resp.json()["errors"]
    assert provider.requests == []


def test_empty_body_is_400(wire, provider):
    client = wire(provider)
    resp = client.post("/api/contact", content=b"{not json", headers={"content-type": "application/json"})
    assert resp.status_code == 400
    assert set(resp.json()["errors"]) == {"email", "message"}


def test_missing_credentials_is_500(wire, provider, unconfigured_settings):
    client = wire(provider, settings=unconfigured_settings)
    resp = client.post("/api/contact", data=FORM)
    assert resp.status_code == 500
    assert resp.json() == {"errors": {"credentials": CREDENTIALS_ERROR}}
    assert provider.requests == []


def test_provider_failure_is_500(wire):
    stub = ProviderStub(status_code=500)
    client = wire(stub)
    resp = client.post("/api/contact", data=FORM)
    assert resp.status_code == 500
    assert resp.json() == {"errors": {"server": SERVER_ERROR}}
    assert len(stub.requests) == 1


def test_network_failure_is_500(wire):
    stub = ProviderStub(exc=httpx.ConnectError("connection refused by brevo.test"))
    client = wire(stub)
    resp = client.post("/api/contact", data=FORM)
    assert resp.status_code == 500
    assert resp.json() == {"errors": {"server": SERVER_ERROR}}
    assert "connection refused" not in resp.text
    assert len(stub.requests) == 1


def test_json_content_type_is_case_insensitive(wire, provider):
    client = wire(provider)
    resp = client.post(
        "/api/contact",
        content=json.dumps(FORM).encode(),
        headers={"content-type": "Application/JSON"},
    )
    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    assert len(provider.requests) == 1
