"""
Brevo transactional email client for the contact form.

This is the only place that talks to the outside world. One call to `send`
is one POST to the provider: there is no retry, and any failure is raised
as a `DispatchError` subclass for the caller to classify.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx
from pydantic import BaseModel, ConfigDict

from app.core.settings import Settings
from app.lib.contact_models import SubmissionRequest

log = logging.getLogger("uvicorn.error")


class DispatchError(Exception):
    """Base class for failures while handing a message to the provider."""
    pass


class CredentialsMissing(DispatchError):
    """API key or sender address is not configured (deployment fault)."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"missing mail configuration: {', '.join(missing)}")


class ProviderError(DispatchError):
    """The provider answered with a non-2xx status."""

    def __init__(self, status_code: int, status_text: str):
        self.status_code = status_code
        self.status_text = status_text
        super().__init__(f"Failed to send email: {status_code} {status_text}".strip())


class NetworkError(DispatchError):
    """No response from the provider (connection, DNS, timeout...)."""
    pass


@dataclass(frozen=True)
class DispatchCredentials:
    api_key: Optional[str]
    sender_email: Optional[str]

    @classmethod
    def from_settings(cls, settings: Settings) -> "DispatchCredentials":
        return cls(api_key=settings.brevo_api_key, sender_email=settings.sender_email)

    def missing(self) -> list[str]:
        out = []
        if not (self.api_key or "").strip():
            out.append("api_key")
        if not (self.sender_email or "").strip():
            out.append("sender_email")
        return out

    def ensure(self) -> None:
        missing = self.missing()
        if missing:
            raise CredentialsMissing(missing)


class OutboundMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    sender_email: str
    sender_name: str
    recipient_email: str
    reply_to_email: str
    subject: str
    body: str

    def to_payload(self) -> Dict[str, Any]:
        return {
            "sender": {"email": self.sender_email, "name": self.sender_name},
            "to": [{"email": self.recipient_email}],
            "replyTo": {"email": self.reply_to_email},
            "subject": self.subject,
            "textContent": self.body,
        }


def build_outbound_message(
    request: SubmissionRequest,
    credentials: DispatchCredentials,
    settings: Settings,
) -> OutboundMessage:
    """Derive the email from an already validated submission."""
    credentials.ensure()
    sender = credentials.sender_email.strip()
    return OutboundMessage(
        sender_email=sender,
        sender_name=settings.sender_name,
        recipient_email=(settings.recipient_email or "").strip() or sender,
        reply_to_email=request.email,
        subject=f"A message from {request.email}",
        body=f"From: {request.email}\n\n{request.message}",
    )


async def send(
    message: OutboundMessage,
    credentials: DispatchCredentials,
    settings: Settings,
    client: Optional[httpx.AsyncClient] = None,
) -> None:
    credentials.ensure()

    headers = {
        "accept": "application/json",
        "content-type": "application/json",
        "api-key": credentials.api_key,
    }
    payload = message.to_payload()

    try:
        if client is not None:
            resp = await client.post(settings.brevo_api_url, headers=headers, json=payload)
        else:
            async with httpx.AsyncClient(timeout=settings.mail_timeout_seconds) as own_client:
                resp = await own_client.post(settings.brevo_api_url, headers=headers, json=payload)
    except httpx.TransportError as e:
        log.warning(f"[mailer] no response from provider: {e!r}")
        raise NetworkError(str(e) or e.__class__.__name__) from e

    if not resp.is_success:
        log.warning(f"[mailer] provider rejected message: {resp.status_code} {resp.reason_phrase}")
        raise ProviderError(resp.status_code, resp.reason_phrase)

    log.info(f"[mailer] message accepted by provider status={resp.status_code}")
