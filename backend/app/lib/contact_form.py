import logging
from typing import Optional

import httpx

from app.core import mailer
from app.core.settings import Settings, get_settings
from app.lib.contact_models import (
    ServerFailure,
    SubmissionRequest,
    SubmissionResult,
    Success,
    ValidationFailure,
)
from app.lib.spam import is_bot
from app.lib.validation import validate

log = logging.getLogger("uvicorn.error")

CREDENTIALS_ERROR = "The contact form is not configured correctly."
SERVER_ERROR = "There was an error sending your email. Please try again later."


async def submit(
    request: SubmissionRequest,
    settings: Optional[Settings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> SubmissionResult:
    """
    Handle one contact form submission, stopping at the first terminal outcome:
    bot -> success, invalid input -> 400 errors, missing config or failed send -> 500.

    Bots get the same Success as people so they learn nothing from the response.
    """
    settings = settings or get_settings()

    if is_bot(request):
        log.info("[contact] honeypot filled; dropping submission")
        return Success()

    errors = validate(request)
    if errors:
        log.info(f"[contact] validation failed fields={sorted(errors)}")
        return ValidationFailure(errors=errors)

    credentials = mailer.DispatchCredentials.from_settings(settings)
    missing = credentials.missing()
    if missing:
        log.error(f"[contact] mail credentials not configured, missing={missing}")
        return ServerFailure(errors={"credentials": CREDENTIALS_ERROR})

    message = mailer.build_outbound_message(request, credentials, settings)
    try:
        await mailer.send(message, credentials, settings, client=client)
    except mailer.DispatchError as e:
        log.error(f"[contact] error sending email: {e}")
        return ServerFailure(errors={"server": SERVER_ERROR})

    log.info("[contact] message sent")
    return Success()
