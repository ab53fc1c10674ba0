# app/routers/contact.py
from typing import Any, Dict

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.core.settings import Settings, get_settings
from app.dependencies import get_mail_client
from app.lib.contact_form import submit
from app.lib.contact_models import SubmissionRequest

router = APIRouter(tags=["contact"])


async def _read_fields(request: Request) -> Dict[str, Any]:
    """Accept the site's form post as well as a JSON body with the same fields."""
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}
    form = await request.form()
    return dict(form)


@router.post("/api/contact")
@router.post("/contact")
async def contact(
    request: Request,
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_mail_client),
):
    fields = await _read_fields(request)
    result = await submit(SubmissionRequest.from_form(fields), settings=settings, client=client)
    return JSONResponse(result.to_body(), status_code=result.status_code)
