# backend/app/dependencies.py
from typing import AsyncIterator

import httpx
from fastapi import Depends

from app.core.settings import Settings, get_settings


async def get_mail_client(settings: Settings = Depends(get_settings)) -> AsyncIterator[httpx.AsyncClient]:
    # one client per request; nothing is shared between submissions
    async with httpx.AsyncClient(timeout=settings.mail_timeout_seconds) as client:
        yield client
