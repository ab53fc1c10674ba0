# app/routers/health.py
from fastapi import APIRouter, Depends
from app.core.settings import Settings, get_settings

router = APIRouter(prefix="/health", tags=["health"])

@router.get("")
async def health_root():
    return {"status": "ok"}

@router.get("/mail")
async def health_mail(settings: Settings = Depends(get_settings)):
    # only reports whether credentials exist, never their values
    return {"configured": settings.mail_configured, "provider": "brevo"}
