# app/core/settings.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    api_title: str = Field(default="Contact API", alias="API_TITLE")
    cors_origins: str = Field(default="http://localhost:5173", alias="CORS_ORIGINS")

    # Brevo transactional email; both are required before anything is sent
    brevo_api_key: Optional[str] = Field(default=None, alias="BREVO_API_KEY")
    sender_email: Optional[str] = Field(default=None, alias="CONTACT_FROM_EMAIL")
    sender_name: str = Field(default="Website contact form", alias="CONTACT_FROM_NAME")

    # Inbox that receives the messages; falls back to the sender address
    recipient_email: Optional[str] = Field(default=None, alias="CONTACT_TO_EMAIL")

    brevo_api_url: str = Field(default="https://api.brevo.com/v3/smtp/email", alias="BREVO_API_URL")
    mail_timeout_seconds: float = Field(default=10.0, alias="MAIL_TIMEOUT_SECONDS")

    @property
    def mail_configured(self) -> bool:
        # same rule as the mailer: blank or whitespace-only counts as missing
        return bool((self.brevo_api_key or "").strip() and (self.sender_email or "").strip())


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
