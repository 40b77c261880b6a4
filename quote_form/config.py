"""Application configuration via environment variables."""

import tempfile

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Resend
    resend_api_key: str
    from_email: str
    to_email: str  # business recipient for new quote requests

    # reCAPTCHA v3
    recaptcha_secret_key: str = ""

    # Google Maps (browser key served by /api/maps-config)
    google_maps_api_key: str = ""

    # Form behaviour
    verify_submissions: bool = True
    allow_attachments: bool = True
    upload_dir: str = Field(default_factory=tempfile.gettempdir)

    # Business identity used in the email templates
    business_name: str = "Construction Ste-Marie"
    business_website: str = "constructionstemarie.com"

    # App
    log_level: str = "INFO"
    environment: str = "production"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def debug(self) -> bool:
        return self.environment == "development"


settings = Settings()  # type: ignore[call-arg]
