"""reCAPTCHA v3 client — exchanges a browser token for a human score."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import httpx
import structlog

from quote_form.config import settings

logger = structlog.get_logger()

VERIFY_URL = "https://www.google.com/recaptcha/api/siteverify"

# Lazy singleton
_client: Optional["RecaptchaClient"] = None


@dataclass
class VerificationResult:
    success: bool
    score: Optional[float] = None
    action: Optional[str] = None
    hostname: Optional[str] = None
    error_codes: list[str] = field(default_factory=list)


class RecaptchaClient:
    """Verifies reCAPTCHA tokens against Google's siteverify endpoint."""

    def __init__(
        self,
        secret_key: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.secret_key = secret_key
        self._transport = transport

    async def verify(self, token: str) -> VerificationResult:
        """Verify a token.

        Network errors, non-2xx responses and malformed bodies are raised
        to the caller.
        """
        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.post(
                VERIFY_URL,
                data={"secret": self.secret_key, "response": token},
            )
            response.raise_for_status()
            payload = response.json()

        score = payload.get("score")
        result = VerificationResult(
            success=bool(payload.get("success")),
            score=float(score) if score is not None else None,
            action=payload.get("action"),
            hostname=payload.get("hostname"),
            error_codes=list(payload.get("error-codes") or []),
        )

        logger.info(
            "recaptcha_verified",
            success=result.success,
            score=result.score,
            action=result.action,
            hostname=result.hostname,
            error_codes=result.error_codes,
        )
        return result


def get_recaptcha_client() -> Optional[RecaptchaClient]:
    """Get or create the singleton reCAPTCHA client.

    Returns None if no secret key is configured.
    """
    global _client

    if _client is not None:
        return _client

    if not settings.recaptcha_secret_key:
        logger.debug("recaptcha_client_not_configured")
        return None

    _client = RecaptchaClient(secret_key=settings.recaptcha_secret_key)

    logger.info(
        "recaptcha_client_initialized",
        secret_prefix=settings.recaptcha_secret_key[:6],
    )
    return _client
