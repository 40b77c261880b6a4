"""Resend email client — sends transactional emails via the Resend API."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Optional

import resend
from resend.exceptions import ResendError
import structlog

from quote_form.config import settings

logger = structlog.get_logger()

# Lazy singleton
_client: Optional["ResendEmailClient"] = None


@dataclass
class EmailAttachment:
    filename: str
    content: bytes
    content_type: str = "image/jpeg"


@dataclass
class OutgoingEmail:
    sender: str
    to: list[str]
    subject: str
    html: str
    reply_to: Optional[str] = None
    attachments: list[EmailAttachment] = field(default_factory=list)


@dataclass
class EmailSendResult:
    """Outcome of a single send: an id on success, an error otherwise."""

    id: Optional[str] = None
    error_message: Optional[str] = None
    error_name: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error_message is None


class ResendEmailClient:
    """Async wrapper around Resend's synchronous SDK."""

    def __init__(self, api_key: str):
        resend.api_key = api_key

    @staticmethod
    def _to_params(email: OutgoingEmail) -> dict:
        params: dict = {
            "from": email.sender,
            "to": email.to,
            "subject": email.subject,
            "html": email.html,
        }
        if email.reply_to:
            params["reply_to"] = email.reply_to
        if email.attachments:
            params["attachments"] = [
                {
                    "filename": attachment.filename,
                    "content": list(attachment.content),
                    "content_type": attachment.content_type,
                }
                for attachment in email.attachments
            ]
        return params

    async def send(self, email: OutgoingEmail) -> EmailSendResult:
        """Send one email.

        Args:
            email: Message to deliver

        Returns:
            EmailSendResult with the Resend message id, or the provider error.
            Errors reported by Resend are returned, not raised.
        """
        params = self._to_params(email)

        try:
            # Resend SDK is synchronous — run in thread pool
            response = await asyncio.to_thread(resend.Emails.send, params)
        except ResendError as e:
            message = getattr(e, "message", None) or str(e)
            name = getattr(e, "error_type", None) or type(e).__name__
            logger.error(
                "resend_send_failed",
                to=email.to,
                error=message,
                error_name=name,
            )
            return EmailSendResult(error_message=message, error_name=name)

        message_id = response.get("id") if response else None
        logger.info(
            "resend_email_sent",
            to=email.to,
            id=message_id,
            attachments=len(email.attachments),
        )
        return EmailSendResult(id=message_id)


def get_email_client() -> ResendEmailClient:
    """Get or create the singleton Resend client."""
    global _client

    if _client is None:
        _client = ResendEmailClient(api_key=settings.resend_api_key)
        logger.info(
            "resend_client_initialized",
            api_key_prefix=settings.resend_api_key[:5],
            from_email=settings.from_email,
        )
    return _client
