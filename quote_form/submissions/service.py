"""Quote request processing — verification, rendering and email dispatch."""

from __future__ import annotations

from typing import Optional

import structlog

from quote_form.emails.client import EmailSendResult, OutgoingEmail, ResendEmailClient
from quote_form.emails.renderer import (
    business_subject,
    confirmation_subject,
    render_business_notification,
    render_confirmation,
)
from quote_form.recaptcha.client import RecaptchaClient
from quote_form.schemas.submission import (
    SubmissionConfig,
    SubmissionRequest,
    SubmissionResponse,
    missing_fields,
)
from quote_form.submissions.errors import (
    EmailDeliveryError,
    LowScoreError,
    MissingFieldsError,
)
from quote_form.submissions.uploads import UploadedFile, UploadStorage

logger = structlog.get_logger()

RECAPTCHA_MIN_SCORE = 0.3
RECAPTCHA_SENTINELS = {"no-recaptcha", "recaptcha-error"}

SUCCESS_MESSAGE = (
    "Votre soumission a été envoyée avec succès ! "
    "Vous recevrez une confirmation par email."
)


def parse_submission(fields: dict) -> SubmissionRequest:
    """Validate raw form fields.

    Raises:
        MissingFieldsError: a required field is absent or blank
    """
    missing = missing_fields(fields)
    if missing:
        raise MissingFieldsError(missing)
    return SubmissionRequest.model_validate(fields)


class SubmissionService:
    """Turns one validated quote request into the two outgoing emails."""

    def __init__(
        self,
        config: SubmissionConfig,
        email_client: ResendEmailClient,
        storage: UploadStorage,
        recaptcha_client: Optional[RecaptchaClient] = None,
    ):
        self.config = config
        self.email_client = email_client
        self.storage = storage
        self.recaptcha_client = recaptcha_client

    async def verify(self, token: Optional[str]) -> None:
        """Reject low-score submissions.

        Only a score under the threshold blocks; anything that prevents
        checking lets the submission through.
        """
        if not token or token in RECAPTCHA_SENTINELS:
            logger.info("recaptcha_skipped", reason=token or "no_token")
            return

        if self.recaptcha_client is None:
            logger.warning("recaptcha_skipped", reason="not_configured")
            return

        try:
            result = await self.recaptcha_client.verify(token)
        except Exception as e:
            logger.warning("recaptcha_verification_error", error=str(e))
            return

        if result.score is None:
            logger.warning(
                "recaptcha_no_score",
                success=result.success,
                error_codes=result.error_codes,
            )
            return

        if result.score < RECAPTCHA_MIN_SCORE:
            logger.warning(
                "recaptcha_score_too_low",
                score=result.score,
                threshold=RECAPTCHA_MIN_SCORE,
            )
            raise LowScoreError(result.score)

    async def process(
        self,
        submission: SubmissionRequest,
        uploads: list[UploadedFile],
    ) -> SubmissionResponse:
        """Verify, render and dispatch one quote request.

        Raises:
            LowScoreError: the reCAPTCHA score is under the threshold
            EmailDeliveryError: Resend rejected the business notification
        """
        if self.config.verify_submissions:
            await self.verify(submission.recaptcha_token)

        budget_label = submission.budget_label
        business_html = render_business_notification(
            submission,
            budget_label=budget_label,
            attachment_count=len(uploads),
            business_name=self.config.business_name,
        )
        confirmation_html = render_confirmation(
            submission,
            budget_label=budget_label,
            business_name=self.config.business_name,
            business_website=self.config.business_website,
        )

        attachments = await self.storage.read_attachments(uploads)

        result = await self.email_client.send(OutgoingEmail(
            sender=self.config.from_address,
            to=[self.config.business_recipient],
            subject=business_subject(submission, self.config.business_name),
            html=business_html,
            reply_to=submission.email,
            attachments=attachments,
        ))
        if not result.ok:
            logger.error(
                "business_email_failed",
                error=result.error_message,
                error_name=result.error_name,
            )
            raise EmailDeliveryError(result.error_message)

        logger.info(
            "business_email_sent",
            id=result.id,
            attachments=len(attachments),
        )

        await self._send_confirmation(submission, confirmation_html)

        return SubmissionResponse(
            success=True,
            message=SUCCESS_MESSAGE,
            data={"id": result.id},
        )

    async def _send_confirmation(
        self,
        submission: SubmissionRequest,
        html: str,
    ) -> Optional[EmailSendResult]:
        """Best effort: failures are logged and never reach the caller."""
        try:
            result = await self.email_client.send(OutgoingEmail(
                sender=self.config.from_address,
                to=[submission.email],
                subject=confirmation_subject(self.config.business_name),
                html=html,
                reply_to=self.config.business_recipient,
            ))
        except Exception as e:
            logger.error("confirmation_email_failed", error=str(e))
            return None

        if result.ok:
            logger.info("confirmation_email_sent", id=result.id)
        else:
            logger.error(
                "confirmation_email_failed",
                error=result.error_message,
                error_name=result.error_name,
            )
        return result
