"""FastAPI dependencies for the form endpoint."""

from __future__ import annotations

from typing import Optional

from fastapi import Depends

from quote_form.config import settings
from quote_form.emails.client import ResendEmailClient, get_email_client
from quote_form.recaptcha.client import RecaptchaClient, get_recaptcha_client
from quote_form.schemas.submission import SubmissionConfig
from quote_form.submissions.service import SubmissionService
from quote_form.submissions.uploads import UploadStorage


def get_submission_config() -> SubmissionConfig:
    """Build the handler configuration from the environment settings."""
    return SubmissionConfig(
        business_recipient=settings.to_email,
        from_address=settings.from_email,
        verify_submissions=settings.verify_submissions,
        allow_attachments=settings.allow_attachments,
        business_name=settings.business_name,
        business_website=settings.business_website,
        debug=settings.debug,
    )


def get_upload_storage() -> UploadStorage:
    return UploadStorage(settings.upload_dir)


def get_submission_service(
    config: SubmissionConfig = Depends(get_submission_config),
    email_client: ResendEmailClient = Depends(get_email_client),
    recaptcha_client: Optional[RecaptchaClient] = Depends(get_recaptcha_client),
    storage: UploadStorage = Depends(get_upload_storage),
) -> SubmissionService:
    return SubmissionService(
        config=config,
        email_client=email_client,
        storage=storage,
        recaptcha_client=recaptcha_client,
    )
