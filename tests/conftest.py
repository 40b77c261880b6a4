"""Test fixtures and configuration."""

import os

# Settings are read at import time; give them test values first.
os.environ.setdefault("RESEND_API_KEY", "re_test_key")
os.environ.setdefault("FROM_EMAIL", "noreply@example.com")
os.environ.setdefault("TO_EMAIL", "business@example.com")
os.environ.setdefault("RECAPTCHA_SECRET_KEY", "")

import pytest
from unittest.mock import AsyncMock

from fastapi.testclient import TestClient

from quote_form.api.dependencies import get_submission_config, get_upload_storage
from quote_form.emails.client import EmailSendResult, get_email_client
from quote_form.main import app
from quote_form.recaptcha.client import get_recaptcha_client
from quote_form.schemas.submission import SubmissionConfig, SubmissionRequest
from quote_form.submissions.uploads import UploadStorage

BUSINESS_EMAIL = "business@example.com"
SUBMITTER_EMAIL = "jean.tremblay@example.com"


@pytest.fixture
def submission_config():
    """Handler config with verification and attachments enabled."""
    return SubmissionConfig(
        business_recipient=BUSINESS_EMAIL,
        from_address="noreply@example.com",
        verify_submissions=True,
        allow_attachments=True,
    )


@pytest.fixture
def mock_email_client():
    """Email client whose sends all succeed."""
    client = AsyncMock()
    client.send = AsyncMock(return_value=EmailSendResult(id="email-123"))
    return client


@pytest.fixture
def mock_recaptcha_client():
    """reCAPTCHA client mock; tests set verify's return value."""
    client = AsyncMock()
    client.verify = AsyncMock()
    return client


@pytest.fixture
def upload_dir(tmp_path):
    directory = tmp_path / "uploads"
    directory.mkdir()
    return directory


@pytest.fixture
def storage(upload_dir):
    return UploadStorage(upload_dir)


@pytest.fixture
def client(submission_config, mock_email_client, mock_recaptcha_client, storage):
    """TestClient with provider clients, config and storage overridden."""
    app.dependency_overrides[get_submission_config] = lambda: submission_config
    app.dependency_overrides[get_email_client] = lambda: mock_email_client
    app.dependency_overrides[get_recaptcha_client] = lambda: mock_recaptcha_client
    app.dependency_overrides[get_upload_storage] = lambda: storage
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def valid_form():
    """A complete quote request as posted by the website."""
    return {
        "Contact-2-First-Name": "Jean Tremblay",
        "Contact-2-Last-Name": "Laval",
        "Contact-2-Email-2": SUBMITTER_EMAIL,
        "Contact-2-Phone": "450-555-0199",
        "Contact-2-Select": "Agrandissement de maison",
        "Contact-2-Radio": "Contact 2 Radio 2",
        "Contact-2-Message": "Nous aimerions agrandir la cuisine.",
    }


@pytest.fixture
def submission(valid_form):
    """The valid form, parsed."""
    return SubmissionRequest.model_validate(valid_form)
