"""HTML email rendering for quote requests."""

import pathlib

from jinja2 import Environment, FileSystemLoader, select_autoescape

from quote_form.schemas.submission import SubmissionRequest

TEMPLATES_DIR = pathlib.Path(__file__).parent / "templates"
env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
)

BUSINESS_SUBJECT_TEMPLATE = "🏗️ Nouveau Projet - {client} - {business_name}"
CONFIRMATION_SUBJECT_TEMPLATE = "✅ Confirmation de soumission - {business_name}"


def business_subject(submission: SubmissionRequest, business_name: str) -> str:
    client = submission.full_name
    if submission.city:
        client = f"{client} ({submission.city})"
    return BUSINESS_SUBJECT_TEMPLATE.format(client=client, business_name=business_name)


def confirmation_subject(business_name: str) -> str:
    return CONFIRMATION_SUBJECT_TEMPLATE.format(business_name=business_name)


def render_business_notification(
    submission: SubmissionRequest,
    budget_label: str,
    attachment_count: int,
    business_name: str,
) -> str:
    """Render the notification sent to the business inbox.

    Images travel as email attachments; the body only mentions how many
    were joined.
    """
    template = env.get_template("business_notification.html")
    return template.render(
        submission=submission,
        budget_label=budget_label,
        attachment_count=attachment_count,
        business_name=business_name,
    )


def render_confirmation(
    submission: SubmissionRequest,
    budget_label: str,
    business_name: str,
    business_website: str,
) -> str:
    """Render the acknowledgement sent back to the submitter."""
    template = env.get_template("confirmation.html")
    return template.render(
        submission=submission,
        budget_label=budget_label,
        business_name=business_name,
        business_website=business_website,
    )
