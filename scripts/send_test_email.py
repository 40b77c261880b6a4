"""Send one test email through the configured Resend account.

Usage:
    python -m scripts.send_test_email [recipient]

Defaults to the business address (TO_EMAIL).
"""

import asyncio
import sys
from datetime import datetime, timezone

from quote_form.config import settings
from quote_form.emails.client import OutgoingEmail, get_email_client

TEST_EMAIL_HTML = """<h2>🧪 Test Email</h2>
<p>This is a test email to verify your Resend configuration is working properly.</p>
<p><strong>From:</strong> {sender}</p>
<p><strong>Time:</strong> {timestamp}</p>
<p>If you receive this email, your configuration is working! 🎉</p>"""

ERROR_HINTS = {
    "invalid from address": (
        "Verify your sending domain with Resend, or use onboarding@resend.dev "
        "(https://resend.com/docs/send-with-domains)"
    ),
    "api key": "Check that RESEND_API_KEY is correct",
}


async def main(recipient: str) -> int:
    print(f"API key present: {bool(settings.resend_api_key)}")
    print(f"From: {settings.from_email}")
    print(f"To:   {recipient}")

    result = await get_email_client().send(OutgoingEmail(
        sender=settings.from_email,
        to=[recipient],
        subject=f"🧪 Test Email - {settings.business_name}",
        html=TEST_EMAIL_HTML.format(
            sender=settings.from_email,
            timestamp=datetime.now(timezone.utc).isoformat(),
        ),
    ))

    if not result.ok:
        print(f"Error sending email: {result.error_name}: {result.error_message}")
        lowered = (result.error_message or "").lower()
        for needle, hint in ERROR_HINTS.items():
            if needle in lowered:
                print(f"Hint: {hint}")
        return 1

    print(f"Test email sent, id={result.id}")
    return 0


if __name__ == "__main__":
    to = sys.argv[1] if len(sys.argv) > 1 else settings.to_email
    sys.exit(asyncio.run(main(to)))
