"""Tests for email subjects and HTML templates."""

from quote_form.emails.renderer import (
    business_subject,
    confirmation_subject,
    render_business_notification,
    render_confirmation,
)


class TestSubjects:

    def test_business_subject(self, submission):
        subject = business_subject(submission, "Construction Ste-Marie")
        assert subject == "🏗️ Nouveau Projet - Jean Tremblay (Laval) - Construction Ste-Marie"

    def test_business_subject_without_city(self, submission):
        submission.city = ""

        subject = business_subject(submission, "Construction Ste-Marie")

        assert subject == "🏗️ Nouveau Projet - Jean Tremblay - Construction Ste-Marie"
        assert "()" not in subject

    def test_confirmation_subject(self):
        assert confirmation_subject("Construction Ste-Marie") == (
            "✅ Confirmation de soumission - Construction Ste-Marie"
        )


class TestBusinessNotification:

    def test_contains_all_fields(self, submission):
        html = render_business_notification(
            submission,
            budget_label="25 000$-50 000$",
            attachment_count=0,
            business_name="Construction Ste-Marie",
        )

        assert "Jean Tremblay" in html
        assert "Laval" in html
        assert "jean.tremblay@example.com" in html
        assert "450-555-0199" in html
        assert "Agrandissement de maison" in html
        assert "25 000$-50 000$" in html
        assert "Nous aimerions agrandir la cuisine." in html
        assert "Images jointes" not in html

    def test_attachment_notice_plural(self, submission):
        html = render_business_notification(
            submission, budget_label="x", attachment_count=3, business_name="CSM",
        )
        assert "Images jointes (3)" in html
        assert "joint 3 images" in html

    def test_attachment_notice_singular(self, submission):
        html = render_business_notification(
            submission, budget_label="x", attachment_count=1, business_name="CSM",
        )
        assert "joint 1 image à" in html

    def test_user_input_is_escaped(self, submission):
        submission.message = "<script>alert(1)</script>"

        html = render_business_notification(
            submission, budget_label="x", attachment_count=0, business_name="CSM",
        )

        assert "<script>" not in html
        assert "&lt;script&gt;" in html


class TestConfirmation:

    def test_summary(self, submission):
        html = render_confirmation(
            submission,
            budget_label="25 000$-50 000$",
            business_name="Construction Ste-Marie",
            business_website="constructionstemarie.com",
        )

        assert "Bonjour <strong>Jean Tremblay</strong>" in html
        assert "Agrandissement de maison" in html
        assert "25 000$-50 000$" in html
        assert "Laval" in html
        assert "constructionstemarie.com" in html

    def test_city_line_omitted_when_blank(self, submission):
        submission.city = ""

        html = render_confirmation(
            submission, budget_label="x", business_name="CSM", business_website="csm.ca",
        )

        assert "Localisation" not in html
