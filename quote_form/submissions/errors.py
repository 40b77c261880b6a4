"""Submission errors, each mapped to an HTTP status and a user-facing message."""

from typing import Optional

MISSING_FIELDS_MESSAGE = "Tous les champs obligatoires doivent être remplis."
LOW_SCORE_MESSAGE = (
    "Vérification de sécurité échouée : score de sécurité trop faible. "
    "Veuillez réessayer."
)
UPLOAD_REJECTED_MESSAGE = (
    "Seules les images sont acceptées (5 fichiers maximum, 5 Mo par fichier)."
)
EMAIL_FAILED_MESSAGE = (
    "Erreur lors de l'envoi de l'email. Veuillez réessayer plus tard."
)
INTERNAL_ERROR_MESSAGE = (
    "Erreur interne du serveur. Veuillez réessayer plus tard."
)


class SubmissionError(Exception):
    status_code = 400
    message = INTERNAL_ERROR_MESSAGE

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail or self.message)
        self.detail = detail


class MissingFieldsError(SubmissionError):
    message = MISSING_FIELDS_MESSAGE

    def __init__(self, fields: list[str]):
        super().__init__(f"missing fields: {', '.join(fields)}")
        self.fields = fields


class LowScoreError(SubmissionError):
    message = LOW_SCORE_MESSAGE

    def __init__(self, score: float):
        super().__init__(f"recaptcha score {score}")
        self.score = score


class UploadRejectedError(SubmissionError):
    message = UPLOAD_REJECTED_MESSAGE


class EmailDeliveryError(SubmissionError):
    """The business notification could not be delivered by the provider."""

    status_code = 500
    message = EMAIL_FAILED_MESSAGE
