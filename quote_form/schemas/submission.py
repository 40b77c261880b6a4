"""Quote-request form schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# Form field names posted by the website. Keep them verbatim.
FIELD_FULL_NAME = "Contact-2-First-Name"
FIELD_CITY = "Contact-2-Last-Name"
FIELD_EMAIL = "Contact-2-Email-2"
FIELD_PHONE = "Contact-2-Phone"
FIELD_SERVICE = "Contact-2-Select"
FIELD_BUDGET = "Contact-2-Radio"
FIELD_MESSAGE = "Contact-2-Message"
FIELD_RECAPTCHA = "g-recaptcha-response"
FIELD_IMAGES = "Contact-2-Image"

REQUIRED_FIELDS = (
    FIELD_FULL_NAME,
    FIELD_EMAIL,
    FIELD_PHONE,
    FIELD_SERVICE,
    FIELD_BUDGET,
    FIELD_MESSAGE,
)

BUDGET_LABELS = {
    "Contact 2 Radio 1": "25 000$ et moins",
    "Contact 2 Radio 2": "25 000$-50 000$",
    "Contact 2 Radio 3": "50 000-100 000$",
    "Contact 2 Radio 4": "100 000$ et plus",
}


def format_budget(code: str) -> str:
    """Map a budget radio value to its price range label.

    Unknown values are returned unchanged.
    """
    return BUDGET_LABELS.get(code, code)


def missing_fields(fields: dict) -> list[str]:
    """Return the required form fields that are absent or blank."""
    return [
        name for name in REQUIRED_FIELDS
        if not str(fields.get(name) or "").strip()
    ]


class SubmissionRequest(BaseModel):
    """A validated quote request, as posted by the website form."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    full_name: str = Field(alias=FIELD_FULL_NAME)
    city: str = Field("", alias=FIELD_CITY)
    email: str = Field(alias=FIELD_EMAIL)
    phone: str = Field(alias=FIELD_PHONE)
    service: str = Field(alias=FIELD_SERVICE)
    budget: str = Field(alias=FIELD_BUDGET)
    message: str = Field(alias=FIELD_MESSAGE)
    recaptcha_token: Optional[str] = Field(None, alias=FIELD_RECAPTCHA)

    @property
    def budget_label(self) -> str:
        return format_budget(self.budget)


class SubmissionConfig(BaseModel):
    """Per-deployment knobs of the submission handler."""

    business_recipient: str
    from_address: str
    verify_submissions: bool = True
    allow_attachments: bool = True
    business_name: str = "Construction Ste-Marie"
    business_website: str = "constructionstemarie.com"
    debug: bool = False


class SubmissionResponse(BaseModel):
    """JSON envelope returned by the form endpoint."""

    success: bool
    message: str
    data: Optional[dict] = None
    debug: Optional[str] = None
