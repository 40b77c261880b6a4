"""Pydantic schemas."""

from quote_form.schemas.submission import (
    BUDGET_LABELS,
    REQUIRED_FIELDS,
    SubmissionConfig,
    SubmissionRequest,
    SubmissionResponse,
    format_budget,
    missing_fields,
)

__all__ = [
    "BUDGET_LABELS",
    "REQUIRED_FIELDS",
    "SubmissionConfig",
    "SubmissionRequest",
    "SubmissionResponse",
    "format_budget",
    "missing_fields",
]
