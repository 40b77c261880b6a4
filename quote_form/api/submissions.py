"""Quote request form endpoint."""

from __future__ import annotations

import json

import structlog
from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from starlette.datastructures import FormData, UploadFile

from quote_form.api.dependencies import get_submission_config, get_submission_service
from quote_form.schemas.submission import (
    FIELD_EMAIL,
    FIELD_IMAGES,
    SubmissionConfig,
    SubmissionResponse,
)
from quote_form.submissions.errors import INTERNAL_ERROR_MESSAGE, SubmissionError
from quote_form.submissions.service import SubmissionService, parse_submission
from quote_form.submissions.uploads import UploadedFile

logger = structlog.get_logger()

router = APIRouter(tags=["submissions"])

SUBMIT_PATH = "/api/submit-form"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

METHOD_NOT_ALLOWED_MESSAGE = "Méthode non autorisée. Utilisez POST."
NOT_ALLOWED_METHODS = ["GET", "HEAD", "PUT", "PATCH", "DELETE", "TRACE", "CONNECT"]


def _json(status_code: int, body: SubmissionResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=CORS_HEADERS,
    )


async def _read_body(request: Request) -> tuple[dict, list[UploadFile], FormData | None]:
    """Extract text fields and image uploads from a JSON or form body.

    A body that is not a JSON object yields no fields, so validation
    rejects it like an empty form.
    """
    content_type = request.headers.get("content-type", "")

    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning("submission_invalid_json")
            return {}, [], None
        if not isinstance(payload, dict):
            return {}, [], None
        fields = {k: str(v) for k, v in payload.items() if v is not None}
        return fields, [], None

    form = await request.form()
    fields = {k: v for k, v in form.items() if isinstance(v, str)}
    uploads = [
        item for item in form.getlist(FIELD_IMAGES)
        if isinstance(item, UploadFile) and item.filename
    ]
    return fields, uploads, form


@router.options(SUBMIT_PATH)
async def submit_form_preflight() -> Response:
    """CORS preflight."""
    return Response(status_code=200, headers=CORS_HEADERS)


@router.api_route(SUBMIT_PATH, methods=NOT_ALLOWED_METHODS)
async def submit_form_method_not_allowed() -> JSONResponse:
    return _json(405, SubmissionResponse(success=False, message=METHOD_NOT_ALLOWED_MESSAGE))


@router.post(SUBMIT_PATH)
async def submit_form(
    request: Request,
    config: SubmissionConfig = Depends(get_submission_config),
    service: SubmissionService = Depends(get_submission_service),
) -> JSONResponse:
    """Receive a quote request and email it to the business.

    Accepts URL-encoded, JSON or multipart bodies. Images from the
    `Contact-2-Image` field are attached to the business notification.
    Temporary files are removed on every exit path.

    Returns:
        200 on success, 400 on invalid input or low reCAPTCHA score,
        500 when the business email could not be sent.
    """
    stored: list[UploadedFile] = []
    form: FormData | None = None

    try:
        fields, uploads, form = await _read_body(request)

        email = fields.get(FIELD_EMAIL, "")
        logger.info(
            "submission_received",
            fields=sorted(k for k, v in fields.items() if v.strip()),
            email_domain=email.split("@")[-1] if "@" in email else None,
            files=len(uploads),
        )

        if uploads and config.allow_attachments:
            stored = await service.storage.save(uploads)
        elif uploads:
            logger.warning("attachments_ignored", count=len(uploads))

        submission = parse_submission(fields)
        result = await service.process(submission, stored)
        return _json(200, result)

    except SubmissionError as e:
        logger.warning(
            "submission_rejected",
            status=e.status_code,
            reason=str(e),
        )
        debug = e.detail if config.debug and e.status_code >= 500 else None
        return _json(
            e.status_code,
            SubmissionResponse(success=False, message=e.message, debug=debug),
        )

    except Exception as e:
        logger.exception("submission_failed", error=str(e))
        return _json(
            500,
            SubmissionResponse(
                success=False,
                message=INTERNAL_ERROR_MESSAGE,
                debug=str(e) if config.debug else None,
            ),
        )

    finally:
        await service.storage.cleanup(stored)
        if form is not None:
            await form.close()
