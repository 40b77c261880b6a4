"""Temporary storage for images attached to a quote request."""

from __future__ import annotations

import asyncio
import pathlib
import uuid
from dataclasses import dataclass

import structlog
from starlette.datastructures import UploadFile

from quote_form.emails.client import EmailAttachment
from quote_form.submissions.errors import UploadRejectedError

logger = structlog.get_logger()

MAX_FILES = 5
MAX_FILE_BYTES = 5 * 1024 * 1024  # 5MB
DEFAULT_CONTENT_TYPE = "image/jpeg"


@dataclass
class UploadedFile:
    path: pathlib.Path
    original_name: str
    content_type: str
    size: int


class UploadStorage:
    """Writes uploaded images to a directory and removes them afterwards."""

    def __init__(self, directory: str | pathlib.Path):
        self.directory = pathlib.Path(directory)

    def _target(self, filename: str) -> pathlib.Path:
        # Never trust client paths
        safe_name = pathlib.Path(filename).name or "image"
        return self.directory / f"{uuid.uuid4().hex}-{safe_name}"

    async def save(self, uploads: list[UploadFile]) -> list[UploadedFile]:
        """Validate and store uploads.

        Raises:
            UploadRejectedError: too many files, a file over the size
                limit, or a non-image content type. Files already written
                for this call are removed first.
        """
        if len(uploads) > MAX_FILES:
            raise UploadRejectedError(f"{len(uploads)} files, max {MAX_FILES}")

        saved: list[UploadedFile] = []
        try:
            for upload in uploads:
                saved.append(await self._save_one(upload))
        except BaseException:
            await self.cleanup(saved)
            raise

        logger.info(
            "uploads_saved",
            count=len(saved),
            total_bytes=sum(f.size for f in saved),
        )
        return saved

    async def _save_one(self, upload: UploadFile) -> UploadedFile:
        content_type = upload.content_type or ""
        if not content_type.startswith("image/"):
            raise UploadRejectedError(
                f"{upload.filename}: unsupported type {content_type or 'unknown'}"
            )

        content = await upload.read(MAX_FILE_BYTES + 1)
        if len(content) > MAX_FILE_BYTES:
            raise UploadRejectedError(f"{upload.filename}: exceeds 5MB")

        path = self._target(upload.filename or "image")
        await asyncio.to_thread(path.write_bytes, content)

        return UploadedFile(
            path=path,
            original_name=upload.filename or path.name,
            content_type=content_type,
            size=len(content),
        )

    async def read_attachments(self, files: list[UploadedFile]) -> list[EmailAttachment]:
        """Load stored files as email attachments, skipping unreadable ones."""
        attachments = []
        for stored in files:
            try:
                content = await asyncio.to_thread(stored.path.read_bytes)
            except OSError as e:
                logger.error(
                    "upload_read_failed",
                    filename=stored.original_name,
                    error=str(e),
                )
                continue

            attachments.append(EmailAttachment(
                filename=stored.original_name or f"image_{uuid.uuid4().hex[:8]}.jpg",
                content=content,
                content_type=stored.content_type or DEFAULT_CONTENT_TYPE,
            ))
        return attachments

    async def cleanup(self, files: list[UploadedFile]) -> None:
        """Delete stored files. Failures are logged, never raised."""
        for stored in files:
            try:
                await asyncio.to_thread(stored.path.unlink, missing_ok=True)
            except OSError as e:
                logger.error(
                    "upload_cleanup_failed",
                    path=str(stored.path),
                    error=str(e),
                )
        if files:
            logger.debug("uploads_cleaned", count=len(files))
