from typing import List, Optional

from fastapi import APIRouter, Depends, Request
from starlette.datastructures import UploadFile

from config import Settings, get_settings
from models.upload import (
    ErrorResponse,
    ExtractionFailed,
    Rejected,
    RejectReason,
    SupportedFormatsResponse,
    UploadedFile,
    UploadResponse,
)
from services import upload_service
from utils.errors import (
    EmptyExtractionError,
    ExtractionFailure,
    FileTooLargeError,
    UnsupportedTypeError,
    ValidationError,
)
from utils.logger import get_logger

router = APIRouter(prefix="/api/upload", tags=["Upload"])
log = get_logger("UploadRoutes")

RESUME_FIELD = "resume"

_REJECTIONS = {
    RejectReason.UNSUPPORTED_TYPE: UnsupportedTypeError,
    RejectReason.TOO_LARGE: FileTooLargeError,
}

# The form is read by hand, so the multipart body is documented here.
_UPLOAD_REQUEST_BODY = {
    "requestBody": {
        "content": {
            "multipart/form-data": {
                "schema": {
                    "type": "object",
                    "properties": {RESUME_FIELD: {"type": "string", "format": "binary"}},
                    "required": [RESUME_FIELD],
                }
            }
        },
        "required": True,
    }
}


def _single_file(values: List) -> Optional[UploadFile]:
    # Plain text values are ignored; several files under one field count as no file.
    files = [v for v in values if isinstance(v, UploadFile)]
    if len(files) != 1:
        return None
    upload = files[0]
    return upload if upload.filename else None


@router.post(
    "",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}, 413: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    openapi_extra=_UPLOAD_REQUEST_BODY,
)
async def upload_resume(request: Request, settings: Settings = Depends(get_settings)):
    """Upload a resume and return its extracted text."""
    async with request.form() as form:
        upload = _single_file(form.getlist(RESUME_FIELD))
        if upload is None:
            raise ValidationError()

        # Starlette has already spooled the part; copy at most one byte past the cap.
        content = await upload.read(settings.max_upload_bytes + 1)
        file = UploadedFile(
            content=content,
            file_name=upload.filename,
            mime_type=upload_service.normalize_mime_type(upload.content_type),
        )

    log.info(f"📁 Processing file: {file.file_name} ({file.mime_type})")

    verdict = upload_service.validate_upload(file, settings.max_upload_bytes)
    if isinstance(verdict, Rejected):
        log.warning(f"Rejected {file.file_name} ({file.mime_type}): {verdict.reason.value}")
        raise _REJECTIONS[verdict.reason]()

    outcome = await upload_service.run_extraction(file)
    if isinstance(outcome, ExtractionFailed):
        raise ExtractionFailure() from outcome.error

    if not upload_service.is_usable(outcome.text):
        raise EmptyExtractionError()

    result = upload_service.build_parse_result(outcome.text)
    log.info(f"✅ Successfully parsed {file.file_name}. Text length: {result.text_length} characters")
    return upload_service.build_upload_response(file, result)


@router.get("/supported-formats", response_model=SupportedFormatsResponse)
async def supported_formats():
    """List the accepted document formats and the upload size cap."""
    return upload_service.supported_formats()
