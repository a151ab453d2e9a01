"""
Upload error taxonomy and the process-wide exception handlers.

Every client-facing error renders as ``{"error": ..., "message": ...}``.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from utils.logger import get_logger

log = get_logger("ErrorHandlers")


class UploadError(Exception):
    """Base class for errors that map onto a two-field error response."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    error: str = "Upload failed"
    message: str = "The upload could not be processed."

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.error, "message": self.message}


class ValidationError(UploadError):
    error = "No file uploaded"
    message = "Please upload a resume file"


class UnsupportedTypeError(UploadError):
    error = "Invalid file type"
    message = "Invalid file type. Only PDF, DOCX, and TXT files are allowed."


class FileTooLargeError(UploadError):
    status_code = 413
    error = "File too large"
    message = "File exceeds the maximum upload size of 10MB."


class EmptyExtractionError(UploadError):
    error = "Document parsing failed"
    message = (
        "Could not extract text from the uploaded file. "
        "Please ensure the file contains readable text."
    )


class ExtractionFailure(UploadError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error = "Document extraction failed"
    message = "An error occurred while processing the document."


async def upload_error_handler(request: Request, exc: UploadError) -> JSONResponse:
    if exc.status_code >= 500:
        log.error(f"{exc.error} on {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid request", "message": "The request body could not be read."},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    log.error(f"Unhandled error on {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error", "message": "An unexpected error occurred."},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UploadError, upload_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
