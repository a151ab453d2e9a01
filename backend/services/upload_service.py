# ========================================
# services/upload_service.py - Ingestion, extraction and response shaping
# ========================================

from datetime import datetime, timezone

from models.upload import (
    Accepted,
    DocumentType,
    ExtractionFailed,
    ExtractionResult,
    Extracted,
    IngestionResult,
    MAX_FILE_SIZE_LABEL,
    ParseResult,
    Rejected,
    RejectReason,
    SUPPORTED_FORMATS,
    SupportedFormatsResponse,
    UploadData,
    UploadedFile,
    UploadResponse,
)
from services import document_parser

ALLOWED_MIME_TYPES = frozenset(t.value for t in DocumentType)


def normalize_mime_type(content_type: str | None) -> str:
    """Reduce a Content-Type header to its lowercased type/subtype."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def validate_upload(file: UploadedFile, max_bytes: int) -> IngestionResult:
    """Apply the MIME allowlist and the size cap to an uploaded file."""
    if file.mime_type not in ALLOWED_MIME_TYPES:
        return Rejected(RejectReason.UNSUPPORTED_TYPE)
    if file.size > max_bytes:
        return Rejected(RejectReason.TOO_LARGE)
    return Accepted(file)


async def run_extraction(file: UploadedFile) -> ExtractionResult:
    """Call the document parser once; failures come back as a value."""
    try:
        text = await document_parser.parse_document(file.content, file.mime_type)
    except Exception as exc:
        return ExtractionFailed(exc)
    return Extracted(text or "")


def is_usable(text: str) -> bool:
    return bool(text and text.strip())


def count_words(text: str) -> int:
    return len(text.split())


def build_parse_result(text: str) -> ParseResult:
    return ParseResult(text=text, text_length=len(text), word_count=count_words(text))


def utc_timestamp(now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_upload_response(file: UploadedFile, result: ParseResult,
                          now: datetime | None = None) -> UploadResponse:
    return UploadResponse(
        success=True,
        data=UploadData(
            file_name=file.file_name,
            file_type=file.mime_type,
            text=result.text,
            text_length=result.text_length,
            word_count=result.word_count,
        ),
        timestamp=utc_timestamp(now),
    )


def supported_formats() -> SupportedFormatsResponse:
    return SupportedFormatsResponse(
        supported_formats=list(SUPPORTED_FORMATS),
        max_file_size=MAX_FILE_SIZE_LABEL,
    )
