import asyncio
from io import BytesIO

from PyPDF2 import PdfReader
import docx

from models.upload import DocumentType
from utils.logger import get_logger

log = get_logger("DocumentParser")


class DocumentParserError(Exception):
    """Base exception for document parser errors."""


class UnsupportedFormatError(DocumentParserError):
    """Raised when the MIME type has no extractor."""


class ExtractionError(DocumentParserError):
    """Raised when a reader fails on the document content."""


def _extract_pdf(file_bytes: bytes) -> str:
    try:
        reader = PdfReader(BytesIO(file_bytes))
        return "\n".join([page.extract_text() or "" for page in reader.pages])
    except Exception as exc:
        raise ExtractionError(f"Failed to read PDF: {exc}") from exc


# python-docx supports .docx (not legacy .doc)
def _extract_docx(file_bytes: bytes) -> str:
    try:
        doc = docx.Document(BytesIO(file_bytes))
        return "\n".join(paragraph.text for paragraph in doc.paragraphs)
    except Exception as exc:
        raise ExtractionError(f"Failed to read DOCX: {exc}") from exc


def _extract_txt(file_bytes: bytes) -> str:
    return file_bytes.decode("utf-8", errors="ignore").replace("\x00", "")


_EXTRACTORS = {
    DocumentType.PDF.value: _extract_pdf,
    DocumentType.DOCX.value: _extract_docx,
    DocumentType.TXT.value: _extract_txt,
}


def extract_text(file_bytes: bytes, mime_type: str) -> str:
    """Synchronously extract plain text from a PDF, DOCX or TXT payload."""
    extractor = _EXTRACTORS.get(mime_type)
    if extractor is None:
        raise UnsupportedFormatError(f"Unsupported document format: {mime_type}")
    return extractor(file_bytes)


async def parse_document(file_bytes: bytes, mime_type: str) -> str:
    """
    Extract plain text from an uploaded document.

    The readers are blocking, so the work runs in a worker thread and the
    event loop keeps serving other requests meanwhile.
    """
    log.debug(f"Extracting {len(file_bytes)} bytes as {mime_type}")
    return await asyncio.to_thread(extract_text, file_bytes, mime_type)
