# ========================================
# models/upload.py - Upload and catalog models
# ========================================

from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field


class DocumentType(str, Enum):
    PDF = "application/pdf"
    DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    TXT = "text/plain"


# ---------- Request-scoped values ------------------------------------ #

@dataclass(frozen=True)
class UploadedFile:
    content: bytes
    file_name: str
    mime_type: str

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class ParseResult:
    text: str
    text_length: int
    word_count: int


# ---------- Ingestion outcome ---------------------------------------- #

class RejectReason(str, Enum):
    UNSUPPORTED_TYPE = "unsupported_type"
    TOO_LARGE = "too_large"


@dataclass(frozen=True)
class Accepted:
    file: UploadedFile


@dataclass(frozen=True)
class Rejected:
    reason: RejectReason


IngestionResult = Union[Accepted, Rejected]


# ---------- Extraction outcome --------------------------------------- #

@dataclass(frozen=True)
class Extracted:
    text: str


@dataclass(frozen=True)
class ExtractionFailed:
    error: Exception


ExtractionResult = Union[Extracted, ExtractionFailed]


# ---------- Response envelopes --------------------------------------- #

class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class UploadData(_CamelModel):
    file_name: str = Field(..., alias="fileName")
    file_type: str = Field(..., alias="fileType")
    text: str
    text_length: int = Field(..., alias="textLength")
    word_count: int = Field(..., alias="wordCount")


class UploadResponse(_CamelModel):
    success: bool = True
    data: UploadData
    timestamp: str


class ErrorResponse(BaseModel):
    error: str
    message: str


class FormatDescriptor(_CamelModel):
    extension: str
    mime_type: str = Field(..., alias="mimeType")
    description: str


class SupportedFormatsResponse(_CamelModel):
    supported_formats: List[FormatDescriptor] = Field(..., alias="supportedFormats")
    max_file_size: str = Field(..., alias="maxFileSize")


SUPPORTED_FORMATS = (
    FormatDescriptor(extension=".pdf", mime_type=DocumentType.PDF.value,
                     description="Portable Document Format"),
    FormatDescriptor(extension=".docx", mime_type=DocumentType.DOCX.value,
                     description="Microsoft Word Document"),
    FormatDescriptor(extension=".txt", mime_type=DocumentType.TXT.value,
                     description="Plain Text File"),
)

MAX_FILE_SIZE_LABEL = "10MB"
