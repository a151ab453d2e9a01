from datetime import datetime, timezone

import pytest

from models.upload import (
    Accepted,
    Extracted,
    ExtractionFailed,
    Rejected,
    RejectReason,
    UploadedFile,
)
from services import upload_service
from services.document_parser import ExtractionError

MAX_BYTES = 10 * 1024 * 1024


def _file(content=b"Hello world", mime="text/plain", name="resume.txt"):
    return UploadedFile(content=content, file_name=name, mime_type=mime)


class TestValidateUpload:

    @pytest.mark.parametrize("mime", sorted(upload_service.ALLOWED_MIME_TYPES))
    def test_allowed_types_are_accepted(self, mime):
        f = _file(mime=mime)
        assert upload_service.validate_upload(f, MAX_BYTES) == Accepted(f)

    @pytest.mark.parametrize("mime", ["", "image/jpeg", "application/msword", "text/plain-x"])
    def test_other_types_are_rejected(self, mime):
        verdict = upload_service.validate_upload(_file(mime=mime), MAX_BYTES)
        assert verdict == Rejected(RejectReason.UNSUPPORTED_TYPE)

    def test_exactly_ten_megabytes_is_accepted(self):
        f = _file(content=b"\0" * MAX_BYTES, mime="application/pdf")
        assert isinstance(upload_service.validate_upload(f, MAX_BYTES), Accepted)

    def test_one_byte_over_is_rejected(self):
        f = _file(content=b"\0" * (MAX_BYTES + 1), mime="application/pdf")
        assert upload_service.validate_upload(f, MAX_BYTES) == Rejected(RejectReason.TOO_LARGE)

    def test_type_is_checked_before_size(self):
        f = _file(content=b"\0" * 32, mime="image/png")
        assert upload_service.validate_upload(f, 8).reason is RejectReason.UNSUPPORTED_TYPE


class TestRunExtraction:

    @pytest.mark.asyncio
    async def test_success(self, fake_parser):
        outcome = await upload_service.run_extraction(_file())
        assert outcome == Extracted("Hello world")
        assert fake_parser.calls == [(b"Hello world", "text/plain")]

    @pytest.mark.asyncio
    async def test_none_becomes_empty_text(self, fake_parser):
        fake_parser.result = None
        assert await upload_service.run_extraction(_file()) == Extracted("")

    @pytest.mark.asyncio
    async def test_failure_is_returned_not_raised(self, fake_parser):
        error = ExtractionError("corrupt")
        fake_parser.error = error
        outcome = await upload_service.run_extraction(_file())
        assert isinstance(outcome, ExtractionFailed)
        assert outcome.error is error


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Hello world", 2),
        ("  leading and trailing  ", 3),
        ("one\ttwo\nthree   four", 4),
        ("single", 1),
        ("", 0),
    ],
)
def test_count_words(text, expected):
    assert upload_service.count_words(text) == expected


@pytest.mark.parametrize("text, usable", [("", False), (" \n\t", False), (" a ", True)])
def test_is_usable(text, usable):
    assert upload_service.is_usable(text) is usable


def test_build_upload_response_shape():
    result = upload_service.build_parse_result("Hello world")
    now = datetime(2024, 5, 1, 12, 30, 15, 123456, tzinfo=timezone.utc)
    response = upload_service.build_upload_response(_file(), result, now=now)
    assert response.model_dump(by_alias=True) == {
        "success": True,
        "data": {
            "fileName": "resume.txt",
            "fileType": "text/plain",
            "text": "Hello world",
            "textLength": 11,
            "wordCount": 2,
        },
        "timestamp": "2024-05-01T12:30:15.123Z",
    }


def test_supported_formats_catalog():
    catalog = upload_service.supported_formats().model_dump(by_alias=True)
    assert catalog["maxFileSize"] == "10MB"
    assert [f["extension"] for f in catalog["supportedFormats"]] == [".pdf", ".docx", ".txt"]
    assert {f["mimeType"] for f in catalog["supportedFormats"]} == upload_service.ALLOWED_MIME_TYPES


@pytest.mark.parametrize(
    "header, expected",
    [
        ("text/plain", "text/plain"),
        ("text/plain; charset=utf-8", "text/plain"),
        ("Application/PDF", "application/pdf"),
        ("  application/pdf ;name=cv.pdf", "application/pdf"),
        ("", ""),
        (None, ""),
    ],
)
def test_normalize_mime_type(header, expected):
    assert upload_service.normalize_mime_type(header) == expected


@pytest.mark.parametrize("header", ["TEXT/PLAIN", "text/plain; charset=utf-8", "Application/PDF"])
def test_normalized_variants_are_accepted(header):
    f = _file(mime=upload_service.normalize_mime_type(header))
    assert isinstance(upload_service.validate_upload(f, MAX_BYTES), Accepted)
