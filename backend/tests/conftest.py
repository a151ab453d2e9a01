import pytest
from fastapi.testclient import TestClient

from config import Settings, get_settings
from main import app
from services import document_parser


class FakeParser:
    """Stands in for parse_document and records every call."""

    def __init__(self, result="Hello world", error=None):
        self.result = result
        self.error = error
        self.calls = []

    async def __call__(self, file_bytes, mime_type):
        self.calls.append((file_bytes, mime_type))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def fake_parser(monkeypatch):
    parser = FakeParser()
    monkeypatch.setattr(document_parser, "parse_document", parser)
    return parser


@pytest.fixture
def client():
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def small_upload_cap():
    """Shrink the upload cap so size rejections don't need 10MB payloads."""
    app.dependency_overrides[get_settings] = lambda: Settings(max_upload_bytes=16)
    yield 16
    app.dependency_overrides.pop(get_settings, None)
