"""
Tests for the translation service.
"""

import pytest
import requests

from pdf_translator.config import GOOGLE_TRANSLATE_API_ENDPOINT
from pdf_translator.exceptions import TranslationError
from pdf_translator.models import Line
from pdf_translator.translation_service import TranslationService, parse_response
from tests.conftest import FakeResponse, FakeSession, translation_body


def test_request_shape(credentials, uppercase_session, monkeypatch):
    monkeypatch.delenv("PDF_TRANSLATOR_ENDPOINT", raising=False)
    service = TranslationService(credentials, session=uppercase_session)

    assert service.translate_line("Hello", "en", "sv") == "HELLO"

    call = uppercase_session.calls[0]
    assert call['url'] == GOOGLE_TRANSLATE_API_ENDPOINT
    assert call['json'] == {
        "q": "Hello",
        "source": "en",
        "target": "sv",
        "format": "text",
        "key": "key-123",
    }
    assert call['headers']['Authorization'] == "Bearer token-789"
    assert call['headers']['x-goog-user-project'] == "project-456"
    assert call['headers']['Content-Type'] == "application/json; charset=utf-8"
    assert call['timeout'] is None


def test_endpoint_override(credentials, uppercase_session, monkeypatch):
    monkeypatch.setenv("PDF_TRANSLATOR_ENDPOINT", "http://localhost:8080/translate")
    service = TranslationService(credentials, session=uppercase_session)

    service.translate_line("Hello", "en", "sv")

    assert uppercase_session.calls[0]['url'] == "http://localhost:8080/translate"


def test_translate_document_preserves_order(credentials, uppercase_session):
    document = [Line(i, f"line {i}") for i in range(5)]
    service = TranslationService(credentials, session=uppercase_session)

    result = service.translate_document(document, "en", "sv")

    assert result == [(i, f"LINE {i}") for i in range(5)]
    assert [call['json']['q'] for call in uppercase_session.calls] == [f"line {i}" for i in range(5)]
    # the input document is left untouched
    assert document[0] == Line(0, "line 0")


def test_missing_field_yields_empty_translation(credentials):
    session = FakeSession(lambda payload: FakeResponse({"data": {"translations": []}}))
    service = TranslationService(credentials, session=session)

    result = service.translate_document([Line(0, "Hello"), Line(1, "World")], "en", "sv")

    assert result == [(0, ""), (1, "")]


def test_error_body_yields_empty_translation(credentials):
    body = {"error": {"code": 403, "message": "The caller does not have permission"}}
    session = FakeSession(lambda payload: FakeResponse(body, status_code=403))
    service = TranslationService(credentials, session=session)

    assert service.translate_line("Hello", "en", "sv") == ""


def test_network_failure_aborts_document(credentials, failing_after_first_session):
    service = TranslationService(credentials, session=failing_after_first_session)
    document = [Line(0, "a"), Line(1, "b"), Line(2, "c")]

    with pytest.raises(TranslationError, match="connection reset"):
        service.translate_document(document, "en", "sv")

    # no request is made after the failing one
    assert len(failing_after_first_session.calls) == 2


def test_invalid_json_raises(credentials):
    session = FakeSession(lambda payload: FakeResponse(invalid_json=True, status_code=502))
    service = TranslationService(credentials, session=session)

    with pytest.raises(TranslationError, match="Invalid JSON"):
        service.translate_line("Hello", "en", "sv")


def test_oversized_line_is_chunked(credentials, uppercase_session):
    service = TranslationService(credentials, session=uppercase_session, max_request_bytes=12)

    translated = service.translate_line("alpha beta gamma delta", "en", "sv")

    sent = [call['json']['q'] for call in uppercase_session.calls]
    assert sent == ["alpha beta", "gamma delta"]
    assert all(len(text.encode('utf-8')) <= 12 for text in sent)
    assert translated == "ALPHA BETA GAMMA DELTA"


@pytest.mark.parametrize("data", [
    None,
    [],
    {},
    {"data": {}},
    {"data": {"translations": [{}]}},
    {"data": {"translations": [{"translatedText": None}]}},
])
def test_parse_response_defaults_to_empty(data):
    assert parse_response(data) == ""


def test_parse_response_uses_first_translation():
    data = translation_body("Hej")
    data["data"]["translations"].append({"translatedText": "ignored"})

    assert parse_response(data) == "Hej"


def test_default_session_is_requests_session(credentials):
    service = TranslationService(credentials)

    assert isinstance(service.session, requests.Session)
