"""
Shared fixtures for the PDF Translator tests.
"""

import pytest
import requests

from pdf_translator.credentials import CredentialStore
from pdf_translator.models import Credentials


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, data=None, status_code=200, invalid_json=False):
        self._data = data
        self.status_code = status_code
        self._invalid_json = invalid_json

    def json(self):
        if self._invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._data


class FakeSession:
    """Records POST requests and answers them with a handler function."""

    def __init__(self, handler):
        self.handler = handler
        self.calls = []

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append({'url': url, 'json': json, 'headers': headers, 'timeout': timeout})
        return self.handler(json)


def translation_body(text):
    return {"data": {"translations": [{"translatedText": text}]}}


def uppercase_handler(payload):
    return FakeResponse(translation_body(payload['q'].upper()))


@pytest.fixture
def uppercase_session():
    return FakeSession(uppercase_handler)


@pytest.fixture
def failing_after_first_session():
    def handler(payload):
        if session.calls and len(session.calls) > 1:
            raise requests.ConnectionError("connection reset")
        return uppercase_handler(payload)

    session = FakeSession(handler)
    return session


@pytest.fixture
def credentials():
    return Credentials(api_key="key-123", project_id="project-456", access_token="token-789")


@pytest.fixture
def store(tmp_path):
    return CredentialStore(tmp_path / "config" / "credentials.env")
