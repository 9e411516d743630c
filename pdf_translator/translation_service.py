"""
Translation service for the PDF Translator.
"""

import logging
from typing import Any, Dict, Optional

import requests
from tqdm import tqdm

from .config import TRANSLATION_FORMAT, MAX_REQUEST_BYTES, get_endpoint
from .exceptions import TranslationError
from .models import Credentials, Document, Line, TranslationResult
from .utils import split_words_by_bytes


def parse_response(data: Any) -> str:
    """Extract the translated text from a Translation API response.

    Returns an empty string when the response does not have the expected shape.
    """
    if not isinstance(data, dict):
        logging.warning(f'Unexpected response type: {type(data).__name__}')
        return ""

    error = data.get('error')
    if isinstance(error, dict) and error.get('code') is not None:
        logging.warning(f"Translation API returned error {error.get('code')}: {error.get('message', '')}")

    try:
        translated_text = data['data']['translations'][0]['translatedText']
    except (KeyError, IndexError, TypeError):
        logging.warning('Response has no translatedText field, using empty translation')
        return ""

    return translated_text if isinstance(translated_text, str) else ""


class TranslationService:
    """Handles translation operations using the Google Cloud Translation API."""

    def __init__(self, credentials: Credentials, session: Optional[requests.Session] = None,
                 endpoint: Optional[str] = None, timeout: Optional[float] = None,
                 max_request_bytes: int = MAX_REQUEST_BYTES):
        self.credentials = credentials
        self.session = session or requests.Session()
        self.endpoint = endpoint or get_endpoint()
        self.timeout = timeout
        self.max_request_bytes = max_request_bytes

    def build_payload(self, text: str, source_language: str, target_language: str) -> Dict[str, str]:
        """Build the JSON body for a single translation request."""
        return {
            "q": text,
            "source": source_language,
            "target": target_language,
            "format": TRANSLATION_FORMAT,
            "key": self.credentials.api_key,
        }

    def build_headers(self) -> Dict[str, str]:
        """Build the authentication headers for a translation request."""
        return {
            "Authorization": f"Bearer {self.credentials.access_token}",
            "x-goog-user-project": self.credentials.project_id,
            "Content-Type": "application/json; charset=utf-8",
        }

    def _request(self, text: str, source_language: str, target_language: str) -> str:
        payload = self.build_payload(text, source_language, target_language)

        try:
            response = self.session.post(
                self.endpoint,
                json=payload,
                headers=self.build_headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logging.error(f'Request to {self.endpoint} failed: {e}')
            raise TranslationError(f'Request to translation endpoint failed: {e}') from e

        try:
            data = response.json()
        except ValueError as e:
            logging.error(f'Could not decode response (HTTP {response.status_code}): {e}')
            raise TranslationError(f'Invalid JSON in translation response: {e}') from e

        return parse_response(data)

    def translate_line(self, text: str, source_language: str, target_language: str) -> str:
        """Translate one line of text.

        Lines larger than max_request_bytes are sent as several word chunks and
        the translated chunks are joined with spaces.
        """
        if len(text.encode('utf-8')) <= self.max_request_bytes:
            return self._request(text, source_language, target_language)

        chunks = split_words_by_bytes(text, self.max_request_bytes)
        logging.info(f'Line of {len(text)} chars split into {len(chunks)} chunks')
        return " ".join(
            self._request(chunk, source_language, target_language) for chunk in chunks
        )

    def translate_document(self, document: Document, source_language: str,
                           target_language: str) -> TranslationResult:
        """Translate every line of a document, in order, one request per line.

        The first failing request aborts the whole document.
        """
        logging.info(f'Translating {len(document)} lines from {source_language} to {target_language}')
        translated: TranslationResult = []

        for line in tqdm(document, desc="Translating... ", ascii=True):
            translated_text = self.translate_line(line.text, source_language, target_language)
            translated.append(Line(line.index, translated_text))

        logging.info('Translation completed successfully.')
        return translated
