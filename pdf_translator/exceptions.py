"""
Exception types for the PDF Translator.
"""


class PDFTranslatorError(Exception):
    """Base class for all errors raised by the translator."""


class ExtractionError(PDFTranslatorError):
    """Raised when pdftotext cannot be run or its output cannot be read."""


class ConfigError(PDFTranslatorError):
    """Raised when the credentials file is missing or malformed."""


class TranslationError(PDFTranslatorError):
    """Raised when a request to the translation endpoint fails."""


class InstallError(PDFTranslatorError):
    """Raised when Poppler cannot be detected or installed."""
