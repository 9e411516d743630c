"""
PDF Translator Package

This package extracts the text of a PDF file with Poppler's pdftotext and
translates it line by line with the Google Cloud Translation API.

Features:
- Layout-preserving text extraction
- One translation request per line, in document order
- Per-user credential storage with merge-on-save
- Poppler installation through the native package manager
"""

from .cli import main, PDFTranslator
from .credentials import CredentialStore
from .exceptions import (
    PDFTranslatorError,
    ExtractionError,
    ConfigError,
    TranslationError,
    InstallError
)
from .file_output import FileOutputHandler
from .installer import Installer, get_installer
from .models import Line, Credentials
from .pdf_processor import PDFProcessor
from .translation_service import TranslationService

__version__ = "0.1.0"

__all__ = [
    # Main entry points
    "main",
    "PDFTranslator",

    # Core services
    "TranslationService",
    "CredentialStore",

    # File processing
    "PDFProcessor",
    "FileOutputHandler",

    # Installation
    "Installer",
    "get_installer",

    # Data types
    "Line",
    "Credentials",

    # Errors
    "PDFTranslatorError",
    "ExtractionError",
    "ConfigError",
    "TranslationError",
    "InstallError"
]
