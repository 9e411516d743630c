"""
PDF processing utilities for the PDF Translator.

This module converts PDF files to plain text with Poppler's pdftotext and
splits the result into numbered lines.
"""

import logging
import subprocess
from pathlib import Path
from typing import List, Union

from .config import PDFTOTEXT_BINARY, PDFTOTEXT_LAYOUT_FLAG
from .exceptions import ExtractionError
from .models import Document, Line
from .utils import group_sentences


def split_records(content: str) -> List[str]:
    """Split text on newlines only, dropping the empty record after a final newline."""
    if not content:
        return []
    records = content.split('\n')
    if records[-1] == '':
        records.pop()
    return [record[:-1] if record.endswith('\r') else record for record in records]


class PDFProcessor:
    """
    Handles PDF processing operations.

    The conversion itself is delegated to the external pdftotext binary, run in
    layout-preserving mode. Its output file is kept next to the input PDF.
    """

    def __init__(self, binary: str = PDFTOTEXT_BINARY):
        self.binary = binary

    @staticmethod
    def is_pdf_file(file_path: Union[str, Path]) -> bool:
        """Check if a file is a PDF based on its extension."""
        return str(file_path).lower().endswith('.pdf')

    @staticmethod
    def text_path_for(file_path: Union[str, Path]) -> Path:
        """Return the sibling .txt path pdftotext writes for a PDF."""
        return Path(file_path).with_suffix('.txt')

    def convert_pdf(self, file_path: Union[str, Path]) -> Path:
        """
        Run pdftotext against a PDF file.

        Args:
            file_path: Path to the PDF file

        Returns:
            Path of the text file written next to the PDF

        Raises:
            ExtractionError: If pdftotext cannot be run, fails, or emits non-UTF-8 output
        """
        text_path = self.text_path_for(file_path)
        command = [self.binary, PDFTOTEXT_LAYOUT_FLAG, str(file_path), str(text_path)]
        logging.info(f"Running {' '.join(command)}")

        try:
            result = subprocess.run(command, capture_output=True)
        except OSError as e:
            raise ExtractionError(f"Could not run {self.binary}: {e}") from e

        try:
            stdout = result.stdout.decode('utf-8')
            stderr = result.stderr.decode('utf-8')
        except UnicodeDecodeError as e:
            raise ExtractionError(f"{self.binary} output is not valid UTF-8: {e}") from e

        if stdout.strip():
            logging.debug(f"{self.binary} output: {stdout.strip()}")

        if result.returncode != 0:
            raise ExtractionError(
                f"{self.binary} exited with status {result.returncode}: {stderr.strip()}"
            )

        return text_path

    def read_document(self, text_path: Union[str, Path]) -> Document:
        """
        Read a text file into a document of numbered lines.

        Args:
            text_path: Path to the UTF-8 text file

        Returns:
            List of Line records numbered from zero
        """
        try:
            content = Path(text_path).read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise ExtractionError(f"Could not read extracted text '{text_path}': {e}") from e

        document = [Line(index, text) for index, text in enumerate(split_records(content))]
        logging.info(f"Read {len(document)} lines from {text_path}")
        return document

    def extract(self, file_path: Union[str, Path]) -> Document:
        """Convert a PDF file and read the resulting text as a document."""
        text_path = self.convert_pdf(file_path)
        return self.read_document(text_path)

    @staticmethod
    def to_paragraphs(document: Document, sentences_per_paragraph: int) -> Document:
        """
        Regroup a document into paragraphs of a fixed number of sentences.

        Blank lines are skipped and the remaining lines are joined before the
        text is split into sentences. The paragraphs are numbered from zero.
        """
        text = ' '.join(line.text.strip() for line in document if line.text.strip())
        paragraphs = group_sentences(text, sentences_per_paragraph)
        logging.info(f"Regrouped {len(document)} lines into {len(paragraphs)} paragraphs")
        return [Line(index, paragraph) for index, paragraph in enumerate(paragraphs)]
