"""
File output utilities for the PDF Translator.
"""

import logging
from pathlib import Path
from typing import Union

from .config import DEFAULT_OUTPUT_FILE
from .models import TranslationResult


def format_line(index: int, text: str) -> str:
    """Format one translated record as it appears in the output file."""
    return f"{index}: {text}"


class FileOutputHandler:
    """Handles saving translations to text files."""

    @staticmethod
    def save_translation(results: TranslationResult,
                         output_path: Union[str, Path] = DEFAULT_OUTPUT_FILE) -> Path:
        """
        Write translated lines to a text file, one "index: text" line each.

        The file is created or overwritten. I/O errors are not caught.

        Args:
            results: Translated lines, in document order
            output_path: Destination file

        Returns:
            Path of the written file
        """
        output_path = Path(output_path)
        with open(output_path, 'w', encoding='utf-8', newline='\n') as f:
            for index, text in results:
                f.write(format_line(index, text) + '\n')
        logging.info(f'Translation saved to text file: {output_path}')
        return output_path
