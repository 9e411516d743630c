"""
Utility functions for the PDF Translator CLI.
"""

import argparse
import re
from typing import Dict, List

from .config import SUPPORTED_LANGUAGES, SENTENCE_BOUNDARY


def get_language_codes() -> Dict[str, str]:
    """Map every supported code (lower-cased) to its canonical spelling.

    Table entries such as "he or iw" contribute one code per alternative.
    """
    codes: Dict[str, str] = {}
    for _, code_field in SUPPORTED_LANGUAGES:
        for code in code_field.split(' or '):
            codes[code.strip().lower()] = code.strip()
    return codes


def validate_language_code(value: str) -> str:
    """Validate a language code argument and return its canonical spelling."""
    codes = get_language_codes()
    canonical = codes.get(value.strip().lower())
    if canonical is None:
        raise argparse.ArgumentTypeError(
            f"Unsupported language code '{value}'. Run with --list to see the supported codes."
        )
    return canonical


def list_languages(name_width: int = 30, code_width: int = 12) -> None:
    """Print the table of supported languages and their codes."""
    print(f"{'Language':<{name_width}} | {'ISO-639 Code':<{code_width}}")
    print(f"{'':-<{name_width}}---{'':-<{code_width}}")
    for language, code in SUPPORTED_LANGUAGES:
        print(f"{language:<{name_width}} -> {code:<{code_width}}")


def mask_secret(value: str, visible: int = 4) -> str:
    """Mask all but the last few characters of a secret."""
    if not value:
        return ""
    if len(value) <= visible:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]


def split_words_by_bytes(text: str, max_bytes: int) -> List[str]:
    """
    Split text into chunks of whole words whose UTF-8 size stays within max_bytes.

    Words are re-joined with single spaces. A single word larger than the
    limit is cut at character boundaries.

    Args:
        text: Text to split
        max_bytes: Maximum encoded size of each chunk

    Returns:
        List of chunks, in order
    """
    if max_bytes < 1:
        raise ValueError("max_bytes must be positive")

    chunks: List[str] = []
    current: List[str] = []
    current_size = 0

    for word in text.split():
        word_size = len(word.encode('utf-8'))

        if word_size > max_bytes:
            if current:
                chunks.append(' '.join(current))
                current, current_size = [], 0
            chunks.extend(_split_word(word, max_bytes))
            continue

        # +1 for the joining space
        extra = word_size + (1 if current else 0)
        if current and current_size + extra > max_bytes:
            chunks.append(' '.join(current))
            current, current_size = [word], word_size
        else:
            current.append(word)
            current_size += extra

    if current:
        chunks.append(' '.join(current))

    return chunks


def _split_word(word: str, max_bytes: int) -> List[str]:
    pieces: List[str] = []
    piece = ""
    for char in word:
        if piece and len((piece + char).encode('utf-8')) > max_bytes:
            pieces.append(piece)
            piece = char
        else:
            piece += char
    if piece:
        pieces.append(piece)
    return pieces


def group_sentences(text: str, sentences_per_paragraph: int) -> List[str]:
    """
    Split text into sentences and group every N sentences into a paragraph.

    Args:
        text: Text to regroup
        sentences_per_paragraph: Number of sentences per paragraph

    Returns:
        List of paragraphs
    """
    if sentences_per_paragraph < 1:
        raise ValueError("sentences_per_paragraph must be at least 1")

    sentences = [s.strip() for s in re.split(SENTENCE_BOUNDARY, text) if s.strip()]
    return [
        ' '.join(sentences[i:i + sentences_per_paragraph])
        for i in range(0, len(sentences), sentences_per_paragraph)
    ]
