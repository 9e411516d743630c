"""
Tests for writing translated text.
"""

import pytest

from pdf_translator.file_output import FileOutputHandler
from pdf_translator.models import Line


def test_writes_index_prefixed_lines(tmp_path):
    output = tmp_path / "out.txt"

    FileOutputHandler.save_translation([Line(0, "HELLO"), Line(1, "WORLD")], output)

    assert output.read_text(encoding='utf-8') == "0: HELLO\n1: WORLD\n"


def test_overwrites_existing_file(tmp_path):
    output = tmp_path / "out.txt"
    output.write_text("stale content\nmore\nand more\n", encoding='utf-8')

    FileOutputHandler.save_translation([Line(0, "fresh")], output)

    assert output.read_text(encoding='utf-8') == "0: fresh\n"


def test_n_lines_in_order(tmp_path):
    output = tmp_path / "out.txt"
    results = [Line(i, f"text {i}") for i in range(25)]

    FileOutputHandler.save_translation(results, output)

    lines = output.read_text(encoding='utf-8').splitlines()
    assert len(lines) == 25
    assert lines == [f"{i}: text {i}" for i in range(25)]


def test_default_path_is_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    path = FileOutputHandler.save_translation([Line(0, "Hej")])

    assert (tmp_path / "translated_text.txt").read_text(encoding='utf-8') == "0: Hej\n"
    assert path.name == "translated_text.txt"


def test_unwritable_destination_raises(tmp_path):
    with pytest.raises(OSError):
        FileOutputHandler.save_translation([Line(0, "x")], tmp_path / "missing" / "out.txt")
