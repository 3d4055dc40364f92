import re
from pathlib import Path

import pytest

from wordhuff.files import ErrorKind, PipelineError
from wordhuff.scanner import Scanner, iter_tokens


def test_basic_words_lowercased():
    assert list(iter_tokens(b"Hello, World!")) == ["hello", "world"]


def test_apostrophes():
    data = b"Don't stop 'til rock'n'roll''s"
    assert list(iter_tokens(data)) == ["don't", "stop", "til", "rock'n'roll", "s"]


def test_trailing_apostrophe_dropped():
    assert list(iter_tokens(b"dogs' bones")) == ["dogs", "bones"]


def test_non_ascii_separates():
    assert list(iter_tokens(b"caf\xc3\xa9s")) == ["caf", "s"]


def test_digits_and_hyphens_separate():
    assert list(iter_tokens(b"abc123def well-known")) == ["abc", "def", "well", "known"]


def test_empty_input():
    assert list(iter_tokens(b"  123 ... \xff")) == []


def test_tokens_match_rules():
    data = b"It's 3 o'clock -- TIME'S up! \xe2\x80\x94 'quoted' x''y"
    tokens = list(iter_tokens(data))
    pattern = re.compile(r"[a-z]+(?:'[a-z]+)*")
    assert tokens
    assert all(pattern.fullmatch(t) for t in tokens)


def test_input_path_maps_tokens_to_txt(tmp_path):
    scanner = Scanner(tmp_path / "ch01.tokens")
    assert scanner.input_path == tmp_path / "ch01.txt"


def test_input_path_without_directory_unchanged():
    assert Scanner("ch01.tokens").input_path == Path("ch01.tokens")


def test_tokenize_reads_txt(tmp_path):
    (tmp_path / "ch01.txt").write_bytes(b"One two, TWO.")
    assert Scanner(tmp_path / "ch01.tokens").tokenize() == ["one", "two", "two"]


def test_tokenize_missing_directory(tmp_path):
    with pytest.raises(PipelineError) as info:
        Scanner(tmp_path / "missing" / "ch01.tokens").tokenize()
    assert info.value.kind is ErrorKind.DIR_NOT_FOUND


def test_tokenize_missing_file(tmp_path):
    with pytest.raises(PipelineError) as info:
        Scanner(tmp_path / "ch01.tokens").tokenize()
    assert info.value.kind is ErrorKind.FILE_NOT_FOUND


def test_tokenize_to_file_writes_one_per_line(tmp_path):
    (tmp_path / "ch01.txt").write_bytes(b"Alpha beta\ngamma")
    out = tmp_path / "ch01.tokens"
    words = Scanner(out).tokenize_to_file(out)
    assert out.read_text().splitlines() == words
    assert words == ["alpha", "beta", "gamma"]


def test_tokenize_to_file_empty_writes_newline(tmp_path):
    (tmp_path / "e.txt").write_bytes(b"123 !!!")
    out = tmp_path / "e.tokens"
    assert Scanner(out).tokenize_to_file(out) == []
    assert out.read_text() == "\n"