import pytest

from wordhuff.files import (
    ErrorKind,
    PipelineError,
    base_name_without_txt,
    check_directory,
    check_readable_file,
    check_regular_file,
    check_writable,
    write_lines,
)


def test_check_directory_missing_raises(tmp_path):
    missing = tmp_path / "nope"
    with pytest.raises(PipelineError) as info:
        check_directory(missing)
    assert info.value.kind is ErrorKind.DIR_NOT_FOUND
    assert info.value.entity == str(missing)


def test_check_regular_file_rejects_directory(tmp_path):
    with pytest.raises(PipelineError) as info:
        check_regular_file(tmp_path)
    assert info.value.kind is ErrorKind.FILE_NOT_FOUND


def test_check_readable_file_missing(tmp_path):
    with pytest.raises(PipelineError) as info:
        check_readable_file(tmp_path / "missing.txt")
    assert info.value.kind is ErrorKind.FILE_NOT_FOUND


def test_check_readable_file_accepts_existing_file(tmp_path):
    target = tmp_path / "a.txt"
    target.write_text("hello")
    check_readable_file(target)
    assert target.read_text() == "hello"


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("ch01.txt", "ch01"),
        ("input_output/ch01.txt", "ch01"),
        ("notes.md", "notes.md"),
        (".txt", ".txt"),
    ],
)
def test_base_name_without_txt(filename, expected):
    assert base_name_without_txt(filename) == expected


def test_check_writable_truncates(tmp_path):
    target = tmp_path / "out.tokens"
    target.write_text("old content")
    check_writable(target)
    assert target.read_text() == ""


def test_check_writable_in_missing_directory(tmp_path):
    with pytest.raises(PipelineError) as info:
        check_writable(tmp_path / "missing" / "out.freq")
    assert info.value.kind is ErrorKind.UNABLE_TO_OPEN_FILE_FOR_WRITING


def test_write_lines_round_trip(tmp_path):
    target = tmp_path / "lines.txt"
    lines = ["alpha", "beta", "gamma"]
    write_lines(target, lines)
    assert target.read_text().splitlines() == lines
    assert target.read_text().endswith("\n")


def test_write_lines_missing_directory(tmp_path):
    with pytest.raises(PipelineError) as info:
        write_lines(tmp_path / "missing" / "x.txt", ["a"])
    assert info.value.kind is ErrorKind.UNABLE_TO_OPEN_FILE_FOR_WRITING


def test_error_message_and_exit_code():
    err = PipelineError(ErrorKind.FILE_NOT_FOUND, "x")
    assert str(err) == "Error: File x doesn't exist. Terminating..."
    assert err.exit_code == ErrorKind.FILE_NOT_FOUND.value


def test_unknown_kind_reports_generic_message():
    err = PipelineError(ErrorKind.FAILED_TO_WRITE_FILE, "x")
    assert str(err) == "Error: Unknown error type. Terminating..."
    assert err.exit_code == ErrorKind.ERR_TYPE_NOT_FOUND.value