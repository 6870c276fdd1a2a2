import pytest

from lessons.files import read_lines, write_student_list, write_text


def test_write_then_read_round_trip(tmp_path):
    path = tmp_path / "sample.txt"
    write_text(path, "Harry bhai")
    assert read_lines(path) == ["Harry bhai"]


def test_write_replaces_previous_contents(tmp_path):
    path = tmp_path / "sample.txt"
    write_text(path, "first")
    write_text(path, "second")
    assert read_lines(path) == ["second"]


def test_trailing_newline_gives_final_empty_line(tmp_path):
    path = tmp_path / "sample.txt"
    write_text(path, "This is me\nThis is also me\n")
    assert read_lines(path) == ["This is me", "This is also me", ""]


def test_limit_takes_first_lines(tmp_path):
    path = tmp_path / "sample.txt"
    write_text(path, "one\ntwo\nthree")
    assert read_lines(path, 2) == ["one", "two"]


def test_negative_limit_rejected(tmp_path):
    path = tmp_path / "sample.txt"
    write_text(path, "one")
    with pytest.raises(ValueError):
        read_lines(path, -1)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "absent.txt")


def test_student_list_round_trip(tmp_path):
    path = tmp_path / "students.txt"
    text = write_student_list(path, ["Vishal", "Harry"])
    assert read_lines(path) == ["STUDENT LIST", "", "1. Vishal", "2. Harry", ""]
    assert path.read_text() == text


def test_empty_student_list_has_only_heading(tmp_path):
    path = tmp_path / "students.txt"
    write_student_list(path, [])
    assert read_lines(path) == ["STUDENT LIST", "", ""]