import re

import pytest

from s1pview.touchstone import (
    FileFormatError,
    FileOpenError,
    ParseError,
    Sample,
    TouchstoneParser,
    is_s1p_file,
)


def write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_parses_data_lines_skipping_comments(tmp_path):
    path = write(
        tmp_path,
        "sample.s1p",
        "! comment line\n"
        "# Hz S RI R 50\n"
        "\n"
        "1000000 0.5 -0.25\n"
        "2000000   0.125  0.75\n",
    )
    parser = TouchstoneParser(path)
    samples = parser.parse()
    assert samples == [
        Sample(1000000.0, 0.5, -0.25),
        Sample(2000000.0, 0.125, 0.75),
    ]
    assert parser.data == samples


def test_scientific_notation(tmp_path):
    path = write(tmp_path, "sci.s1p", "1e9 -0.5 2.5E-3\n")
    assert TouchstoneParser(path).parse() == [Sample(1e9, -0.5, 2.5e-3)]


def test_uppercase_extension_accepted(tmp_path):
    path = write(tmp_path, "DATA.S1P", "1 2 3\n")
    assert TouchstoneParser(path).parse() == [Sample(1.0, 2.0, 3.0)]


def test_empty_file_gives_no_samples(tmp_path):
    path = write(tmp_path, "empty.s1p", "")
    parser = TouchstoneParser(path)
    assert parser.parse() == []
    assert parser.data == []


def test_wrong_extension(tmp_path):
    path = write(tmp_path, "data.s2p", "1 2 3\n")
    with pytest.raises(FileFormatError, match="You can download only S1P files."):
        TouchstoneParser(path).parse()


def test_default_path_is_rejected():
    parser = TouchstoneParser()
    assert parser.file_path == ""
    with pytest.raises(FileFormatError):
        parser.parse()


def test_missing_file(tmp_path):
    path = str(tmp_path / "missing.s1p")
    with pytest.raises(FileOpenError) as info:
        TouchstoneParser(path).parse()
    assert str(info.value) == "Can't open the file: " + path
    assert isinstance(info.value, ParseError)


def test_wrong_column_count_reports_data_line(tmp_path):
    path = write(tmp_path, "bad.s1p", "! header\n1 2 3\n4 5\n")
    expected = "Incorrect file format: in the line 1: \n4 5"
    with pytest.raises(FileFormatError, match=re.escape(expected)):
        TouchstoneParser(path).parse()


def test_non_numeric_value(tmp_path):
    path = write(tmp_path, "bad.s1p", "1 abc 3\n")
    expected = "Incorrect file format: can't convert to a number in line 0: \n1 abc 3"
    with pytest.raises(FileFormatError, match=re.escape(expected)):
        TouchstoneParser(path).parse()


def test_whitespace_only_line_is_an_error(tmp_path):
    path = write(tmp_path, "bad.s1p", "1 2 3\n   \n")
    with pytest.raises(FileFormatError, match="in the line"):
        TouchstoneParser(path).parse()


def test_tab_separated_values_are_rejected(tmp_path):
    path = write(tmp_path, "bad.s1p", "1\t2 3 4\n")
    with pytest.raises(FileFormatError, match="can't convert"):
        TouchstoneParser(path).parse()


def test_extension_error_keeps_previous_data(tmp_path):
    good = write(tmp_path, "good.s1p", "1 2 3\n")
    parser = TouchstoneParser(good)
    first = parser.parse()
    parser.file_path = write(tmp_path, "other.txt", "4 5 6\n")
    with pytest.raises(FileFormatError):
        parser.parse()
    assert parser.data == first


@pytest.mark.parametrize(
    "path, expected",
    [
        ("a.s1p", True),
        ("dir/a.S1P", True),
        ("C:\\data\\a.S1p", True),
        ("a.s2p", False),
        ("a.s1p.txt", False),
        ("s1p", False),
        ("", False),
    ],
)
def test_is_s1p_file(path, expected):
    assert is_s1p_file(path) is expected