import io
import logging

import pytest

from winstat.adapters.readers import FileReader, StreamReader, SampleParseError, parse_line
from winstat.core.domain.window import StatWindow


def test_parse_line():
    assert parse_line("1.5\n", "s", 1) == 1.5
    assert parse_line("  -2e3  # comment", "s", 1) == -2000.0
    assert parse_line("   \n", "s", 1) is None
    assert parse_line("# only a comment", "s", 1) is None


def test_parse_line_error_names_location():
    with pytest.raises(SampleParseError, match="samples.txt:7"):
        parse_line("abc", "samples.txt", 7)


def test_stream_reader():
    reader = StreamReader(io.StringIO("1\n\n2.5\n# skip\nnan\n"))
    values = list(reader.read())

    assert values[:2] == [1.0, 2.5]
    assert values[2] != values[2]  # nan


def test_stream_reader_strict():
    reader = StreamReader(io.StringIO("1\nx\n3\n"), name="<test>")
    with pytest.raises(SampleParseError, match="<test>:2"):
        list(reader.read())


def test_stream_reader_lenient(caplog):
    reader = StreamReader(io.StringIO("1\nx\n3\n"), strict=False)

    with caplog.at_level(logging.WARNING):
        assert list(reader.read()) == [1.0, 3.0]
    assert "Skipping line" in caplog.text


def test_file_reader_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileReader(str(tmp_path / "missing.txt"))


def test_file_reader_feeds_window(tmp_path):
    path = tmp_path / "samples.txt"
    path.write_text("1.0\n2.0\n4.0\n4.0\n7.2\n")

    reader = FileReader(str(path))
    window = StatWindow(4)
    try:
        for value in reader.read():
            stat = window.push(value)
    finally:
        reader.close()

    assert stat.mean == pytest.approx(4.3)
    assert reader.stream.closed
