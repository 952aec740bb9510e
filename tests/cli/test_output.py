"""Tests for output sink selection."""

import io
import sys

import pytest

from tablecopy.cli.output import open_sink
from tablecopy.core.exceptions import OutputError
from tablecopy.core.exit_codes import ExitCode


@pytest.mark.unit
def test_default_sink_is_stdout():
    with open_sink(None) as sink:
        assert sink is sys.stdout


@pytest.mark.unit
def test_file_sink_written_and_closed(tmp_path):
    path = tmp_path / "out.csv"
    with open_sink(path) as sink:
        sink.write("a,b\r\n")
    assert sink.closed
    assert path.read_bytes() == b"a,b\r\n"


@pytest.mark.unit
def test_file_sink_force8bit_encoding(tmp_path):
    path = tmp_path / "out.txt"
    with open_sink(path, force8bit=True) as sink:
        sink.write("café\n")
    assert path.read_bytes() == b"caf\xe9\n"


@pytest.mark.unit
def test_unwritable_path(tmp_path):
    with pytest.raises(OutputError, match="Cannot open output file") as exc_info:
        with open_sink(tmp_path):
            pass
    assert exc_info.value.exit_code == ExitCode.OUTPUT_ERROR


@pytest.mark.unit
def test_force8bit_stdout_is_byte_transparent(monkeypatch):
    raw = io.BytesIO()
    monkeypatch.setattr(sys, "stdout", io.TextIOWrapper(raw, encoding="utf-8"))
    with open_sink(None, force8bit=True) as sink:
        assert sink is not sys.stdout
        sink.write("caf\xe9\r\n")
    assert raw.getvalue() == b"caf\xe9\r\n"
    # stdout is still usable afterwards
    sys.stdout.write("ok")
    sys.stdout.flush()
    assert raw.getvalue().endswith(b"ok")
