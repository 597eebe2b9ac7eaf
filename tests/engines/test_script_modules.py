"""Unit tests for engines.script.modules: ErrorLog and the out writer."""

import io

import pytest

from jsunit.engines.script.modules import ErrorLog, make_out_writer


class TestErrorLog:
    def test_append_adds_one_line_each(self) -> None:
        log = ErrorLog()
        log.append("first")
        log.append(42)
        assert log.render() == "first\n42\n"
        assert len(log) == 2

    def test_no_formatting_added(self) -> None:
        log = ErrorLog()
        log.append("  spaced  ")
        assert log.render() == "  spaced  \n"

    def test_clear_resets(self) -> None:
        log = ErrorLog()
        log.append("a")
        log.clear()
        assert log.render() == ""
        log.append("b")
        assert str(log) == "b\n"


class TestOutWriter:
    def test_writes_to_stream(self) -> None:
        stream = io.StringIO()
        write = make_out_writer(stream)
        write("hi")
        write("\n")
        assert stream.getvalue() == "hi\n"

    def test_default_follows_sys_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        write = make_out_writer()
        write("to stdout")
        assert capsys.readouterr().out == "to stdout"
