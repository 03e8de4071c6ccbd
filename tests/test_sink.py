"""Tests for xconsole.sink — the default four-channel writer."""

import io

from xconsole.sink import CHANNELS, ConsoleSink


def test_log_and_info_go_to_stdout(capsys):
    """log/info write to stdout."""
    sink = ConsoleSink()
    sink.log("a", "b")
    sink.info("c")
    captured = capsys.readouterr()
    assert captured.out == "a b\nc\n"
    assert captured.err == ""


def test_warn_and_error_go_to_stderr(capsys):
    """warn/error write to stderr."""
    sink = ConsoleSink()
    sink.warn("w")
    sink.error("e")
    captured = capsys.readouterr()
    assert captured.err == "w\ne\n"
    assert captured.out == ""


def test_parts_are_stringified():
    """Non-string parts are converted with str()."""
    buf = io.StringIO()
    ConsoleSink(out=buf).log(1, None, {'k': 2})
    assert buf.getvalue() == "1 None {'k': 2}\n"


def test_custom_streams_and_separator():
    """Explicit streams and separator are honoured."""
    out, err = io.StringIO(), io.StringIO()
    sink = ConsoleSink(out=out, err=err, sep="|")
    sink.info("a", "b")
    sink.error("x", "y")
    assert out.getvalue() == "a|b\n"
    assert err.getvalue() == "x|y\n"


def test_no_parts_writes_empty_line():
    buf = io.StringIO()
    ConsoleSink(out=buf).log()
    assert buf.getvalue() == "\n"


def test_channels_return_none():
    buf = io.StringIO()
    sink = ConsoleSink(out=buf, err=buf)
    assert all(getattr(sink, ch)("x") is None for ch in CHANNELS)
