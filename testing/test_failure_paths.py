"""Regression tests for stream read/write failure paths."""

import io

import pytest

from streamfold.drivers.stream_io import StreamSink, StreamSource
from streamfold.drivers.stream_mock import MockSink, MockSource
from streamfold.engine import fold
from streamfold.errors import FoldIOError, FoldReadError, FoldWriteError
from streamfold.main import main


class FailingReader:
    def read(self, size=-1):  # noqa: ARG002
        raise OSError(5, "Input/output error")


class FailingWriter:
    def write(self, data):  # noqa: ARG002
        raise BrokenPipeError(32, "Broken pipe")

    def flush(self):
        pass


class FailingFlush:
    def write(self, data):
        return len(data)

    def flush(self):
        raise OSError(28, "No space left on device")


def test_write_failure_aborts_pass_immediately():
    source = MockSource("abcdef")
    sink = MockSink(fail_after=3)

    with pytest.raises(FoldWriteError):
        fold(sink, source, 10)

    assert sink.chunks == ["a", "b", "c"]
    assert source.position == 4
    assert sink.flushed is False


def test_read_failure_is_not_a_clean_end_of_stream():
    source = MockSource("abcdef", fail_at=2)
    sink = MockSink()

    with pytest.raises(FoldReadError):
        fold(sink, source, 10)

    assert sink.getvalue() == "ab"
    assert sink.flushed is False


def test_read_and_write_failures_share_one_error_kind():
    assert issubclass(FoldReadError, FoldIOError)
    assert issubclass(FoldWriteError, FoldIOError)
    assert issubclass(FoldIOError, OSError)


def test_stream_source_wraps_os_error():
    with pytest.raises(FoldReadError) as excinfo:
        StreamSource(FailingReader()).read_char()
    assert isinstance(excinfo.value.__cause__, OSError)


def test_stream_source_treats_would_block_as_failure():
    class WouldBlock(io.RawIOBase):
        def readable(self):
            return True

        def readinto(self, b):  # noqa: ARG002
            return None

    with pytest.raises(FoldReadError):
        StreamSource(WouldBlock()).read_char()


def test_stream_sink_wraps_write_and_flush_errors():
    with pytest.raises(FoldWriteError):
        StreamSink(FailingWriter()).write_char(b"a")

    sink = StreamSink(FailingFlush())
    sink.write_char(b"a")
    with pytest.raises(FoldWriteError) as excinfo:
        sink.flush()
    assert isinstance(excinfo.value.__cause__, OSError)


def test_main_returns_failure_without_usage_on_write_error(caplog):
    stderr = io.StringIO()

    code = main([], stdin=io.BytesIO(b"hello\n"), stdout=FailingWriter(), stderr=stderr)

    assert code == 1
    assert stderr.getvalue() == ""
    assert any("write failed" in r.getMessage() for r in caplog.records)


def test_main_returns_failure_without_usage_on_read_error(caplog):
    stdout = io.BytesIO()
    stderr = io.StringIO()

    code = main(["-w", "10"], stdin=FailingReader(), stdout=stdout, stderr=stderr)

    assert code == 1
    assert stdout.getvalue() == b""
    assert stderr.getvalue() == ""
    assert any("read failed" in r.getMessage() for r in caplog.records)
