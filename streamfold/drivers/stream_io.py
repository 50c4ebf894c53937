import codecs
import io
from typing import Union

from streamfold.errors import FoldReadError, FoldWriteError

Char = Union[str, bytes]

# Encoding used when a byte source feeds a text-only sink, or the reverse
BRIDGE_ENCODING = "utf-8"


def _binary_layer(stream):
    """Prefer the raw byte layer of a text stream so folding counts bytes."""
    buffer = getattr(stream, "buffer", None)
    if buffer is not None:
        return buffer
    return stream


def _newline_for(stream) -> Char:
    if isinstance(stream, io.TextIOBase):
        return "\n"
    return b"\n"


class StreamSource:
    """
    Reads an input file object one character at a time.

    Binary streams (and text streams that expose a ``buffer``) yield
    one-byte ``bytes`` values; plain text streams yield one-character strings.
    """

    def __init__(self, stream):
        self.stream = _binary_layer(stream)
        self.newline = _newline_for(self.stream)

    def read_char(self) -> Char:
        """Returns the next character, or an empty value at end of stream."""
        try:
            ch = self.stream.read(1)
        except OSError as e:
            raise FoldReadError(f"read failed: {e}") from e
        if ch is None:
            # Non-blocking stream with nothing available is not an end of stream
            raise FoldReadError("read failed: stream would block")
        return ch


class StreamSink:
    """
    Writes characters to an output file object, one at a time.

    A character of the wrong type for the stream is converted through
    UTF-8: bytes headed for a text-only stream are decoded incrementally (a
    multi-byte sequence is written once complete), strings headed for a
    byte stream are encoded.
    """

    def __init__(self, stream):
        self.stream = _binary_layer(stream)
        self.newline = _newline_for(self.stream)
        self._decoder = None

    def _convert(self, ch: Char) -> Char:
        if isinstance(self.newline, bytes):
            if isinstance(ch, str):
                return ch.encode(BRIDGE_ENCODING, "surrogateescape")
            return ch
        if isinstance(ch, bytes):
            if self._decoder is None:
                self._decoder = codecs.getincrementaldecoder(BRIDGE_ENCODING)("replace")
            return self._decoder.decode(ch)
        return ch

    def _write(self, data: Char):
        try:
            written = self.stream.write(data)
        except OSError as e:
            raise FoldWriteError(f"write failed: {e}") from e
        if written == 0:
            raise FoldWriteError("write failed: stream accepted no data")

    def write_char(self, ch: Char):
        data = self._convert(ch)
        if data:
            self._write(data)

    def flush(self):
        if self._decoder is not None:
            # Incomplete trailing sequence becomes a replacement character
            tail = self._decoder.decode(b"", final=True)
            if tail:
                self._write(tail)
        try:
            self.stream.flush()
        except OSError as e:
            raise FoldWriteError(f"flush failed: {e}") from e
