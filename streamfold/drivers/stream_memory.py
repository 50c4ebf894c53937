from typing import Union

Char = Union[str, bytes]


class MemorySource:
    """Reads characters from an in-memory string or bytes value."""

    def __init__(self, data: Char):
        self.data = data
        self.newline = b"\n" if isinstance(data, bytes) else "\n"
        self.position = 0

    def read_char(self) -> Char:
        ch = self.data[self.position : self.position + 1]
        self.position += len(ch)
        return ch


class MemorySink:
    """Collects written characters in memory."""

    def __init__(self, newline: Char = "\n"):
        self.newline = newline
        self.chunks = []
        self.flushed = False

    def write_char(self, ch: Char):
        self.chunks.append(ch)

    def flush(self):
        self.flushed = True

    def getvalue(self) -> Char:
        """Returns everything written so far as one value."""
        return self.newline[:0].join(self.chunks)
