from typing import Optional

from streamfold.drivers.stream_memory import Char, MemorySink, MemorySource
from streamfold.errors import FoldReadError, FoldWriteError


class MockSource(MemorySource):
    """In-memory source that fails once `fail_at` characters have been read."""

    def __init__(self, data: Char, fail_at: Optional[int] = None):
        super().__init__(data)
        self.fail_at = fail_at  # None = never fail

    def read_char(self) -> Char:
        if self.fail_at is not None and self.position >= self.fail_at:
            raise FoldReadError("simulated read failure")
        return super().read_char()


class MockSink(MemorySink):
    """In-memory sink that fails once `fail_after` characters have been written."""

    def __init__(self, newline: Char = "\n", fail_after: Optional[int] = None):
        super().__init__(newline)
        self.fail_after = fail_after  # None = never fail

    def write_char(self, ch: Char):
        if self.fail_after is not None and len(self.chunks) >= self.fail_after:
            raise FoldWriteError("simulated write failure")
        super().write_char(ch)
