"""
Fold engine.

Copies characters from a source to a sink, inserting line feeds so that no
output line runs past the break column. The line feed itself occupies the
last column of a full line, so a line carries at most ``break_column - 1``
other characters. Only one character of state (the current column) is kept,
which lets the engine handle unbounded streams in constant memory.

Sources expose ``newline`` and ``read_char()`` (an empty value means a clean
end of stream); sinks expose ``write_char()`` and ``flush()``. Both raise
``FoldIOError`` subclasses on failure, see ``streamfold.drivers``.
"""

import logging
from typing import Tuple, Union

from streamfold.config import DEFAULT_WIDTH, MIN_WIDTH
from streamfold.drivers.stream_memory import MemorySink, MemorySource

logger = logging.getLogger(__name__)

Char = Union[str, bytes]


class Folder:
    """Column-tracking state machine behind every fold run."""

    def __init__(self, break_column: int, newline: Char = "\n"):
        if break_column < MIN_WIDTH:
            raise ValueError(
                f"break_column must be at least {MIN_WIDTH}, got {break_column}"
            )
        self.break_column = break_column
        self.newline = newline
        self.column = 0
        self.breaks_inserted = 0

    def feed(self, ch: Char) -> Tuple[Char, ...]:
        """Advances by one input character and returns what to emit for it."""
        self.column += 1

        if self.column == self.break_column and ch != self.newline:
            # The displaced character opens the next line
            self.column = 1
            self.breaks_inserted += 1
            return (self.newline, ch)

        if ch == self.newline:
            self.column = 0
        return (ch,)


def fold(sink, source, break_column: int) -> int:
    """
    Folds everything readable from `source` into `sink`.

    Args:
        sink: object with write_char() and flush()
        source: object with read_char() and a newline attribute
        break_column: one-based column a line feed must appear by, at least 2

    Returns:
        Number of line feeds inserted.

    Raises:
        FoldReadError: reading failed before a clean end of stream
        FoldWriteError: writing or flushing failed; the pass stops at once
    """
    folder = Folder(break_column, newline=source.newline)

    while True:
        ch = source.read_char()
        if not ch:
            break
        for out in folder.feed(ch):
            sink.write_char(out)

    # End of input never forces a trailing line feed
    sink.flush()
    logger.debug(
        f"Fold complete at width {break_column}: {folder.breaks_inserted} breaks inserted"
    )
    return folder.breaks_inserted


def fold_text(text: Char, width: int = DEFAULT_WIDTH) -> Char:
    """Folds an in-memory string (or bytes) and returns the result."""
    source = MemorySource(text)
    sink = MemorySink(newline=source.newline)
    fold(sink, source, width)
    return sink.getvalue()
