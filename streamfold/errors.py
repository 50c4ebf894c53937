"""Exceptions raised while pumping characters through the fold engine."""


class FoldIOError(OSError):
    """A character could not be read from the source or written to the sink."""


class FoldReadError(FoldIOError):
    """Reading the input stream failed before a clean end of stream."""


class FoldWriteError(FoldIOError):
    """Writing or flushing the output stream failed."""
