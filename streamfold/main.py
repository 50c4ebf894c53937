import logging
import sys
from typing import Optional, Sequence

from streamfold.arguments import Outcome, parse_command_line
from streamfold.drivers.stream_io import StreamSink, StreamSource
from streamfold.engine import fold
from streamfold.errors import FoldIOError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def main(
    argv: Optional[Sequence[str]] = None,
    stdin=None,
    stdout=None,
    stderr=None,
) -> int:
    """
    Runs the fold command and returns its process exit code.

    Args:
        argv: arguments without the program name (defaults to sys.argv[1:])
        stdin, stdout, stderr: stream overrides (default to the process streams)
    """
    if argv is None:
        argv = sys.argv[1:]
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    result = parse_command_line(argv, out=stdout, error=stderr)
    if result.outcome is Outcome.EXIT_SUCCESS:
        return EXIT_OK
    if result.outcome is Outcome.EXIT_FAILURE:
        return EXIT_FAILURE

    width = result.config.width
    logger.debug(f"Folding standard input at width {width}")
    try:
        fold(StreamSink(stdout), StreamSource(stdin), width)
    except FoldIOError as e:
        if isinstance(e.__cause__, BrokenPipeError):
            # Reader closed early, as `fold | head` does
            logger.debug(f"fold: output closed by reader: {e}")
        else:
            logger.error(f"fold: {e}")
        return EXIT_FAILURE

    return EXIT_OK
