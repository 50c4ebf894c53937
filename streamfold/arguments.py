"""
Command line resolution for the fold tool.

Turns the invocation tokens into one of three outcomes: keep going with a
width, stop successfully (help was printed), or stop with a failure (usage
was printed to the error stream). Bad input is never raised as an exception.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

from pydantic import ValidationError

from streamfold.config import FoldConfig, print_usage

logger = logging.getLogger(__name__)

HELP_FLAGS = ("-h", "--help")
WIDTH_FLAGS = ("-w", "--width")

# Leading whitespace, an optional sign, then as many digits as there are
_LENIENT_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class Outcome(Enum):
    CONTINUE = "continue"
    EXIT_SUCCESS = "exit_success"
    EXIT_FAILURE = "exit_failure"


class UsageProblem(Enum):
    """Why the command line was rejected (values match the classic return codes)."""

    MISSING_WIDTH = 1
    INVALID_WIDTH = 2
    UNRECOGNIZED_ARGUMENT = 3


@dataclass
class ParseResult:
    outcome: Outcome
    config: FoldConfig = field(default_factory=FoldConfig)
    problem: Optional[UsageProblem] = None


def parse_width(token: str) -> int:
    """
    Parses a width token the way C's atoi() does.

    Parsing stops at the first non-digit, and a token without leading digits
    is 0, so "12abc" is 12 and "abc" is 0.
    """
    match = _LENIENT_INT.match(token)
    if not match:
        return 0
    return int(match.group(1))


def _reject(error, problem: UsageProblem, token: Optional[str]) -> ParseResult:
    logger.debug(f"Rejected command line ({problem.name}) at token {token!r}")
    print_usage(error)
    return ParseResult(outcome=Outcome.EXIT_FAILURE, problem=problem)


def parse_command_line(args: Sequence[str], out, error) -> ParseResult:
    """
    Interprets the command line `args` (without the program name).

    Usage text goes to `out` when help is requested and to `error` when the
    arguments are rejected. The later of several width flags wins; the first
    help flag stops scanning.
    """
    tokens: List[str] = list(args)
    config = FoldConfig()

    i = 0
    while i < len(tokens):
        arg = tokens[i]

        if arg in HELP_FLAGS:
            print_usage(out)
            return ParseResult(outcome=Outcome.EXIT_SUCCESS, config=config)

        if arg in WIDTH_FLAGS:
            i += 1
            if i == len(tokens):
                return _reject(error, UsageProblem.MISSING_WIDTH, arg)
            try:
                config = FoldConfig(width=parse_width(tokens[i]))
            except ValidationError:
                return _reject(error, UsageProblem.INVALID_WIDTH, tokens[i])
            logger.debug(f"Width set to {config.width}")
        else:
            return _reject(error, UsageProblem.UNRECOGNIZED_ARGUMENT, arg)

        i += 1

    return ParseResult(outcome=Outcome.CONTINUE, config=config)
