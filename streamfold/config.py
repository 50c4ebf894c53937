from pydantic import BaseModel, Field

# Constants
DEFAULT_WIDTH = 80  # Column the plain `fold` invocation wraps at
MIN_WIDTH = 2  # Narrowest width that leaves room for a character and a line feed

USAGE = (
    "usage:\n"
    "    fold\n"
    "        Wrap standard input lines at the 80th column, and print the result to\n"
    "        standard output.\n"
    "    fold --width WIDTH\n"
    "    fold -w WIDTH\n"
    "        Wrap standard input lines at the WIDTH column, and print the result to\n"
    "        standard output.\n"
    "    fold --help\n"
    "    fold -h\n"
    "        Print this message to standard output.\n"
)


class FoldConfig(BaseModel):
    """Effective settings for one fold run."""

    # One-based column that the line feed occupies on a full line
    width: int = Field(default=DEFAULT_WIDTH, ge=MIN_WIDTH)


def print_usage(out) -> None:
    """Writes the usage text to the given text stream."""
    out.write(USAGE)
