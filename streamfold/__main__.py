import os
import sys

from streamfold.main import EXIT_FAILURE, main


def run():
    code = main()
    try:
        sys.stdout.flush()
    except BrokenPipeError:
        # Reader went away; keep the interpreter's shutdown flush quiet
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        code = EXIT_FAILURE
    sys.exit(code)


if __name__ == "__main__":
    run()
