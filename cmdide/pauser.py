"""Run a program, then report its exit code and run time and wait for a key."""

import sys
import time

from .compiler import run_process

START_FAILED = -2147483648


def run_command(command):
    """Run ``command`` to completion and return its exit code.

    Raises OSError if the program cannot be started.
    """
    return run_process(command, wait=True)


def format_report(elapsed_ms, code):
    """Return the closing report; large return values show the time in seconds."""
    if code < 30000:
        return f"Process exited after {elapsed_ms}ms with return value {code}"
    return f"Process exited after {elapsed_ms // 1000}s with return value {code}"


def _pause():
    try:
        input("Press Enter to continue . . .")
    except EOFError:
        pass


def main(argv=None):
    """Command entry: ``<command>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("usage: cmdide-pauser <filepath>")
        _pause()
        return 0
    start = time.monotonic()
    print("Starting process")
    try:
        code = run_command(args[0])
    except OSError as error:
        print(f"CreateProcess failed: {error}", file=sys.stderr)
        code = START_FAILED
    elapsed_ms = int((time.monotonic() - start) * 1000)
    print("-" * 32)
    print(format_report(elapsed_ms, code))
    _pause()
    return 0