"""Output helpers for dochelp commands.

The output sink for finished help text and tables, plus error printing
through the verbosity system. Also re-exports the log_lib public API.
"""

import sys

from dochelp.lib.log_lib import (                    # noqa: F401
    OutputManager, init_output, get_output,
    Hint, register_hint, register_hints, get_hint,
    trace,
)


def write_text(text, file=None):
    """Write finished text to the console, newline terminated."""
    file = file if file is not None else sys.stdout
    file.write(text if text.endswith("\n") else text + "\n")
    file.flush()


def print_error(msg):
    """Print an error message to stderr.

    Routes through OutputManager.error(), so it is shown at every
    verbosity except the hard wall (-QQQQ).
    """
    get_output().error(f"ERROR: {msg}")
