import sys

from rich.console import Console
from rich.markup import escape

# Diagnostics go to stderr, never to the game console.
error_console = Console(stderr=True)


class CaseFileError(ValueError):
    """Raised when a case file is missing pieces or describes an impossible mansion."""


def fatal(message):
    """
    The unrecoverable path. Prints a diagnostic and exits with status 1.
    Used only for resource exhaustion; everything else is reported as an event.
    """
    error_console.print(f"[bold red]FATAL:[/] {escape(message)}")
    sys.exit(1)


def allocate(factory, what, *args, **kwargs):
    """Builds a node via factory(*args, **kwargs). Running out of memory is fatal."""
    try:
        return factory(*args, **kwargs)
    except MemoryError:
        fatal(f"out of memory while creating {what}.")
