"""
Unified CLI Error Handling
==========================

Provides consistent error messages and exit codes for the xinto CLI.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Standard exit codes for CLI tools."""
    SUCCESS = 0
    DECODE_ERROR = 1     # A record failed to decode
    INVALID_INPUT = 2    # Invalid arguments, missing or unreadable files
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Unified exception handler for the CLI.

    Formats the error message, optionally prints a traceback in verbose
    mode, and exits with the matching exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    from xinto.errors import (
        RecordFailureError,
        RecordParsingError,
        SourceReadError,
        SourceUnreadableError,
    )

    if isinstance(error, (RecordFailureError, RecordParsingError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.DECODE_ERROR)

    elif isinstance(error, (SourceUnreadableError, SourceReadError)):
        # Input file missing, unreadable or not text
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_INPUT)

    elif isinstance(error, (click.BadParameter, ValueError)):
        # Invalid command-line arguments
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_INPUT)

    else:
        # Unexpected internal error
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
