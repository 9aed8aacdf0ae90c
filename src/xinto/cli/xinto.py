"""
xinto - Intel HEX to JSON Command-Line Interface
================================================

This module implements the command-line interface that decodes an Intel
HEX object file and prints its records as a JSON document.

Usage Examples
--------------
Compact JSON on stdout:
    $ xinto firmware.hex

Indented JSON:
    $ xinto --pretty firmware.hex

Indented with 4 spaces:
    $ xinto --pretty --indent 4 firmware.hex

Show what is being decoded:
    $ xinto -v firmware.hex

Exit Status
-----------
0 on success, 1 if a record fails to decode, 2 if the file cannot be read
or the arguments are invalid, 3 on an internal error.

Copyright (c) 2020-2026 xinto contributors
"""

import logging
from pathlib import Path

import click

from xinto import __version__
from xinto.cli.errors import handle_cli_exception
from xinto.config import OutputConfig
from xinto.ihex import HexFile


# =============================================================================
# Logging
# =============================================================================

def setup_logging(verbose: bool) -> None:
    """Configure logging on stderr based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )
    # basicConfig() does nothing once the root logger has handlers
    logging.getLogger("xinto").setLevel(level)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "hex_filename",
    metavar="HEX_FILENAME",
    type=click.Path(path_type=Path),
)
@click.option(
    "--pretty/--compact",
    default=False,
    help="Indent the JSON output (default: compact)",
)
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=2,
    show_default=True,
    help="Spaces per indentation level with --pretty",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="xinto")
def main(hex_filename: Path, pretty: bool, indent: int, verbose: bool) -> None:
    """
    Parse and convert an Intel hexadecimal object file to JSON.

    HEX_FILENAME is the hex file to convert.

    Each record becomes an object with the keys length, load_offset, type,
    data and checksum.

    Examples:

        # Compact output
        xinto firmware.hex

        # Indented output
        xinto --pretty firmware.hex
    """
    setup_logging(verbose)

    try:
        config = OutputConfig(pretty=pretty, indent=indent)
        hex_file = HexFile.from_file(hex_filename)
    except Exception as e:
        handle_cli_exception(e, verbose=verbose)

    if verbose:
        click.echo(f"Input file: {hex_filename} ({len(hex_file)} records)", err=True)

    # Decoding succeeded, but the file may still be truncated
    if hex_file.records and not hex_file.ends_with_end_of_file():
        click.echo('Warning: last record is not an "End Of File" record', err=True)

    click.echo(hex_file.to_json(config))


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
