"""
xinto Command-Line Interface
============================

This package provides the ``xinto`` command-line tool, which decodes an
Intel HEX file and prints its records as JSON.

The tool is implemented as a Click-based CLI application with help and
error reporting.

Copyright (c) 2020-2026 xinto contributors
"""

__all__ = ["xinto"]
