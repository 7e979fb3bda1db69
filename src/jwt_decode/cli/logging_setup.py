"""
Logging configuration for the jwt-decode command.

One stderr handler: WARNING by default, DEBUG when verbose.
"""

from __future__ import annotations

import logging
import sys


def setup_logging(verbose: bool = False, level: str = "WARNING") -> None:
    """Configure the root logger with a single console handler.

    Decoded output goes to stdout, so log records always go to stderr and
    never mix with the JSON document.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else level)

    # Remove any pre-existing handlers (e.g. from basicConfig)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_fmt = logging.Formatter(
        "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s" if verbose
        else "%(levelname)-8s  %(message)s",
        datefmt="%H:%M:%S",
    )
    console_handler.setFormatter(console_fmt)
    root_logger.addHandler(console_handler)
