"""
Logging setup for the command line.
"""
from __future__ import annotations

import logging


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure root logging for the command line.

    Logs go to stderr so generated questions on stdout stay clean.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(message)s", force=True)
