"""
Logging Configuration

Configures structured logging for the sync pipeline and write service.
Output goes to stderr to keep stdout clean for the run summary.
"""

import logging
import sys
from typing import Optional, TextIO


def setup_logging(verbose: bool = False, quiet: bool = False, stream: Optional[TextIO] = None) -> None:
    """
    Configure the "src" logger hierarchy.

    Args:
        verbose: If True, set level to DEBUG
        quiet: If True, set level to WARNING (per-asset warnings still show)
        stream: Output stream (default: sys.stderr)
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)-8s %(name)s: %(message)s"))

    logger = logging.getLogger("src")
    logger.setLevel(level)

    # Avoid duplicate handlers if called multiple times
    logger.handlers.clear()
    logger.addHandler(handler)
