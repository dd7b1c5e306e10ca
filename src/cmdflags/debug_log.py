"""Logging setup for the cmdflags command line."""

from __future__ import annotations

import logging
import sys

_debug_logging_initialized: bool = False

log = logging.getLogger("cmdflags")


def setup_debug_logging(verbose: bool = False) -> None:
    """Attach a stderr handler to the ``cmdflags`` logger.

    This is idempotent - calling it again only adjusts the level.
    """
    global _debug_logging_initialized

    log.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if _debug_logging_initialized:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    log.addHandler(handler)

    _debug_logging_initialized = True
    log.debug("Debug logging initialized")
