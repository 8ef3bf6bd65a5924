"""Logging helpers."""

from __future__ import annotations

import logging
import sys


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure default logging if no handlers are present.

    Log records go to stderr; stdout is reserved for the truck table.
    """
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
