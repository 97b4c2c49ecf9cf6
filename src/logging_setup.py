from __future__ import annotations

import logging
import sys


def setup_logging(level: int = logging.WARNING) -> None:
    """
    Configure the root logger with a single stderr handler.

    stdout is reserved for the interactive table and prompts, so
    diagnostics never interleave with them. Call once, before the loop.
    """
    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    root.addHandler(ch)
