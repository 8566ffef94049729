"""Lightweight logging setup for the TUI and command line."""

from __future__ import annotations

import logging
import sys


def parse_level(name: str | None, default: int = logging.WARNING) -> int:
    # Accept level names like "debug"; unknown names fall back to the default.
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def configure_logging(level: int = logging.WARNING) -> None:
    # Configure root logger once; log to stderr so stdout stays clean for packages.
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
