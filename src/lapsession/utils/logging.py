"""Logging helpers for library users and the console program."""

from __future__ import annotations

import logging


def configure_logging(level: int = logging.INFO) -> None:
    """Configure a minimal logging setup for scripts and the CLI.

    Args:
        level: Root logger level, e.g. ``logging.INFO``.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
