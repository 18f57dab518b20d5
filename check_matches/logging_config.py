"""Logging configuration."""

from __future__ import annotations

import logging


def configure_logging(level_name: str = "INFO") -> None:
    """Configure plain line-oriented logs on stderr.

    Per-bet console feedback is printed separately on stdout.
    """

    level = getattr(logging, str(level_name).upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
