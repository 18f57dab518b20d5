"""Bet match checker package."""

from __future__ import annotations

from check_matches.config import BatchConfig
from check_matches.services.batch_service import BatchService


def create_service(config: BatchConfig | None = None) -> BatchService:
    """Application factory.

    Without an explicit config, `.env` and the environment are read here.

    Returns:
        BatchService wired with filesystem repositories.
    """
    from check_matches.config import get_config, load_environment
    from check_matches.logging_config import configure_logging

    if config is None:
        load_environment()
        config = get_config()

    configure_logging(config.log_level)

    return BatchService(config)
