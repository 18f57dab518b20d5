"""Check bet files against the draw and write one match report per file.

Usage:
  check-matches                                   # Bets/ -> Results/
  check-matches --bets-dir data/bets --results-dir out --create-results-dir
  check-matches --winning-numbers "1,2,3,4,5,6"
  check-matches --on-error skip                   # keep going past broken files

Environment (or .env): BETS_DIR, RESULTS_DIR, WINNING_NUMBERS, ON_FILE_ERROR,
CREATE_RESULTS_DIR, LOG_LEVEL. Flags win over the environment.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
from collections.abc import Sequence
from pathlib import Path

from check_matches import create_service
from check_matches.config import (
    FILE_ERROR_POLICIES,
    BatchConfig,
    get_config,
    load_environment,
    parse_winning_numbers,
)
from check_matches.errors import AppError
from check_matches.logging_config import configure_logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compare bet files with the winning numbers")
    parser.add_argument("--bets-dir", dest="bets_dir", type=Path, default=None, help="Input directory (default: Bets)")
    parser.add_argument(
        "--results-dir", dest="results_dir", type=Path, default=None, help="Output directory (default: Results)"
    )
    parser.add_argument(
        "--winning-numbers",
        dest="winning_numbers",
        type=str,
        default=None,
        help="Comma separated draw (default: 3,12,19,26,33,47)",
    )
    parser.add_argument(
        "--on-error",
        dest="on_file_error",
        choices=FILE_ERROR_POLICIES,
        default=None,
        help="What to do when a file fails (default: abort)",
    )
    parser.add_argument(
        "--create-results-dir",
        dest="create_results_dir",
        action="store_true",
        default=None,
        help="Create the output directory if it is missing",
    )
    parser.add_argument("--log-level", dest="log_level", type=str, default=None)
    return parser


def _resolve_config(args: argparse.Namespace) -> BatchConfig:
    config = get_config()

    overrides = {}
    for name in ("bets_dir", "results_dir", "on_file_error", "create_results_dir", "log_level"):
        value = getattr(args, name)
        if value is not None:
            overrides[name] = value
    if args.winning_numbers is not None:
        overrides["winning_numbers"] = parse_winning_numbers(args.winning_numbers)

    return dataclasses.replace(config, **overrides) if overrides else config


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    load_environment()

    try:
        config = _resolve_config(args)
    except AppError as exc:
        configure_logging()
        logger.error("%s", exc.describe())
        return exc.exit_code

    service = create_service(config)
    logger.info(
        "Checking %s against %s -> %s",
        config.bets_dir,
        ",".join(str(n) for n in config.winning_numbers),
        config.results_dir,
    )

    try:
        result = service.run()
    except AppError as exc:
        logger.error("%s", exc.describe())
        return exc.exit_code

    if result.failures:
        logger.error(
            "%s of %s files failed%s",
            len(result.failures),
            len(result.outcomes),
            " (batch aborted)" if result.aborted else "",
        )
        return result.failures[0].error.exit_code

    logger.info("Wrote %s reports", len(result.outcomes))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
