"""Environment-based configuration."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from check_matches.errors import ConfigError


DEFAULT_WINNING_NUMBERS: tuple[int, ...] = (3, 12, 19, 26, 33, 47)

FILE_ERROR_POLICIES = ("abort", "skip")


def parse_winning_numbers(raw: str) -> tuple[int, ...]:
    """Parse a comma or whitespace separated list of integers.

    Raises:
        ConfigError: if a token is not an integer or the list is empty.
    """

    tokens = [t for t in re.split(r"[,\s]+", raw.strip()) if t]
    try:
        numbers = tuple(int(t) for t in tokens)
    except ValueError as exc:
        raise ConfigError("Winning numbers must be integers", details={"value": raw}) from exc

    if not numbers:
        raise ConfigError("Winning numbers must not be empty", details={"value": raw})
    return numbers


def resolve_winning_numbers() -> tuple[int, ...]:
    """Resolve the draw result.

    Priority:
      1) WINNING_NUMBERS (explicit)
      2) Fallback to the built-in draw
    """

    explicit = os.getenv("WINNING_NUMBERS")
    if explicit and explicit.strip():
        return parse_winning_numbers(explicit)
    return DEFAULT_WINNING_NUMBERS


def load_environment() -> None:
    """Load `.env` from the working directory (or its parents) into os.environ.

    Variables already set in the environment win over the file.
    """

    load_dotenv(find_dotenv(usecwd=True))


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class BatchConfig:
    """Settings for one batch run."""

    bets_dir: Path = Path("Bets")
    results_dir: Path = Path("Results")
    winning_numbers: tuple[int, ...] = DEFAULT_WINNING_NUMBERS
    on_file_error: str = "abort"  # "abort" | "skip"
    create_results_dir: bool = False
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not self.winning_numbers:
            raise ConfigError("Winning numbers must not be empty")
        if self.on_file_error not in FILE_ERROR_POLICIES:
            raise ConfigError(
                f"on_file_error must be one of {', '.join(FILE_ERROR_POLICIES)}",
                details={"value": self.on_file_error},
            )


def get_config() -> BatchConfig:
    """Resolve configuration from the process environment."""

    return BatchConfig(
        bets_dir=Path(os.getenv("BETS_DIR", "Bets")),
        results_dir=Path(os.getenv("RESULTS_DIR", "Results")),
        winning_numbers=resolve_winning_numbers(),
        on_file_error=os.getenv("ON_FILE_ERROR", "abort").lower().strip(),
        create_results_dir=_env_flag("CREATE_RESULTS_DIR"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
