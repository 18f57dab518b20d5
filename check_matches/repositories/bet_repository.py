"""Repository layer for bet input files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from marshmallow import ValidationError
from marshmallow.fields import Field

from check_matches.errors import DirectoryNotFoundError, LoadError, MissingDataError
from check_matches.models.bet import Bet
from check_matches.schemas.bet import BetFileSchema

logger = logging.getLogger(__name__)

BET_FILE_SUFFIX = ".json"

_file_schema = BetFileSchema()
_REQUIRED_MESSAGE = Field.default_error_messages["required"]


def _only_missing_fields(messages: Any) -> bool:
    """True when every leaf error is marshmallow's "required" message."""

    if isinstance(messages, dict):
        return bool(messages) and all(_only_missing_fields(v) for v in messages.values())
    if isinstance(messages, list):
        return bool(messages) and all(_only_missing_fields(v) for v in messages)
    return messages == _REQUIRED_MESSAGE


def load_bets(path: str | Path) -> list[Bet]:
    """Read one bet file and return its bets in file order.

    Raises:
        LoadError: unreadable file, invalid JSON, or wrong shape/types.
        MissingDataError: valid document lacking ``Bets`` or a bet field.
    """

    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
        payload = json.loads(raw)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise LoadError(
            f"Could not read bets from {path.name}",
            details={"path": str(path), "stage": "load", "cause": str(exc)},
        ) from exc

    try:
        data = _file_schema.load(payload)
    except ValidationError as exc:
        if _only_missing_fields(exc.messages):
            raise MissingDataError(
                f"Missing required data in {path.name}",
                details={"path": str(path), "stage": "load", "cause": exc.messages},
            ) from exc
        raise LoadError(
            f"Unexpected bet file shape in {path.name}",
            details={"path": str(path), "stage": "load", "cause": exc.messages},
        ) from exc

    bets: list[Bet] = data["bets"]
    logger.debug("Loaded %s bets from %s", len(bets), path)
    return bets


class BetFileRepository:
    """Read operations for the bet input directory."""

    def __init__(self, bets_dir: str | Path) -> None:
        self.bets_dir = Path(bets_dir)

    def discover(self) -> list[Path]:
        """All ``*.json`` files below the input directory, sorted by file name.

        A file named just ``.json`` counts too.
        """

        if not self.bets_dir.is_dir():
            raise DirectoryNotFoundError(
                f"Input directory not found: {self.bets_dir}",
                details={"path": str(self.bets_dir), "stage": "discover"},
            )

        files = [p for p in self.bets_dir.rglob("*") if p.is_file() and p.name.endswith(BET_FILE_SUFFIX)]
        # Case-insensitive name first; exact name, then path, break ties.
        files.sort(key=lambda p: (p.name.casefold(), p.name, str(p)))
        return files

    def load(self, path: str | Path) -> list[Bet]:
        return load_bets(path)
