"""Bets as read from an input file, and their matches."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Bet:
    """One row of chosen numbers."""

    row: int
    numbers: tuple[int, ...]


@dataclass(frozen=True)
class MatchResult:
    """Numbers of a bet found in the draw, in the bet's order."""

    row: int
    numbers: tuple[int, ...]
