"""Business logic for matching bets against the draw."""

from __future__ import annotations

from collections.abc import Sequence

from check_matches.models.bet import Bet, MatchResult
from check_matches.models.report import DeveloperIdentity, Report
from check_matches.utils.environment import EnvironmentSnapshot


def compare_numbers(bet: Bet, winning_numbers: Sequence[int]) -> list[int]:
    """Numbers of ``bet`` present in ``winning_numbers``, in the bet's order.

    Membership only: a number repeated in the bet is kept once per occurrence.
    """

    winners = set(winning_numbers)
    return [n for n in bet.numbers if n in winners]


class ReportBuilder:
    """Accumulate comparator output for the bets of one file."""

    def __init__(self, winning_numbers: Sequence[int]) -> None:
        self.winning_numbers = tuple(winning_numbers)
        self.total_matches = 0
        self.betting_result: list[MatchResult] = []

    @property
    def total_results(self) -> int:
        return len(self.betting_result)

    def add(self, bet: Bet) -> list[int]:
        matched = compare_numbers(bet, self.winning_numbers)

        if matched:
            self.betting_result.append(MatchResult(row=bet.row, numbers=tuple(matched)))

        # Match count against the draw size, not the bet size.
        if len(matched) == len(self.winning_numbers):
            self.total_matches += 1

        return matched

    def build(self, identity: DeveloperIdentity, environment: EnvironmentSnapshot) -> Report:
        return Report(
            developed_by=identity.developed_by,
            developed_on_date=identity.developed_on_date,
            developer_url=identity.developer_url,
            developer_email=identity.developer_email,
            version=identity.version,
            generated_by=environment.user_name,
            generated_on_date=environment.generated_on,
            station_name=environment.station_name,
            os_version=environment.os_version,
            total_results=self.total_results,
            total_matches=self.total_matches,
            betting_result=list(self.betting_result),
        )
