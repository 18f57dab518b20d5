"""Per-file match report.

Fields:
- generation metadata (developer identity + environment snapshot)
- total_results: bets with at least one match
- total_matches: bets whose match count equals the draw size
- betting_result: one MatchResult per matching bet, in file order
"""

from __future__ import annotations

from dataclasses import dataclass, field

from check_matches.models.bet import MatchResult


@dataclass(frozen=True)
class DeveloperIdentity:
    developed_by: str
    developed_on_date: str
    developer_url: str
    developer_email: str
    version: str


DEVELOPER_IDENTITY = DeveloperIdentity(
    developed_by="Nucleus MAP, Machines, Automation, and Programming",
    developed_on_date="Monday, December 09, 2024",
    developer_url="http://nucleomap.com.br",
    developer_email="nucleomap@nucleomap.com.br",
    version="1.0",
)


@dataclass(frozen=True)
class Report:
    """One report per input file."""

    developed_by: str
    developed_on_date: str
    developer_url: str
    developer_email: str
    version: str
    generated_by: str
    generated_on_date: str
    station_name: str
    os_version: str
    total_results: int = 0
    total_matches: int = 0
    betting_result: list[MatchResult] = field(default_factory=list)
