"""Domain models."""

from check_matches.models.bet import Bet, MatchResult
from check_matches.models.report import DEVELOPER_IDENTITY, DeveloperIdentity, Report

__all__ = ["Bet", "MatchResult", "Report", "DeveloperIdentity", "DEVELOPER_IDENTITY"]
