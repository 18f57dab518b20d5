"""Batch driver: discover bet files, match them and write one report each."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from check_matches.config import BatchConfig
from check_matches.errors import AppError
from check_matches.models.report import DEVELOPER_IDENTITY, DeveloperIdentity, Report
from check_matches.repositories.bet_repository import BetFileRepository
from check_matches.repositories.report_repository import ReportRepository
from check_matches.services.match_service import ReportBuilder
from check_matches.utils.environment import EnvironmentSnapshot, snapshot_environment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileOutcome:
    """Result of processing one bet file: a report or the error that stopped it."""

    source: Path
    report: Report | None = None
    output_path: Path | None = None
    error: AppError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchResult:
    outcomes: list[FileOutcome] = field(default_factory=list)
    aborted: bool = False

    @property
    def failures(self) -> list[FileOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def ok(self) -> bool:
        return not self.failures


class BatchService:
    """Run the Loader -> Comparator -> Report Builder -> Writer pipeline per file."""

    def __init__(
        self,
        config: BatchConfig,
        *,
        bets: BetFileRepository | None = None,
        reports: ReportRepository | None = None,
        identity: DeveloperIdentity = DEVELOPER_IDENTITY,
        environment: Callable[[], EnvironmentSnapshot] = snapshot_environment,
        echo: Callable[[str], None] = print,
    ) -> None:
        self.config = config
        self.bets = bets or BetFileRepository(config.bets_dir)
        self.reports = reports or ReportRepository(
            config.results_dir, create_dir=config.create_results_dir
        )
        self.identity = identity
        self.environment = environment
        self.echo = echo

    def process_file(self, path: Path) -> FileOutcome:
        try:
            bets = self.bets.load(path)

            builder = ReportBuilder(self.config.winning_numbers)
            for bet in bets:
                matched = builder.add(bet)
                if matched:
                    self.echo(
                        f"Result in row {bet.row} matches these numbers: {', '.join(str(n) for n in matched)}"
                    )
                else:
                    self.echo(f"Result in row {bet.row} doesn't match any number.")

            self.echo(f"\nTotal of winning bets: {builder.total_matches} in {path.name}\n")

            report = builder.build(self.identity, self.environment())
            output_path = self.reports.save(report, path)
        except AppError as exc:
            return FileOutcome(source=path, error=exc)

        logger.info(
            "Processed %s: %s bets, %s with matches, %s perfect -> %s",
            path.name,
            len(bets),
            report.total_results,
            report.total_matches,
            output_path,
        )
        return FileOutcome(source=path, report=report, output_path=output_path)

    def run(self) -> BatchResult:
        """Process every discovered file in name order.

        Raises:
            DirectoryNotFoundError: when the input directory is missing.
        """

        files = self.bets.discover()
        logger.info("Found %s bet files in %s", len(files), self.bets.bets_dir)

        result = BatchResult()
        for path in files:
            outcome = self.process_file(path)
            result.outcomes.append(outcome)
            if outcome.ok:
                continue

            logger.error("%s", outcome.error.describe())
            if self.config.on_file_error == "abort":
                result.aborted = True
                logger.error("Aborting batch after failure in %s", path.name)
                break
            logger.warning("Skipping %s and continuing", path.name)

        return result
