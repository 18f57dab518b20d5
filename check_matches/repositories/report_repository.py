"""Repository layer for match reports."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from marshmallow import ValidationError

from check_matches.errors import LoadError, WriteError
from check_matches.models.report import Report
from check_matches.schemas.report import ReportSchema

logger = logging.getLogger(__name__)

REPORT_PREFIX = "MatchResult"
REPORT_SUFFIX = ".json"

_report_schema = ReportSchema()


def write_report(report: Report, output_path_without_extension: str | Path) -> Path:
    """Serialize ``report`` to ``<output_path_without_extension>.json``, overwriting.

    Raises:
        WriteError: on any filesystem failure.
    """

    # Append rather than with_suffix(): the stem may already end in ".json".
    target = Path(f"{output_path_without_extension}{REPORT_SUFFIX}")
    document = json.dumps(_report_schema.dump(report))
    try:
        target.write_text(document, encoding="utf-8")
    except OSError as exc:
        raise WriteError(
            f"Could not write report {target.name}",
            details={"path": str(target), "stage": "write", "cause": str(exc)},
        ) from exc

    logger.debug("Wrote report %s", target)
    return target


def read_report(path: str | Path) -> Report:
    """Load a report written by :func:`write_report`."""

    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
        return _report_schema.load(payload)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
        raise LoadError(
            f"Could not read report {path.name}",
            details={"path": str(path), "stage": "read_report", "cause": str(exc)},
        ) from exc


class ReportRepository:
    """Write operations for the results directory."""

    def __init__(self, results_dir: str | Path, *, create_dir: bool = False) -> None:
        self.results_dir = Path(results_dir)
        self.create_dir = create_dir

    def output_stem(self, source: Path) -> Path:
        """``Results/MatchResult<source name>``; the writer adds ``.json`` again."""

        return self.results_dir / f"{REPORT_PREFIX}{source.name}"

    def save(self, report: Report, source: Path) -> Path:
        if self.create_dir:
            try:
                self.results_dir.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise WriteError(
                    f"Could not create results directory {self.results_dir}",
                    details={"path": str(self.results_dir), "stage": "write", "cause": str(exc)},
                ) from exc
        return write_report(report, self.output_stem(source))
