"""
Unit tests for check_matches.repositories

Bet loading, file discovery and report writing against tmp_path.
"""
import json

import pytest

from check_matches.errors import DirectoryNotFoundError, LoadError, MissingDataError, WriteError
from check_matches.models.bet import Bet, MatchResult
from check_matches.models.report import Report
from check_matches.repositories.bet_repository import BetFileRepository, load_bets
from check_matches.repositories.report_repository import ReportRepository, read_report, write_report


def _write_json(path, payload):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def _report(**overrides):
    values = dict(
        developed_by="Nucleus MAP, Machines, Automation, and Programming",
        developed_on_date="Monday, December 09, 2024",
        developer_url="http://nucleomap.com.br",
        developer_email="nucleomap@nucleomap.com.br",
        version="1.0",
        generated_by="tester",
        generated_on_date="Monday, December 9, 2024 3:04:05 PM",
        station_name="station-1",
        os_version="Linux 6.1",
        total_results=2,
        total_matches=1,
        betting_result=[
            MatchResult(row=1, numbers=(3, 12, 19, 26, 33, 47)),
            MatchResult(row=2, numbers=(3,)),
        ],
    )
    values.update(overrides)
    return Report(**values)


class TestLoadBets:
    """Test the bet loader."""

    def test_loads_bets_in_order(self, tmp_path):
        path = _write_json(tmp_path / "a.json", {
            "Bets": [
                {"Row": 2, "Numbers": [1, 2, 3]},
                {"Row": 1, "Numbers": [3, 12, 19, 26, 33, 47]},
            ]
        })

        bets = load_bets(path)

        assert bets == [
            Bet(row=2, numbers=(1, 2, 3)),
            Bet(row=1, numbers=(3, 12, 19, 26, 33, 47)),
        ]

    def test_empty_bets(self, tmp_path):
        path = _write_json(tmp_path / "empty.json", {"Bets": []})
        assert load_bets(path) == []

    def test_unknown_keys_ignored(self, tmp_path):
        path = _write_json(tmp_path / "extra.json", {
            "Owner": "someone",
            "Bets": [{"Row": 1, "Numbers": [5], "Note": "x"}],
        })
        assert load_bets(path) == [Bet(row=1, numbers=(5,))]

    def test_missing_file(self, tmp_path):
        with pytest.raises(LoadError) as exc_info:
            load_bets(tmp_path / "nope.json")

        assert exc_info.value.details["stage"] == "load"
        assert exc_info.value.exit_code == 3

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{\"Bets\": [", encoding="utf-8")

        with pytest.raises(LoadError):
            load_bets(path)

    def test_missing_bets_key(self, tmp_path):
        path = _write_json(tmp_path / "nobets.json", {"Tickets": []})

        with pytest.raises(MissingDataError) as exc_info:
            load_bets(path)

        assert exc_info.value.code == "missing_data"
        assert "nobets.json" in exc_info.value.describe()

    def test_missing_numbers_field(self, tmp_path):
        path = _write_json(tmp_path / "nonumbers.json", {"Bets": [{"Row": 1}]})

        with pytest.raises(MissingDataError):
            load_bets(path)

    def test_wrong_types(self, tmp_path):
        path = _write_json(tmp_path / "types.json", {"Bets": [{"Row": 1, "Numbers": ["a", "b"]}]})

        with pytest.raises(LoadError):
            load_bets(path)

    def test_top_level_not_an_object(self, tmp_path):
        path = _write_json(tmp_path / "list.json", [{"Row": 1, "Numbers": [1]}])

        with pytest.raises(LoadError):
            load_bets(path)

    def test_null_bets(self, tmp_path):
        path = _write_json(tmp_path / "null.json", {"Bets": None})

        with pytest.raises(LoadError):
            load_bets(path)


class TestBetFileRepository:
    """Test input discovery."""

    def test_sorted_by_file_name(self, tmp_path):
        _write_json(tmp_path / "b.json", {"Bets": []})
        _write_json(tmp_path / "a.json", {"Bets": []})

        files = BetFileRepository(tmp_path).discover()

        assert [f.name for f in files] == ["a.json", "b.json"]

    def test_recursive_and_sorted_by_name_not_path(self, tmp_path):
        _write_json(tmp_path / "z" / "a.json", {"Bets": []})
        _write_json(tmp_path / "b.json", {"Bets": []})
        _write_json(tmp_path / "a" / "c.json", {"Bets": []})

        files = BetFileRepository(tmp_path).discover()

        assert [f.name for f in files] == ["a.json", "b.json", "c.json"]
        assert files[0].parent.name == "z"

    def test_only_json_extension(self, tmp_path):
        _write_json(tmp_path / "a.json", {"Bets": []})
        (tmp_path / "notes.txt").write_text("x")
        (tmp_path / "upper.JSON").write_text("{}")
        (tmp_path / "dir.json").mkdir()

        files = BetFileRepository(tmp_path).discover()

        assert [f.name for f in files] == ["a.json"]

    def test_case_insensitive_name_order(self, tmp_path):
        for name in ("b.json", "B.json", "a.json", "A.json"):
            _write_json(tmp_path / name, {"Bets": []})

        files = BetFileRepository(tmp_path).discover()

        assert [f.name for f in files] == ["A.json", "a.json", "B.json", "b.json"]

    def test_bare_json_name_is_included(self, tmp_path):
        _write_json(tmp_path / ".json", {"Bets": []})
        _write_json(tmp_path / "a.json", {"Bets": []})

        files = BetFileRepository(tmp_path).discover()

        assert [f.name for f in files] == [".json", "a.json"]

    def test_stable_across_calls(self, tmp_path):
        for name in ("c.json", "a.json", "b.json"):
            _write_json(tmp_path / name, {"Bets": []})

        repo = BetFileRepository(tmp_path)
        assert repo.discover() == repo.discover()

    def test_missing_directory(self, tmp_path):
        with pytest.raises(DirectoryNotFoundError) as exc_info:
            BetFileRepository(tmp_path / "Bets").discover()

        assert exc_info.value.exit_code == 2


class TestReportWriter:
    """Test report serialization."""

    def test_appends_json_suffix(self, tmp_path):
        target = write_report(_report(), tmp_path / "MatchResulta.json")

        assert target == tmp_path / "MatchResulta.json.json"
        assert target.exists()

    def test_key_order_and_values(self, tmp_path):
        target = write_report(_report(), tmp_path / "out")
        document = json.loads(target.read_text(encoding="utf-8"))

        assert list(document) == [
            "DevelopedBy",
            "DevelopedOnDate",
            "DeveloperURL",
            "DeveloperEmail",
            "Version",
            "GeneratedBy",
            "GeneratedOnDate",
            "StationName",
            "OSVersion",
            "TotalResults",
            "TotalMatches",
            "BettingResult",
        ]
        assert document["TotalResults"] == 2
        assert document["TotalMatches"] == 1
        assert document["BettingResult"] == [
            {"Row": 1, "Numbers": [3, 12, 19, 26, 33, 47]},
            {"Row": 2, "Numbers": [3]},
        ]

    def test_overwrites_existing(self, tmp_path):
        (tmp_path / "out.json").write_text("stale")

        write_report(_report(total_results=0, total_matches=0, betting_result=[]), tmp_path / "out")

        document = json.loads((tmp_path / "out.json").read_text(encoding="utf-8"))
        assert document["BettingResult"] == []

    def test_missing_directory_is_write_error(self, tmp_path):
        with pytest.raises(WriteError) as exc_info:
            write_report(_report(), tmp_path / "Results" / "out")

        assert exc_info.value.details["stage"] == "write"

    def test_read_back(self, tmp_path):
        report = _report()
        target = write_report(report, tmp_path / "out")

        assert read_report(target) == report

    def test_read_back_invalid(self, tmp_path):
        path = _write_json(tmp_path / "bad.json", {"TotalResults": 1})

        with pytest.raises(LoadError):
            read_report(path)


class TestReportRepository:
    """Test output naming and directory handling."""

    def test_double_suffix_name(self, tmp_path):
        repo = ReportRepository(tmp_path)
        source = tmp_path / "Bets" / "week1.json"

        assert repo.output_stem(source) == tmp_path / "MatchResultweek1.json"
        target = repo.save(_report(), source)
        assert target.name == "MatchResultweek1.json.json"

    def test_does_not_create_directory_by_default(self, tmp_path):
        repo = ReportRepository(tmp_path / "Results")

        with pytest.raises(WriteError):
            repo.save(_report(), tmp_path / "a.json")

    def test_creates_directory_when_asked(self, tmp_path):
        repo = ReportRepository(tmp_path / "Results", create_dir=True)

        target = repo.save(_report(), tmp_path / "a.json")

        assert target == tmp_path / "Results" / "MatchResulta.json.json"
        assert target.exists()
