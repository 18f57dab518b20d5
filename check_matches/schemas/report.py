"""Schemas for the match report written next to each input file."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, post_load

from check_matches.models.bet import MatchResult
from check_matches.models.report import Report


class MatchResultSchema(Schema):
    row = fields.Integer(data_key="Row", required=True)
    numbers = fields.List(fields.Integer(), data_key="Numbers", required=True)

    @post_load
    def _make_match(self, data, **kwargs):  # type: ignore[no-untyped-def]
        return MatchResult(row=int(data["row"]), numbers=tuple(data["numbers"]))


class ReportSchema(Schema):
    """Field order here is the key order of the written document."""

    class Meta:
        unknown = EXCLUDE

    developed_by = fields.String(data_key="DevelopedBy", required=True)
    developed_on_date = fields.String(data_key="DevelopedOnDate", required=True)
    developer_url = fields.String(data_key="DeveloperURL", required=True)
    developer_email = fields.String(data_key="DeveloperEmail", required=True)
    version = fields.String(data_key="Version", required=True)
    generated_by = fields.String(data_key="GeneratedBy", required=True)
    generated_on_date = fields.String(data_key="GeneratedOnDate", required=True)
    station_name = fields.String(data_key="StationName", required=True)
    os_version = fields.String(data_key="OSVersion", required=True)

    total_results = fields.Integer(data_key="TotalResults", required=True)
    total_matches = fields.Integer(data_key="TotalMatches", required=True)
    betting_result = fields.List(fields.Nested(MatchResultSchema), data_key="BettingResult", required=True)

    @post_load
    def _make_report(self, data, **kwargs):  # type: ignore[no-untyped-def]
        return Report(**data)
