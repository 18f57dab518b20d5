"""Schemas for bet input files."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, post_load

from check_matches.models.bet import Bet


class BetSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    row = fields.Integer(data_key="Row", required=True, strict=True)
    numbers = fields.List(fields.Integer(strict=True), data_key="Numbers", required=True)

    @post_load
    def _make_bet(self, data, **kwargs):  # type: ignore[no-untyped-def]
        return Bet(row=int(data["row"]), numbers=tuple(data["numbers"]))


class BetFileSchema(Schema):
    """Top level: ``{"Bets": [{"Row": 1, "Numbers": [...]}, ...]}``."""

    class Meta:
        unknown = EXCLUDE

    bets = fields.List(fields.Nested(BetSchema), data_key="Bets", required=True)
