"""Pydantic schemas for the GameSquares API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from gamesquares.squares.types import GameSquare, PregameOdds, TrueShootingResult


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PregameOddsResponse(CamelModel):
    home: int | float | None
    away: int | float | None
    bookmaker: str | None

    @classmethod
    def from_odds(cls, odds: PregameOdds) -> "PregameOddsResponse":
        return cls(home=odds.home, away=odds.away, bookmaker=odds.bookmaker)


class TrueShootingResponse(CamelModel):
    home_ts: float | None
    away_ts: float | None
    by_team: dict[str, float | None]
    updated_at: str

    @classmethod
    def from_result(cls, result: TrueShootingResult) -> "TrueShootingResponse":
        return cls(
            home_ts=result.home_ts,
            away_ts=result.away_ts,
            by_team=dict(result.by_team),
            updated_at=result.updated_at,
        )


class GameSquareResponse(CamelModel):
    id: str
    api_sports_id: int
    home_team: str
    away_team: str
    status: str
    score_home: int | None
    score_away: int | None
    pregame_odds: PregameOddsResponse | None = None
    true_shooting: TrueShootingResponse | None = None

    @classmethod
    def from_square(
        cls,
        square: GameSquare,
        result: TrueShootingResult | None = None,
    ) -> "GameSquareResponse":
        return cls(
            id=square.id,
            api_sports_id=square.api_sports_id,
            home_team=square.home_team,
            away_team=square.away_team,
            status=square.status,
            score_home=square.score_home,
            score_away=square.score_away,
            pregame_odds=PregameOddsResponse.from_odds(square.pregame_odds) if square.pregame_odds else None,
            true_shooting=TrueShootingResponse.from_result(result) if result else None,
        )


class BoardResponse(CamelModel):
    games: list[GameSquareResponse]
    error: str | None = None
    last_updated: datetime | None = None
