"""Dataclasses for the merged game squares and derived shooting metrics."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PregameOdds:
    home: int | float | None
    away: int | float | None
    bookmaker: str | None


@dataclass(frozen=True)
class GameSquare:
    id: str
    api_sports_id: int
    home_team: str
    away_team: str
    status: str
    score_home: int | None
    score_away: int | None
    pregame_odds: PregameOdds | None = None


@dataclass(frozen=True)
class TrueShootingResult:
    home_ts: float | None
    away_ts: float | None
    updated_at: str
    by_team: dict[str, float | None] = field(default_factory=dict)
