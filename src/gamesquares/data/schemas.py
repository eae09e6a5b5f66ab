"""Pydantic schemas for The Odds API and API-Sports basketball responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class OddsOutcome(BaseModel):
    name: str
    price: int | float


class OddsMarket(BaseModel):
    key: str
    outcomes: list[OddsOutcome] = Field(default_factory=list)


class OddsBookmaker(BaseModel):
    key: str = ""
    title: str
    markets: list[OddsMarket] = Field(default_factory=list)


class OddsEvent(BaseModel):
    """One matchup from the odds feed, quoted by zero or more bookmakers."""

    id: str = ""
    commence_time: datetime | None = None
    home_team: str
    away_team: str
    bookmakers: list[OddsBookmaker] = Field(default_factory=list)


class ApiSportsTeam(BaseModel):
    id: int | None = None
    name: str
    logo: str | None = None


class ApiSportsStatus(BaseModel):
    long: str
    short: str | None = None


class ApiSportsTeams(BaseModel):
    home: ApiSportsTeam
    away: ApiSportsTeam


class ApiSportsScore(BaseModel):
    total: int | None = None


class ApiSportsScores(BaseModel):
    home: ApiSportsScore | None = None
    away: ApiSportsScore | None = None


class ApiSportsGame(BaseModel):
    """One live or scheduled game from the box-score feed."""

    id: int
    status: ApiSportsStatus
    teams: ApiSportsTeams
    scores: ApiSportsScores = Field(default_factory=ApiSportsScores)


class LiveGamesResponse(BaseModel):
    response: list[ApiSportsGame] = Field(default_factory=list)


class StatEntry(BaseModel):
    type: str
    value: int | float | str | None = None


class TeamStatistics(BaseModel):
    team: ApiSportsTeam
    statistics: list[StatEntry] = Field(default_factory=list)


class StatisticsResponse(BaseModel):
    response: list[TeamStatistics] = Field(default_factory=list)
