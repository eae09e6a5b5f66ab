"""Shared fakes standing in for the feed clients."""

from __future__ import annotations

import pytest

from gamesquares.board.service import GameBoard
from gamesquares.data.http import FeedError
from gamesquares.data.schemas import LiveGamesResponse, OddsEvent, StatisticsResponse


def team_stats(name: str, points=100, fga=80, fta=20) -> dict:
    return {
        "team": {"name": name},
        "statistics": [
            {"type": "Points", "value": points},
            {"type": "Field Goals Attempted", "value": fga},
            {"type": "Free Throws Attempted", "value": fta},
        ],
    }


class FakeOddsClient:
    def __init__(self) -> None:
        self.events = [
            OddsEvent.model_validate(
                {
                    "home_team": "Boston Celtics",
                    "away_team": "Miami Heat",
                    "bookmakers": [
                        {
                            "title": "DraftKings",
                            "markets": [
                                {
                                    "key": "h2h",
                                    "outcomes": [
                                        {"name": "Boston Celtics", "price": -310},
                                        {"name": "Miami Heat", "price": 250},
                                    ],
                                }
                            ],
                        }
                    ],
                }
            )
        ]
        self.fail = False

    def fetch_odds(self) -> list[OddsEvent]:
        if self.fail:
            raise FeedError("Odds API error: 503")
        return list(self.events)


class FakeSportsClient:
    def __init__(self) -> None:
        self.games = LiveGamesResponse.model_validate(
            {
                "response": [
                    {
                        "id": 101,
                        "status": {"long": "Quarter 4"},
                        "teams": {"home": {"name": "Boston Celtics"}, "away": {"name": "Miami Heat"}},
                        "scores": {"home": {"total": 98}, "away": {"total": 95}},
                    },
                    {
                        "id": 102,
                        "status": {"long": "Not Started"},
                        "teams": {"home": {"name": "Utah Jazz"}, "away": {"name": "Denver Nuggets"}},
                        "scores": {"home": None, "away": None},
                    },
                ]
            }
        )
        # away team listed first, as the statistics feed may do
        self.stats = StatisticsResponse.model_validate(
            {"response": [team_stats("Miami Heat", 90, 85, 10), team_stats("Boston Celtics")]}
        )
        self.stats_requests: list[int] = []
        self.fail_stats = False

    def fetch_live_games(self) -> LiveGamesResponse:
        return self.games

    def fetch_game_stats(self, game_id: int) -> StatisticsResponse:
        self.stats_requests.append(game_id)
        if self.fail_stats:
            raise FeedError("API Sports stats error: 500")
        return self.stats


@pytest.fixture
def odds_client() -> FakeOddsClient:
    return FakeOddsClient()


@pytest.fixture
def sports_client() -> FakeSportsClient:
    return FakeSportsClient()


@pytest.fixture
def board(odds_client, sports_client) -> GameBoard:
    return GameBoard(odds_client=odds_client, sports_client=sports_client)
