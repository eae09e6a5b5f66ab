"""Merge pregame odds with the live box-score feed into game squares.

Teams are matched by exact, case-sensitive name equality between the two
feeds. Names spelled differently by the two providers will not match and the
square is shown without odds.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from gamesquares.data.odds_client import MONEYLINE_MARKET
from gamesquares.data.schemas import (
    ApiSportsGame,
    ApiSportsScore,
    LiveGamesResponse,
    OddsEvent,
    OddsMarket,
)
from gamesquares.squares.types import GameSquare, PregameOdds


def find_odds_match(odds_events: Iterable[OddsEvent], game: ApiSportsGame) -> OddsEvent | None:
    """Return the first odds event quoting exactly this home/away pairing."""

    home, away = game.teams.home.name, game.teams.away.name
    return next(
        (odds for odds in odds_events if odds.home_team == home and odds.away_team == away),
        None,
    )


def _outcome_price(market: OddsMarket | None, team_name: str) -> int | float | None:
    if market is None:
        return None
    for outcome in market.outcomes:
        if outcome.name == team_name:
            return outcome.price
    return None


def extract_pregame_odds(odds: OddsEvent, game: ApiSportsGame) -> PregameOdds:
    """Pick the first bookmaker's moneyline prices for each side."""

    bookmaker = odds.bookmakers[0] if odds.bookmakers else None
    market = None
    if bookmaker is not None:
        market = next((m for m in bookmaker.markets if m.key == MONEYLINE_MARKET), None)
    return PregameOdds(
        home=_outcome_price(market, game.teams.home.name),
        away=_outcome_price(market, game.teams.away.name),
        bookmaker=bookmaker.title if bookmaker is not None else None,
    )


def _total(score: ApiSportsScore | None) -> int | None:
    return score.total if score is not None else None


def build_square(game: ApiSportsGame, odds: OddsEvent | None) -> GameSquare:
    return GameSquare(
        id=str(game.id),
        api_sports_id=game.id,
        home_team=game.teams.home.name,
        away_team=game.teams.away.name,
        status=game.status.long,
        score_home=_total(game.scores.home),
        score_away=_total(game.scores.away),
        pregame_odds=extract_pregame_odds(odds, game) if odds is not None else None,
    )


def merge_odds_with_live_games(
    odds_events: Sequence[OddsEvent],
    live_games: LiveGamesResponse,
) -> list[GameSquare]:
    """Return one square per live game, in live-feed order."""

    return [build_square(game, find_odds_match(odds_events, game)) for game in live_games.response]
