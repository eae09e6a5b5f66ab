"""True shooting percentage from an API-Sports box-score snapshot."""

from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal

from gamesquares.data.schemas import StatEntry, StatisticsResponse
from gamesquares.squares.types import TrueShootingResult

POINTS = "Points"
FIELD_GOALS_ATTEMPTED = "Field Goals Attempted"
FREE_THROWS_ATTEMPTED = "Free Throws Attempted"
FREE_THROW_WEIGHT = 0.44
PRECISION = Decimal("0.001")


def read_stat(statistics: Sequence[StatEntry], label: str) -> float | None:
    """Return the numeric value of the first row with ``label``, else ``None``.

    Numeric strings are parsed as decimals; blank, non-numeric and non-finite
    values resolve to ``None``.
    """

    entry = next((stat for stat in statistics if stat.type == label), None)
    if entry is None or entry.value is None:
        return None
    if isinstance(entry.value, str):
        try:
            value = float(entry.value)
        except ValueError:
            return None
    else:
        value = float(entry.value)
    return value if math.isfinite(value) else None


def shooting_denominator(fga: float, fta: float) -> float:
    return 2 * (fga + FREE_THROW_WEIGHT * fta)


def round_half_up(value: float) -> float:
    """Round to three places with ties going up, on the exact binary value."""

    return float(Decimal(value).quantize(PRECISION, rounding=ROUND_HALF_UP))


def team_true_shooting(statistics: Sequence[StatEntry]) -> float | None:
    """Points / (2 * (FGA + 0.44 * FTA)) rounded to three places."""

    points = read_stat(statistics, POINTS)
    if points is None:
        return None
    fga = read_stat(statistics, FIELD_GOALS_ATTEMPTED)
    if fga is None:
        return None
    fta = read_stat(statistics, FREE_THROWS_ATTEMPTED)
    if fta is None:
        return None
    denominator = shooting_denominator(fga, fta)
    if denominator == 0:
        return None
    return round_half_up(points / denominator)


def calculate_true_shooting(
    stats: StatisticsResponse,
    home_team: str | None = None,
    away_team: str | None = None,
) -> TrueShootingResult:
    """Compute true shooting for the first two teams in the snapshot.

    When ``home_team`` and ``away_team`` are given the home/away slots are
    joined by team name; otherwise the first team in the feed fills the home
    slot and the second the away slot.
    """

    lookup = {entry.team.name: entry.statistics for entry in stats.response}
    team_names = [entry.team.name for entry in stats.response][:2]
    by_team = {name: team_true_shooting(lookup[name]) for name in team_names if name}

    if home_team is not None and away_team is not None:
        home_ts = by_team.get(home_team)
        away_ts = by_team.get(away_team)
    else:
        home_ts = by_team.get(team_names[0]) if len(team_names) > 0 else None
        away_ts = by_team.get(team_names[1]) if len(team_names) > 1 else None

    return TrueShootingResult(
        home_ts=home_ts,
        away_ts=away_ts,
        updated_at=datetime.now(timezone.utc).isoformat(),
        by_team=by_team,
    )
