"""True shooting calculator tests."""

from __future__ import annotations

from datetime import datetime

import pytest

from gamesquares.data.schemas import StatEntry, StatisticsResponse
from gamesquares.squares.true_shooting import (
    calculate_true_shooting,
    read_stat,
    round_half_up,
    shooting_denominator,
    team_true_shooting,
)


def _team(name: str, points=100, fga=80, fta=20) -> dict:
    return {
        "team": {"id": 1, "name": name},
        "statistics": [
            {"type": "Points", "value": points},
            {"type": "Field Goals Attempted", "value": fga},
            {"type": "Free Throws Attempted", "value": fta},
            {"type": "Rebounds", "value": 40},
        ],
    }


def _snapshot(*teams: dict) -> StatisticsResponse:
    return StatisticsResponse.model_validate({"response": list(teams)})


def _stats(**values) -> list[StatEntry]:
    return [StatEntry(type=label, value=value) for label, value in values.items()]


def test_reference_example() -> None:
    result = calculate_true_shooting(_snapshot(_team("Boston Celtics"), _team("Miami Heat", 90, 85, 10)))
    assert result.home_ts == 0.563
    # 90 / (2 * (85 + 4.4))
    assert result.away_ts == 0.503


def test_zero_attempts_yields_null() -> None:
    result = calculate_true_shooting(_snapshot(_team("Boston Celtics", 12, 0, 0), _team("Miami Heat")))
    assert result.home_ts is None
    assert result.away_ts == 0.563


def test_numeric_strings_are_parsed() -> None:
    result = calculate_true_shooting(_snapshot(_team("Boston Celtics", "45", "40", "10"), _team("Miami Heat")))
    assert result.home_ts == 0.507


def test_non_numeric_value_nulls_that_side_only() -> None:
    result = calculate_true_shooting(_snapshot(_team("Boston Celtics", "N/A"), _team("Miami Heat")))
    assert result.home_ts is None
    assert result.away_ts == 0.563


def test_missing_stat_row_yields_null() -> None:
    team = _team("Boston Celtics")
    team["statistics"] = [row for row in team["statistics"] if row["type"] != "Free Throws Attempted"]
    result = calculate_true_shooting(_snapshot(team, _team("Miami Heat")))
    assert result.home_ts is None


def test_read_stat_values() -> None:
    stats = _stats(**{"Points": None, "Blocks": "", "Steals": "7", "Fouls": 19, "Turnovers": "inf"})
    assert read_stat(stats, "Points") is None
    assert read_stat(stats, "Blocks") is None
    assert read_stat(stats, "Steals") == 7.0
    assert read_stat(stats, "Fouls") == 19.0
    assert read_stat(stats, "Turnovers") is None
    assert read_stat(stats, "Assists") is None


def test_team_true_shooting_direct() -> None:
    stats = _stats(**{"Points": 100, "Field Goals Attempted": 80, "Free Throws Attempted": 20})
    assert team_true_shooting(stats) == 0.563


def test_positional_mapping_without_team_names() -> None:
    result = calculate_true_shooting(_snapshot(_team("Miami Heat", 90, 85, 10), _team("Boston Celtics")))
    assert result.home_ts == 0.503
    assert result.away_ts == 0.563


def test_team_names_join_by_name_regardless_of_feed_order() -> None:
    snapshot = _snapshot(_team("Miami Heat", 90, 85, 10), _team("Boston Celtics"))
    result = calculate_true_shooting(snapshot, home_team="Boston Celtics", away_team="Miami Heat")
    assert result.home_ts == 0.563
    assert result.away_ts == 0.503
    assert result.by_team == {"Miami Heat": 0.503, "Boston Celtics": 0.563}


def test_unknown_team_name_yields_null() -> None:
    snapshot = _snapshot(_team("Boston Celtics"), _team("Miami Heat"))
    result = calculate_true_shooting(snapshot, home_team="Boston Celtics", away_team="Orlando Magic")
    assert result.home_ts == 0.563
    assert result.away_ts is None


def test_duplicate_team_rows_last_occurrence_wins() -> None:
    snapshot = _snapshot(
        _team("Boston Celtics", 10, 0, 0),
        _team("Miami Heat"),
        _team("Boston Celtics", 90, 85, 10),
    )
    result = calculate_true_shooting(snapshot)
    assert result.home_ts == 0.503
    assert result.away_ts == 0.563


def test_empty_snapshot() -> None:
    result = calculate_true_shooting(StatisticsResponse())
    assert result.home_ts is None
    assert result.away_ts is None
    assert result.by_team == {}


def test_repeated_calls_same_metrics_later_timestamp() -> None:
    snapshot = _snapshot(_team("Boston Celtics"), _team("Miami Heat"))
    first = calculate_true_shooting(snapshot)
    second = calculate_true_shooting(snapshot)
    assert (first.home_ts, first.away_ts) == (second.home_ts, second.away_ts)
    assert datetime.fromisoformat(second.updated_at) >= datetime.fromisoformat(first.updated_at)
    assert datetime.fromisoformat(first.updated_at).tzinfo is not None


def test_denominator_weights_free_throws() -> None:
    assert shooting_denominator(80, 20) == pytest.approx(177.6)
    assert shooting_denominator(0, 0) == 0


def test_exact_ties_round_up() -> None:
    # 25 / 80 == 0.3125 exactly
    result = calculate_true_shooting(_snapshot(_team("Boston Celtics", 25, 40, 0), _team("Miami Heat")))
    assert result.home_ts == 0.313
    assert round_half_up(5 / 16) == 0.313
    assert round_half_up(0.5625) == 0.563
