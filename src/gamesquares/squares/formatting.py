"""Display helpers shared by the Streamlit grid and API consumers."""

from __future__ import annotations

PLACEHOLDER = "—"


def format_odds(value: int | float | None) -> str:
    if value is None:
        return PLACEHOLDER
    return f"+{value}" if value > 0 else f"{value}"


def format_score(home: int | None, away: int | None) -> str:
    """Away score first, matching the away-at-home card layout."""

    if home is None or away is None:
        return PLACEHOLDER
    return f"{away} - {home}"


def format_true_shooting(value: float | None) -> str:
    if value is None:
        return PLACEHOLDER
    return f"{value * 100:.1f}%"
