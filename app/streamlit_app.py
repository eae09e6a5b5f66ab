"""Streamlit interface for GameSquares NBA."""

from __future__ import annotations

from datetime import datetime

import streamlit as st

from gamesquares.board.service import GameBoard
from gamesquares.config import get_settings
from gamesquares.data.http import FeedError
from gamesquares.squares.formatting import format_odds, format_score, format_true_shooting
from gamesquares.squares.types import GameSquare, TrueShootingResult

settings = get_settings()

st.set_page_config(page_title="NBA Live Game Squares", layout="wide", page_icon="🏀")


@st.cache_resource(show_spinner=False)
def load_board() -> GameBoard:
    return GameBoard()


def _local_time(value: datetime | str) -> str:
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    return value.astimezone().strftime("%H:%M:%S")


def render_header(board: GameBoard) -> None:
    col_title, col_meta = st.columns([0.8, 0.2])
    with col_title:
        st.title("NBA Live Game Squares")
        st.caption(
            "Pregame odds and live scores update automatically. "
            "Click a square to calculate true shooting at the moment of inquiry."
        )
    with col_meta:
        updated = _local_time(board.last_updated) if board.last_updated else "—"
        st.caption(f"Updated: {updated}")
        if st.button("Refresh now", use_container_width=True):
            board.refresh()


def render_square(board: GameBoard, square: GameSquare, result: TrueShootingResult | None) -> None:
    odds = square.pregame_odds
    with st.container(border=True):
        header = st.columns(2)
        header[0].markdown(f"`{square.status}`")
        header[1].markdown(f"**{format_score(square.score_home, square.score_away)}**")

        teams = st.columns(2)
        teams[0].subheader(square.away_team)
        teams[0].caption(f"Odds: {format_odds(odds.away if odds else None)}")
        teams[1].subheader(square.home_team)
        teams[1].caption(f"Odds: {format_odds(odds.home if odds else None)}")

        metrics = st.columns(2)
        metrics[0].metric("Away TS%", format_true_shooting(result.away_ts if result else None))
        metrics[1].metric("Home TS%", format_true_shooting(result.home_ts if result else None))

        footer = st.columns(2)
        footer[0].caption((odds.bookmaker if odds else None) or "No odds feed")
        footer[1].caption(f"TS updated {_local_time(result.updated_at)}" if result else "Click for TS")

        if st.button("Calculate TS", key=f"ts-{square.id}", use_container_width=True):
            try:
                board.compute_true_shooting(square.id)
            except FeedError as exc:
                st.error(str(exc))
            except KeyError:
                st.warning("This game is no longer live.")
            else:
                st.rerun()


def render_grid(board: GameBoard, columns: int = 3) -> None:
    squares = board.squares
    if board.error:
        st.error(board.error)
    if not board.loaded:
        st.info("Loading live games…")
        return
    if not squares:
        st.info("No live games available.")
        return
    results = board.true_shooting
    for start in range(0, len(squares), columns):
        row = st.columns(columns)
        for col, square in zip(row, squares[start : start + columns]):
            with col:
                render_square(board, square, results.get(square.id))


board = load_board()
if board.is_stale(settings.refresh_interval_seconds):
    with st.spinner("Loading live games…"):
        board.refresh()

render_header(board)
render_grid(board)
