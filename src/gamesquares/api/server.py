"""FastAPI backend for GameSquares NBA."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import Annotated, Any

from fastapi import Depends, FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware

from gamesquares import __version__
from gamesquares.api.schemas import BoardResponse, GameSquareResponse, TrueShootingResponse
from gamesquares.board.service import GameBoard
from gamesquares.config import get_settings
from gamesquares.data.http import FeedError
from gamesquares.scheduling.jobs import start_background_refresh

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_board() -> GameBoard:
    return GameBoard()


@asynccontextmanager
async def lifespan(_: FastAPI):
    settings = get_settings()
    scheduler = None
    if settings.background_refresh:
        scheduler = start_background_refresh(get_board(), settings.refresh_interval_seconds)
    yield
    if scheduler is not None:
        scheduler.shutdown(wait=False)


app = FastAPI(
    title="GameSquares NBA API",
    version=__version__,
    description="Live NBA scores merged with pregame moneyline odds, plus on-demand true shooting.",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

BoardDep = Annotated[GameBoard, Depends(get_board)]


def _board_response(board: GameBoard) -> BoardResponse:
    results = board.true_shooting
    return BoardResponse(
        games=[GameSquareResponse.from_square(square, results.get(square.id)) for square in board.squares],
        error=board.error,
        last_updated=board.last_updated,
    )


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
def version() -> dict[str, Any]:
    return {"name": "gamesquares-nba", "version": __version__}


@app.get("/games", response_model=BoardResponse)
def list_games(board: BoardDep) -> BoardResponse:
    return _board_response(board)


@app.post("/refresh", response_model=BoardResponse)
def refresh(board: BoardDep) -> BoardResponse:
    board.refresh()
    return _board_response(board)


@app.post("/games/{game_id}/true-shooting", response_model=TrueShootingResponse)
def compute_true_shooting(game_id: str, board: BoardDep) -> TrueShootingResponse:
    try:
        result = board.compute_true_shooting(game_id)
    except KeyError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown game: {game_id}") from exc
    except FeedError as exc:
        logger.error("True shooting failed for game %s: %s", game_id, exc)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Unable to load statistics.") from exc
    return TrueShootingResponse.from_result(result)
