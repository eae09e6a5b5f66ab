"""Scheduled refresh of the game board."""

from __future__ import annotations

import logging
from datetime import datetime

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.schedulers.base import BaseScheduler
from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.interval import IntervalTrigger

from gamesquares.board.service import GameBoard
from gamesquares.config import get_settings

logger = logging.getLogger(__name__)

REFRESH_JOB_ID = "board_refresh"


def refresh_job(board: GameBoard) -> None:
    squares = board.refresh()
    if board.error:
        logger.warning("Board refresh kept %d stale squares: %s", len(squares), board.error)


def schedule_refresh(
    scheduler: BaseScheduler,
    board: GameBoard,
    interval_seconds: float,
) -> BaseScheduler:
    """Register the board refresh on ``scheduler``, first run immediately."""

    scheduler.add_job(
        refresh_job,
        trigger=IntervalTrigger(seconds=interval_seconds),
        args=(board,),
        id=REFRESH_JOB_ID,
        name="Refresh live game squares",
        next_run_time=datetime.now(),
        coalesce=True,
        max_instances=1,
        replace_existing=True,
    )
    logger.info("Scheduled: board refresh (every %ss)", interval_seconds)
    return scheduler


def start_background_refresh(board: GameBoard, interval_seconds: float) -> BackgroundScheduler:
    scheduler = BackgroundScheduler(job_defaults={"misfire_grace_time": max(1, int(interval_seconds))})
    schedule_refresh(scheduler, board, interval_seconds)
    scheduler.start()
    return scheduler


def main() -> None:  # pragma: no cover - CLI convenience
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    scheduler = BlockingScheduler()
    schedule_refresh(scheduler, GameBoard(), settings.refresh_interval_seconds)
    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        logger.info("Refresh scheduler stopped")


if __name__ == "__main__":  # pragma: no cover
    main()
