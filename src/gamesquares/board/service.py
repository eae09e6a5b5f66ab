"""Holds the latest game squares and the true shooting computed for them."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone

from gamesquares.data.api_sports_client import ApiSportsClient
from gamesquares.data.http import FeedError
from gamesquares.data.odds_client import OddsApiClient
from gamesquares.squares.reconciler import merge_odds_with_live_games
from gamesquares.squares.true_shooting import calculate_true_shooting
from gamesquares.squares.types import GameSquare, TrueShootingResult

logger = logging.getLogger(__name__)


class GameBoard:
    """Refreshes squares from both feeds and caches per-square shooting results."""

    def __init__(
        self,
        odds_client: OddsApiClient | None = None,
        sports_client: ApiSportsClient | None = None,
    ) -> None:
        self.odds_client = odds_client or OddsApiClient()
        self.sports_client = sports_client or ApiSportsClient()
        self._lock = threading.Lock()
        self._squares: list[GameSquare] = []
        self._true_shooting: dict[str, TrueShootingResult] = {}
        self._error: str | None = None
        self._last_updated: datetime | None = None

    @property
    def squares(self) -> list[GameSquare]:
        with self._lock:
            return list(self._squares)

    @property
    def true_shooting(self) -> dict[str, TrueShootingResult]:
        with self._lock:
            return dict(self._true_shooting)

    @property
    def error(self) -> str | None:
        with self._lock:
            return self._error

    @property
    def last_updated(self) -> datetime | None:
        with self._lock:
            return self._last_updated

    @property
    def loaded(self) -> bool:
        with self._lock:
            return self._last_updated is not None or self._error is not None

    def is_stale(self, max_age_seconds: float) -> bool:
        last_updated = self.last_updated
        if last_updated is None:
            return True
        age = datetime.now(timezone.utc) - last_updated
        return age >= timedelta(seconds=max_age_seconds)

    def refresh(self) -> list[GameSquare]:
        """Fetch both feeds concurrently and replace every square.

        Results for games no longer in the live feed are dropped.
        Feed failures keep the previous squares and are recorded in ``error``.
        """

        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="gamesquares-feed") as pool:
            odds_future = pool.submit(self.odds_client.fetch_odds)
            live_future = pool.submit(self.sports_client.fetch_live_games)
        try:
            odds = odds_future.result()
            live = live_future.result()
        except FeedError as exc:
            logger.error("Refresh failed: %s", exc)
            with self._lock:
                self._error = str(exc)
                return list(self._squares)
        squares = merge_odds_with_live_games(odds, live)
        live_ids = {square.id for square in squares}
        with self._lock:
            self._squares = squares
            self._true_shooting = {
                game_id: result for game_id, result in self._true_shooting.items() if game_id in live_ids
            }
            self._error = None
            self._last_updated = datetime.now(timezone.utc)
        logger.info("Board refreshed with %d squares", len(squares))
        return list(squares)

    def get_square(self, game_id: str) -> GameSquare:
        with self._lock:
            for square in self._squares:
                if square.id == game_id:
                    return square
        raise KeyError(game_id)

    def compute_true_shooting(self, game_id: str) -> TrueShootingResult:
        """Fetch the box score for one square and store its true shooting."""

        square = self.get_square(game_id)
        stats = self.sports_client.fetch_game_stats(square.api_sports_id)
        result = calculate_true_shooting(stats, square.home_team, square.away_team)
        with self._lock:
            self._true_shooting[square.id] = result
        logger.info(
            "True shooting for game %s: home=%s away=%s",
            square.id,
            result.home_ts,
            result.away_ts,
        )
        return result
