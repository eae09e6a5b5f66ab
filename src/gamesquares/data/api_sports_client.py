"""Client for the API-Sports basketball live games and statistics endpoints."""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from gamesquares.config import get_settings
from gamesquares.data.http import FeedClient, FeedError
from gamesquares.data.schemas import LiveGamesResponse, StatisticsResponse

logger = logging.getLogger(__name__)


class ApiSportsClient(FeedClient):
    """Convenient wrapper for the API-Sports basketball API."""

    feed_name = "API Sports"

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        league: Optional[str] = None,
        season: Optional[str] = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        settings = get_settings()
        self.api_key = settings.api_sports_key if api_key is None else api_key
        self.league = league or settings.api_sports_league
        self.season = season or settings.api_sports_season
        super().__init__(
            base_url or settings.api_sports_base_url,
            timeout=settings.http_timeout,
            http_client=http_client,
        )

    def _headers(self) -> dict[str, str]:
        return {"x-apisports-key": self.api_key}

    def fetch_live_games(self) -> LiveGamesResponse:
        """Return every live game for the configured league and season."""

        if not self.api_key:
            logger.warning("API_SPORTS_KEY is not configured; skipping live games fetch.")
            return LiveGamesResponse()
        params = {"league": self.league, "season": self.season, "live": "all"}
        payload = self._get_json("/games", params, self._headers())
        try:
            games = LiveGamesResponse.model_validate(payload)
        except ValidationError as exc:
            raise FeedError(f"{self.feed_name} error: unexpected payload") from exc
        logger.info("Fetched %d live games", len(games.response))
        return games

    def fetch_game_stats(self, game_id: int) -> StatisticsResponse:
        """Return the per-team box-score statistics for one game."""

        if not self.api_key:
            logger.warning("API_SPORTS_KEY is not configured; skipping stats fetch.")
            return StatisticsResponse()
        payload = self._get_json(
            "/statistics", {"game": str(game_id)}, self._headers(), label="API Sports stats"
        )
        try:
            return StatisticsResponse.model_validate(payload)
        except ValidationError as exc:
            raise FeedError(f"{self.feed_name} stats error: unexpected payload") from exc
