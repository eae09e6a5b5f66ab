"""Thin client for The Odds API NBA moneyline feed."""

from __future__ import annotations

import logging
from typing import List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from gamesquares.config import get_settings
from gamesquares.data.http import FeedClient, FeedError
from gamesquares.data.schemas import OddsEvent

logger = logging.getLogger(__name__)

MONEYLINE_MARKET = "h2h"

_events_adapter = TypeAdapter(List[OddsEvent])


class OddsApiClient(FeedClient):
    """Fetch pregame head-to-head odds for NBA matchups."""

    feed_name = "Odds API"

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        regions: Optional[str] = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        settings = get_settings()
        self.api_key = settings.odds_api_key if api_key is None else api_key
        self.regions = regions or settings.odds_regions
        super().__init__(
            base_url or settings.odds_api_base_url,
            timeout=settings.http_timeout,
            http_client=http_client,
        )

    def fetch_odds(self) -> list[OddsEvent]:
        """Return current moneyline quotes; empty when no key is configured."""

        if not self.api_key:
            logger.warning("ODDS_API_KEY is not configured; skipping odds fetch.")
            return []
        params = {
            "regions": self.regions,
            "markets": MONEYLINE_MARKET,
            "oddsFormat": "american",
            "dateFormat": "iso",
            "apiKey": self.api_key,
        }
        payload = self._get_json(params=params)
        try:
            events = _events_adapter.validate_python(payload)
        except ValidationError as exc:
            raise FeedError(f"{self.feed_name} error: unexpected payload") from exc
        logger.info("Fetched odds for %d matchups", len(events))
        return events
