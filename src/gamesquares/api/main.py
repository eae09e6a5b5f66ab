"""CLI entrypoint to run the GameSquares FastAPI server."""

from __future__ import annotations

import logging
import os

import uvicorn

from gamesquares.config import get_settings


def main() -> None:
    logging.basicConfig(level=get_settings().log_level)
    port = int(os.getenv("PORT", "8000"))
    uvicorn.run("gamesquares.api.server:app", host="0.0.0.0", port=port, reload=False)


if __name__ == "__main__":  # pragma: no cover
    main()
