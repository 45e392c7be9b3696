"""Centralised settings for the crawler.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from the package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Retrieval
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "USER_AGENT", "Mozilla/5.0 (compatible; crawler/0.1)"
        )
    )

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------
    start_url: str = field(
        default_factory=lambda: os.environ.get("START_URL", "http://golang.org/")
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "WARNING").upper()
    )


# Module-level singleton, import this everywhere:
#   from crawler.config import settings
settings = Settings()
