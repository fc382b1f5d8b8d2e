"""HTTP client for openfootball's raw season files.

Handles fetching season text from the openfootball GitHub repositories:
- Retry logic with exponential backoff
- Adaptive delay on rate limiting (HTTP 429)
- In-memory caching per URL

Key Classes:
    OpenFootballClient - HTTP client for raw season text

Usage:
    from openfootball.data.api_client import OpenFootballClient

    client = OpenFootballClient()
    text = client.get_season_text("2018-19", "1-premierleague")
"""

from __future__ import annotations

import logging
import random
import time
from typing import Dict, Optional

import requests

from openfootball.config import (
    DEFAULT_LEAGUE_FILE,
    MAX_RETRIES,
    OPENFOOTBALL_BASE_URL,
    REQUEST_DELAY,
    REQUEST_TIMEOUT,
)
from openfootball.exceptions import FetchError

logger = logging.getLogger(__name__)

MAX_DELAY = 60  # Maximum backoff delay in seconds
RATE_LIMIT_STATUS = 429  # HTTP "Too Many Requests"


def season_url(season: str, league: str = DEFAULT_LEAGUE_FILE, base_url: str = OPENFOOTBALL_BASE_URL) -> str:
    """Build the raw file URL, e.g. ``.../2018-19/1-premierleague.txt``."""
    return f"{base_url.rstrip('/')}/{season}/{league}.txt"


class OpenFootballClient:
    """HTTP client for openfootball raw text with retries and caching."""

    def __init__(self, base_url: str = OPENFOOTBALL_BASE_URL, request_delay: float = REQUEST_DELAY):
        self.base_url = base_url
        self.request_delay = request_delay
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": "openfootball-elo/0.1"})
        self._cache: Dict[str, str] = {}
        self._current_delay = request_delay

    def _get(self, url: str, retries: int = MAX_RETRIES) -> Optional[str]:
        """GET with retry logic and adaptive rate limiting. Returns None on failure."""
        for attempt in range(retries):
            try:
                if self._current_delay > 0:
                    jitter = random.uniform(0, 0.3 * self._current_delay)
                    time.sleep(self._current_delay + jitter)

                resp = self.session.get(url, timeout=REQUEST_TIMEOUT)

                if resp.status_code == RATE_LIMIT_STATUS:
                    retry_after = int(resp.headers.get("Retry-After", 30))
                    self._current_delay = min(max(self._current_delay, 1.0) * 2, MAX_DELAY)
                    logger.warning(
                        f"Rate limited (429). Waiting {retry_after}s. "
                        f"Delay now: {self._current_delay}s"
                    )
                    time.sleep(retry_after)
                    continue

                resp.raise_for_status()

                # Success - gradually reduce delay back to base
                self._current_delay = max(self.request_delay, self._current_delay * 0.9)
                return resp.text

            except requests.RequestException as e:
                wait_time = min(2 ** attempt + random.uniform(0, 1), MAX_DELAY)
                logger.warning(
                    f"Request failed (attempt {attempt + 1}/{retries}): {e}. "
                    f"Retrying in {wait_time:.1f}s"
                )
                if attempt < retries - 1:
                    time.sleep(wait_time)

        logger.error(f"All {retries} attempts failed for {url}")
        return None

    def get_text(self, url: str, force: bool = False) -> str:
        """Fetch raw text from ``url`` (cached).

        Args:
            url: Full URL of a season text file
            force: If True, bypass cache and fetch fresh text.

        Raises:
            FetchError: If the text cannot be fetched.
        """
        if url not in self._cache or force:
            logger.info(f"Fetching {url}...")
            text = self._get(url)
            if text is None:
                raise FetchError(f"Failed to fetch season text from {url}")
            self._cache[url] = text
        return self._cache[url]

    def get_season_text(self, season: str, league: str = DEFAULT_LEAGUE_FILE, force: bool = False) -> str:
        """Fetch a season file by season folder (``2018-19``) and league file stem."""
        return self.get_text(season_url(season, league, self.base_url), force=force)
