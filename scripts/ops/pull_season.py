#!/usr/bin/env python3
"""openfootball season puller.

Downloads a raw season text file from the openfootball repositories,
checks that it parses, and saves it under the seasons storage directory.

Usage:
    python scripts/ops/pull_season.py                          # 2018-19 Premier League
    python scripts/ops/pull_season.py --season 2019-20
    python scripts/ops/pull_season.py --season 2018-19 --league 2-championship

Environment:
    OPENFOOTBALL_STORAGE_DIR: Storage directory (default: storage/)
    OPENFOOTBALL_BASE_URL: Raw repository URL
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add src to path if running as script
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from openfootball.config import DEFAULT_LEAGUE_FILE, SEASONS_DIR
from openfootball.data import OpenFootballClient, Season
from openfootball.exceptions import FetchError, ParseError

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def main():
    """Pull one season file from openfootball."""
    parser = argparse.ArgumentParser(description="Download an openfootball season file")
    parser.add_argument("--season", default="2018-19", help="Season folder, e.g. 2018-19")
    parser.add_argument("--league", default=DEFAULT_LEAGUE_FILE, help="League file stem")
    parser.add_argument("--out-dir", type=Path, default=SEASONS_DIR, help="Destination directory")
    args = parser.parse_args()

    client = OpenFootballClient()
    try:
        text = client.get_season_text(args.season, args.league)
        season = Season.from_text(text)
    except (FetchError, ParseError) as e:
        logger.error(str(e))
        return 1

    out_path = args.out_dir / args.season / f"{args.league}.txt"
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text, encoding="utf-8")
    logger.info(f"Saved {season.name} ({len(season)} fixtures) to {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
