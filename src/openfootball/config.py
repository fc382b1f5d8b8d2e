"""Centralized configuration for openfootball.

All paths, rating parameters, and settings in one place.
Environment variables can override defaults.

Path Constants:
    PROJECT_ROOT - Root directory of the project
    STORAGE_DIR - Storage for downloaded seasons and reports (overridable via OPENFOOTBALL_STORAGE_DIR)
    SEASONS_DIR - Downloaded openfootball text files
    REPORTS_DIR - CSV/JSON outputs written by the scripts

Rating Constants:
    DEFAULT_INITIAL_RATING - Starting Elo rating for every team
    DEFAULT_K - Sensitivity of the Elo rating
    DEFAULT_SCORE_FACTOR - Goal-difference weighting (0 disables it)

Parsing Constants:
    MONTH_ABBREVIATIONS - Map month abbreviations to month numbers
    SEASON_START_MONTH - First month that belongs to the header's base year
    DELIMITER_CHARS - Characters that make up decorative separator lines

Environment Variables:
    OPENFOOTBALL_STORAGE_DIR - Override storage directory
    OPENFOOTBALL_INITIAL_RATING - Override initial rating
    OPENFOOTBALL_K - Override K
    OPENFOOTBALL_SCORE_FACTOR - Override score factor
    OPENFOOTBALL_BASE_URL - Override the raw openfootball repository URL
"""

from __future__ import annotations

import os
from pathlib import Path

# Project root (src/openfootball/config.py -> openfootball -> src -> project_root)
PROJECT_ROOT = Path(__file__).parent.parent.parent
STORAGE_DIR = Path(os.environ.get("OPENFOOTBALL_STORAGE_DIR", str(PROJECT_ROOT / "storage")))
SEASONS_DIR = STORAGE_DIR / "seasons"
REPORTS_DIR = STORAGE_DIR / "reports"

# Elo parameters
DEFAULT_INITIAL_RATING = int(os.environ.get("OPENFOOTBALL_INITIAL_RATING", 1500))
DEFAULT_K = float(os.environ.get("OPENFOOTBALL_K", 32))
DEFAULT_SCORE_FACTOR = float(os.environ.get("OPENFOOTBALL_SCORE_FACTOR", 0.0))

# Logistic curve scale: a 400 point gap means 10:1 expected odds
ELO_SCALE = 400.0

# League table points
POINTS_FOR_WIN = 3
POINTS_FOR_DRAW = 1

# openfootball raw files
OPENFOOTBALL_BASE_URL = os.environ.get(
    "OPENFOOTBALL_BASE_URL",
    "https://raw.githubusercontent.com/openfootball/england/master",
)
DEFAULT_LEAGUE_FILE = "1-premierleague"

# Rate limiting for remote fetches
REQUEST_DELAY = 1.0
REQUEST_TIMEOUT = 30
MAX_RETRIES = 5

# Season calendar: Aug-Dec is the header year, Jan-Jul the year after
SEASON_START_MONTH = 8
MONTH_ABBREVIATIONS = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}

DELIMITER_CHARS = frozenset("-=#*_~|")
