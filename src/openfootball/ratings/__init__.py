"""Ratings module - Elo replay, odds, and league tables.

This module contains:
- elo: EloEngine replay, expected/actual score, rounding convention
- odds: OddsCalculator for a target round
- table: League table and rating history views over standings
"""

from openfootball.ratings.elo import (
    EloEngine,
    TeamAccumulator,
    actual_score,
    expected_score,
    round_half_away_from_zero,
)
from openfootball.ratings.odds import OddsCalculator, odds_for_fixture
from openfootball.ratings.table import latest_standings, league_table, rating_history

__all__ = [
    "EloEngine",
    "TeamAccumulator",
    "actual_score",
    "expected_score",
    "round_half_away_from_zero",
    "OddsCalculator",
    "odds_for_fixture",
    "latest_standings",
    "league_table",
    "rating_history",
]
