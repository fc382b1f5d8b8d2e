"""
openfootball - Elo ratings and odds from openfootball season files

Parses the plain-text season format published by openfootball
(https://github.com/openfootball/england) and replays it into per-team
standings with an Elo rating, plus win-probability odds for any round.

Structure:
    data/      - Line parsing, season assembly, schemas, remote source
    ratings/   - Elo replay engine, odds calculator, league table
    analysis/  - Odds quality metrics and walk-forward backtest
    pipeline/  - End-to-end workflow

Usage:
    from openfootball import Season, EloEngine, OddsCalculator

    season = Season.from_path("1-premierleague.txt")
    standings = EloEngine(k=32).standings(season)
"""

from openfootball.data.season import Season
from openfootball.ratings.elo import EloEngine
from openfootball.ratings.odds import OddsCalculator

__all__ = ["__version__", "Season", "EloEngine", "OddsCalculator"]
__version__ = "0.1.0"
