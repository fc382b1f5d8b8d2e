#!/usr/bin/env python3
"""Walk-Forward Odds Backtest.

Scores each round's Elo odds, computed only from earlier rounds, against
the results that were played. Optionally sweeps several K values.

Question answered: How well do pre-round ratings anticipate results?
Metrics: Brier score, log loss, favourite hit rate

Usage:
    PYTHONPATH=src python scripts/backtests/odds_backtest.py 1-premierleague.txt
    PYTHONPATH=src python scripts/backtests/odds_backtest.py 1-premierleague.txt --k 10 20 32 40
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

import pandas as pd

from openfootball.analysis import OddsBacktester
from openfootball.config import DEFAULT_INITIAL_RATING, DEFAULT_K, DEFAULT_SCORE_FACTOR
from openfootball.data import load_season
from openfootball.exceptions import FetchError, ParseError
from openfootball.ratings import EloEngine


def main():
    parser = argparse.ArgumentParser(description="Walk-forward backtest of Elo round odds")
    parser.add_argument("infile", help="openfootball text file (path or URL)")
    parser.add_argument("--k", type=float, nargs="+", default=[DEFAULT_K], help="One or more K values")
    parser.add_argument("-s", "--score-factor", type=float, default=DEFAULT_SCORE_FACTOR)
    parser.add_argument("--initial-rating", type=int, default=DEFAULT_INITIAL_RATING)
    args = parser.parse_args()

    print("Loading season...")
    try:
        season = load_season(args.infile)
    except (ParseError, FetchError, OSError) as e:
        print(f"ERROR: {e}")
        return 1
    print(f"Loaded {season.name}: {len(season.played())} played fixtures")

    rows = []
    for k in args.k:
        engine = EloEngine(initial_rating=args.initial_rating, k=k, score_factor=args.score_factor)
        summary = OddsBacktester(engine).run(season)
        print(summary.summary())
        rows.append({"k": k, **summary.overall.to_dict()})

    if len(rows) > 1:
        print("\nK SWEEP")
        print("-" * 60)
        print(pd.DataFrame(rows).to_string(index=False))

    return 0


if __name__ == "__main__":
    sys.exit(main())
