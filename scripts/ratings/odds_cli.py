#!/usr/bin/env python
"""Round odds - CLI wrapper for the odds calculator.

Ratings are replayed from every round before the requested one, then each
fixture in the round gets its home/away expected score.

Usage:
    PYTHONPATH=src python scripts/ratings/odds_cli.py 1-premierleague.txt --round 38
    PYTHONPATH=src python scripts/ratings/odds_cli.py 1-premierleague.txt  # next unplayed round
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from openfootball.config import DEFAULT_INITIAL_RATING, DEFAULT_K, DEFAULT_SCORE_FACTOR
from openfootball.data import records_to_json
from openfootball.exceptions import FetchError, ParseError
from openfootball.pipeline import Pipeline


def main():
    parser = argparse.ArgumentParser(description="Compute Elo odds for a round")
    parser.add_argument("infile", help="openfootball text file (path or URL)")
    parser.add_argument("--round", type=int, default=None, help="Target round (default: next unplayed round)")
    parser.add_argument("-k", type=float, default=DEFAULT_K, help="Sensitivity of the Elo rating")
    parser.add_argument(
        "-s", "--score-factor", type=float, default=DEFAULT_SCORE_FACTOR,
        help="Amount the goal difference influences the Elo rating (0 disables)",
    )
    parser.add_argument("--initial-rating", type=int, default=DEFAULT_INITIAL_RATING, help="Starting rating")
    parser.add_argument("--format", choices=["csv", "json", "text"], default="text", help="Output format")
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING, format="%(asctime)s - %(levelname)s - %(message)s")

    pipeline = Pipeline(
        args.infile,
        initial_rating=args.initial_rating,
        k=args.k,
        score_factor=args.score_factor,
    )
    try:
        pipeline.gather()
        target_round = args.round if args.round is not None else pipeline.next_round()
        df = pipeline.compute_odds(target_round)
    except (ParseError, FetchError, OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if df.empty:
        print(f"ERROR: no fixtures in round {target_round}", file=sys.stderr)
        return 1

    if args.format == "csv":
        sys.stdout.write(df.to_csv(index=False))
        return 0
    if args.format == "json":
        sys.stdout.write(records_to_json(pipeline.odds[target_round]))
        return 0

    print("\n" + "=" * 70)
    print(f"{pipeline.season.name} - ROUND {target_round} ODDS")
    print(f"Engine: {pipeline.engine!r}")
    print("=" * 70)
    for row in df.itertuples(index=False):
        print(f"{row.home:>26} {row.home_expected:6.1%}  v  {row.away_expected:6.1%} {row.away}")
    print("=" * 70 + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
