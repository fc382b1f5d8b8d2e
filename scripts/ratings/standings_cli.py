#!/usr/bin/env python
"""Season standings - CLI wrapper for the Elo replay.

Replays an openfootball season file and writes one row per team per played
fixture: record, goals and Elo rating after that fixture.

Usage:
    PYTHONPATH=src python scripts/ratings/standings_cli.py 1-premierleague.txt
    PYTHONPATH=src python scripts/ratings/standings_cli.py 1-premierleague.txt -k 20 -s 0.1
    PYTHONPATH=src python scripts/ratings/standings_cli.py 1-premierleague.txt --table
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from openfootball.config import DEFAULT_INITIAL_RATING, DEFAULT_K, DEFAULT_SCORE_FACTOR
from openfootball.data import load_season, records_to_frame, records_to_json
from openfootball.exceptions import FetchError, ParseError
from openfootball.ratings import EloEngine, league_table


def main():
    parser = argparse.ArgumentParser(description="Replay a season into Elo standings")
    parser.add_argument("infile", help="openfootball text file (path or URL)")
    parser.add_argument("-k", type=float, default=DEFAULT_K, help="Sensitivity of the Elo rating")
    parser.add_argument(
        "-s", "--score-factor", type=float, default=DEFAULT_SCORE_FACTOR,
        help="Amount the goal difference influences the Elo rating (0 disables)",
    )
    parser.add_argument("--initial-rating", type=int, default=DEFAULT_INITIAL_RATING, help="Starting rating")
    parser.add_argument("--format", choices=["csv", "json"], default="csv", help="Output format")
    parser.add_argument("--table", action="store_true", help="Print the final league table instead")
    parser.add_argument("--output", type=Path, default=None, help="Write to file instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        season = load_season(args.infile)
    except (ParseError, FetchError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    engine = EloEngine(initial_rating=args.initial_rating, k=args.k, score_factor=args.score_factor)
    standings = engine.standings(season)

    if args.table:
        df = league_table(standings)
        text = df.to_json(orient="records", indent=2) if args.format == "json" else df.to_csv(index=False)
    elif args.format == "json":
        text = records_to_json(standings)
    else:
        text = records_to_frame(standings).to_csv(index=False)

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(text)
        print(f"Saved to {args.output}")
    else:
        sys.stdout.write(text)

    return 0


if __name__ == "__main__":
    sys.exit(main())
