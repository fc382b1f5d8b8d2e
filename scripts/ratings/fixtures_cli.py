#!/usr/bin/env python
"""Fixture listing - parse a season file and dump its fixtures.

Usage:
    PYTHONPATH=src python scripts/ratings/fixtures_cli.py 1-premierleague.txt
    PYTHONPATH=src python scripts/ratings/fixtures_cli.py 1-premierleague.txt --unplayed
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from openfootball.data import load_season, records_to_frame, records_to_json
from openfootball.exceptions import FetchError, ParseError


def main():
    parser = argparse.ArgumentParser(description="List the fixtures in a season file")
    parser.add_argument("infile", help="openfootball text file (path or URL)")
    parser.add_argument("--unplayed", action="store_true", help="Only fixtures without a score")
    parser.add_argument("--format", choices=["csv", "json"], default="csv", help="Output format")
    args = parser.parse_args()

    try:
        season = load_season(args.infile)
    except (ParseError, FetchError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    fixtures = [f for f in season.fixtures if not f.played] if args.unplayed else list(season.fixtures)
    if args.format == "json":
        sys.stdout.write(records_to_json(fixtures))
    else:
        sys.stdout.write(records_to_frame(fixtures).to_csv(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
