#!/usr/bin/env python3
"""Run the full season pipeline and save reports.

Usage:
    PYTHONPATH=src python scripts/ops/run_pipeline.py storage/seasons/2018-19/1-premierleague.txt
    PYTHONPATH=src python scripts/ops/run_pipeline.py <file> -k 20 --out-dir storage/reports/k20
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from openfootball.config import DEFAULT_INITIAL_RATING, DEFAULT_K, DEFAULT_SCORE_FACTOR, REPORTS_DIR
from openfootball.exceptions import FetchError, ParseError
from openfootball.pipeline import Pipeline


def main():
    parser = argparse.ArgumentParser(description="Parse, replay, price and backtest a season")
    parser.add_argument("infile", help="openfootball text file (path or URL)")
    parser.add_argument("-k", type=float, default=DEFAULT_K)
    parser.add_argument("-s", "--score-factor", type=float, default=DEFAULT_SCORE_FACTOR)
    parser.add_argument("--initial-rating", type=int, default=DEFAULT_INITIAL_RATING)
    parser.add_argument("--out-dir", type=Path, default=REPORTS_DIR)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")

    try:
        pipeline = Pipeline.run(
            args.infile,
            output_dir=args.out_dir,
            initial_rating=args.initial_rating,
            k=args.k,
            score_factor=args.score_factor,
        )
    except (ParseError, FetchError, OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(pipeline.backtest.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
