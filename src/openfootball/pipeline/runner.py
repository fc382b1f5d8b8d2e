"""Season ratings pipeline.

End-to-end pipeline that orchestrates:
1. Season gathering (path or URL)
2. Standings replay (EloEngine)
3. Round odds (OddsCalculator)
4. Walk-forward odds backtest (OddsBacktester)
5. Report saving

Usage:
    from openfootball.pipeline import Pipeline

    # Full pipeline
    Pipeline.run("1-premierleague.txt")

    # Or step by step
    pipeline = Pipeline("1-premierleague.txt", k=20)
    pipeline.gather()
    pipeline.compute_standings()
    pipeline.compute_odds(round_number=38)
    pipeline.save(REPORTS_DIR)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import pandas as pd

from openfootball.analysis import BacktestSummary, OddsBacktester
from openfootball.config import DEFAULT_INITIAL_RATING, DEFAULT_K, DEFAULT_SCORE_FACTOR, REPORTS_DIR
from openfootball.data.loader import load_season
from openfootball.data.schemas import Odds, Standing, records_to_frame
from openfootball.data.season import Season
from openfootball.ratings import EloEngine, OddsCalculator, league_table

logger = logging.getLogger(__name__)


class Pipeline:
    """End-to-end season ratings pipeline."""

    def __init__(
        self,
        source: Union[str, Path],
        initial_rating: int = DEFAULT_INITIAL_RATING,
        k: float = DEFAULT_K,
        score_factor: float = DEFAULT_SCORE_FACTOR,
        name: Optional[str] = None,
    ):
        self.source = source
        self.name = name
        self.engine = EloEngine(initial_rating=initial_rating, k=k, score_factor=score_factor)

        # State
        self.season: Optional[Season] = None
        self.standings: Optional[List[Standing]] = None
        self.odds: Dict[int, List[Odds]] = {}
        self.backtest: Optional[BacktestSummary] = None

    def gather(self) -> Season:
        """Step 1: Load and parse the season."""
        self.season = load_season(self.source, name=self.name)
        logger.info(f"Loaded {self.season.name}: {len(self.season)} fixtures, {len(self.season.teams())} teams")
        return self.season

    def compute_standings(self) -> pd.DataFrame:
        """Step 2: Replay the season into standings."""
        if self.season is None:
            raise ValueError("Call gather() first")
        self.standings = self.engine.standings(self.season)
        return records_to_frame(self.standings)

    def compute_odds(self, round_number: Optional[int] = None) -> pd.DataFrame:
        """Step 3: Odds for a round (default: first round with an unplayed fixture, else the last)."""
        if self.season is None:
            raise ValueError("Call gather() first")
        if round_number is None:
            round_number = self.next_round()
        odds = OddsCalculator(self.engine).odds(self.season, round_number)
        self.odds[round_number] = odds
        return records_to_frame(odds)

    def run_backtest(self) -> BacktestSummary:
        """Step 4: Walk-forward odds backtest."""
        if self.season is None:
            raise ValueError("Call gather() first")
        self.backtest = OddsBacktester(self.engine).run(self.season)
        return self.backtest

    def next_round(self) -> int:
        """First round with an unplayed fixture, or the last round if all are played."""
        if self.season is None:
            raise ValueError("Call gather() first")
        unplayed = [f.round for f in self.season.fixtures if not f.played]
        if unplayed:
            return min(unplayed)
        rounds = self.season.rounds()
        if not rounds:
            raise ValueError(f"Season {self.season.name!r} has no fixtures")
        return rounds[-1]

    def save(self, output_dir: Path = REPORTS_DIR) -> Path:
        """Step 5: Write fixtures, standings, table, odds and backtest report."""
        if self.season is None or self.standings is None:
            raise ValueError("Call gather() and compute_standings() first")

        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        self.season.to_frame().to_csv(output_dir / "fixtures.csv", index=False)
        records_to_frame(self.standings).to_csv(output_dir / "standings.csv", index=False)
        league_table(self.standings).to_csv(output_dir / "table.csv", index=False)
        for round_number, odds in self.odds.items():
            records_to_frame(odds).to_csv(output_dir / f"round{round_number}_odds.csv", index=False)

        if self.backtest is not None:
            report = {
                "season": self.season.name,
                "engine": self.backtest.engine,
                "n_rounds": self.backtest.n_rounds,
                "overall": self.backtest.overall.to_dict(),
            }
            with open(output_dir / "backtest.json", "w") as f:
                json.dump(report, f, indent=2)

        logger.info(f"Reports saved to {output_dir}")
        return output_dir

    @classmethod
    def run(cls, source: Union[str, Path], output_dir: Path = REPORTS_DIR, **params) -> "Pipeline":
        """Run full pipeline end-to-end.

        Args:
            source: Season file path or URL
            output_dir: Directory for reports
            **params: initial_rating, k, score_factor, name
        """
        pipeline = cls(source, **params)
        pipeline.gather()
        pipeline.compute_standings()
        pipeline.compute_odds()
        pipeline.run_backtest()
        pipeline.save(output_dir)
        logger.info("Pipeline complete")
        return pipeline
