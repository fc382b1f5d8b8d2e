"""Walk-forward odds backtest.

For each round t after the first, ratings are replayed from rounds 1..t-1
only, odds are computed for round t, and they are scored against round t's
played results. Nothing from round t leaks into its own odds.

Every round is an independent replay with its own accumulators, so rounds
could be evaluated in any order; they are run in ascending order for
readable output.

Usage:
    from openfootball.analysis import OddsBacktester

    summary = OddsBacktester(EloEngine(k=20)).run(season)
    print(summary.summary())
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import pandas as pd

from openfootball.analysis.metrics import OddsMetrics, evaluate_odds
from openfootball.data.schemas import Odds
from openfootball.data.season import Season
from openfootball.ratings.elo import EloEngine
from openfootball.ratings.odds import OddsCalculator

logger = logging.getLogger(__name__)


@dataclass
class RoundResult:
    """Odds quality for a single round."""

    round: int
    metrics: OddsMetrics
    odds: List[Odds] = field(default_factory=list)


@dataclass
class BacktestSummary:
    """Summary of the walk-forward backtest across all scored rounds."""

    engine: str
    n_rounds: int
    overall: OddsMetrics
    round_results: List[RoundResult] = field(default_factory=list)

    def summary(self) -> str:
        """Human-readable summary."""
        lines = [
            f"\n{'=' * 50}",
            "ODDS BACKTEST (walk-forward)",
            f"{'=' * 50}",
            f"Engine: {self.engine}",
            f"Rounds scored: {self.n_rounds}",
            f"Fixtures scored: {self.overall.n_fixtures}",
            "",
            f"Brier score: {self.overall.brier:.4f}",
            f"Log loss:    {self.overall.log_loss:.4f}",
            f"Favourite hit rate: {self.overall.hit_rate:.1%} "
            f"({self.overall.n_decisive} decisive results)",
            f"{'=' * 50}",
        ]
        return "\n".join(lines)

    def to_frame(self) -> pd.DataFrame:
        """One row per scored round."""
        return pd.DataFrame([
            {"round": r.round, **vars(r.metrics)}
            for r in self.round_results
        ])


class OddsBacktester:
    """Scores round odds against results, one round at a time."""

    def __init__(self, engine: Optional[EloEngine] = None):
        self.engine = engine or EloEngine()
        self.calculator = OddsCalculator(self.engine)

    def run(self, season: Season, min_round: Optional[int] = None) -> BacktestSummary:
        """Run the backtest.

        Args:
            season: Season to evaluate
            min_round: First round to score; defaults to the second round
                present in the season

        Returns:
            BacktestSummary with per-round and pooled metrics.
        """
        rounds = season.rounds()
        if min_round is None:
            min_round = rounds[1] if len(rounds) > 1 else (rounds[0] + 1 if rounds else 0)

        all_odds: List[Odds] = []
        results: List[RoundResult] = []
        for round_number in rounds:
            if round_number < min_round:
                continue
            odds = self.calculator.odds(season, round_number)
            metrics = evaluate_odds(odds, season.fixtures_in_round(round_number))
            if metrics.n_fixtures == 0:
                logger.info(f"Round {round_number}: no played fixtures, skipping")
                continue
            results.append(RoundResult(round=round_number, metrics=metrics, odds=odds))
            all_odds.extend(odds)

        overall = evaluate_odds(all_odds, season.fixtures)
        logger.info(f"Backtest over {len(results)} rounds: {overall!r}")
        return BacktestSummary(
            engine=repr(self.engine),
            n_rounds=len(results),
            overall=overall,
            round_results=results,
        )
