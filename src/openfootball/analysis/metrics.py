"""Evaluation metrics for round odds.

Scores expected-score odds against the results that were actually played.
Outcomes are encoded from the home side: 1 for a home win, 0.5 for a
draw, 0 for an away win.

Key Classes:
    OddsMetrics - Brier score, log loss, favourite hit rate

Key Functions:
    outcome() - Home-side outcome for a played fixture
    evaluate_odds() - Score odds against the matching played fixtures

Metrics Explained:
    Brier: Mean squared error of the home expected score (lower is better)
    Log loss: Binary cross-entropy with draws as 0.5 (lower is better)
    Hit rate: Share of decisive results won by the favourite

Usage:
    from openfootball.analysis import evaluate_odds

    metrics = evaluate_odds(odds, season.fixtures)
    print(f"Brier: {metrics.brier:.3f}")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

import numpy as np

from openfootball.data.schemas import Fixture, Odds

EPSILON = 1e-12


@dataclass
class OddsMetrics:
    """Accuracy of a set of odds against played results."""

    brier: float
    log_loss: float
    hit_rate: float  # Favourite won, among decisive results with a favourite
    n_fixtures: int
    n_decisive: int

    def to_dict(self) -> dict:
        return {
            "brier": round(self.brier, 4),
            "log_loss": round(self.log_loss, 4),
            "hit_rate": f"{self.hit_rate:.1%}",
            "n_fixtures": self.n_fixtures,
            "n_decisive": self.n_decisive,
        }

    def __repr__(self) -> str:
        return (
            f"Brier: {self.brier:.3f}, LogLoss: {self.log_loss:.3f}, "
            f"Hit: {self.hit_rate:.1%} (n={self.n_fixtures})"
        )


def outcome(fixture: Fixture) -> float:
    """Home-side outcome of a played fixture."""
    if not fixture.played:
        raise ValueError(f"{fixture} has not been played")
    if fixture.home_goals > fixture.away_goals:
        return 1.0
    if fixture.home_goals < fixture.away_goals:
        return 0.0
    return 0.5


def evaluate_odds(odds: Iterable[Odds], fixtures: Iterable[Fixture]) -> OddsMetrics:
    """Score odds against played fixtures with the same round, home and away.

    Odds with no played counterpart are ignored. With nothing to score,
    every metric is NaN and the counts are zero.
    """
    results: Dict[Tuple[int, str, str], float] = {
        (f.round, f.home, f.away): outcome(f) for f in fixtures if f.played
    }

    predicted = []
    actual = []
    for o in odds:
        key = (o.round, o.home, o.away)
        if key in results:
            predicted.append(o.home_expected)
            actual.append(results[key])

    p = np.asarray(predicted, dtype=float)
    y = np.asarray(actual, dtype=float)
    if len(p) == 0:
        return OddsMetrics(brier=float("nan"), log_loss=float("nan"), hit_rate=float("nan"),
                           n_fixtures=0, n_decisive=0)

    brier = float(np.mean((p - y) ** 2))
    clipped = np.clip(p, EPSILON, 1 - EPSILON)
    log_loss = float(-np.mean(y * np.log(clipped) + (1 - y) * np.log(1 - clipped)))

    # Favourite hits: decisive results where the favourite was not an even split
    decisive = (y != 0.5) & (p != 0.5)
    n_decisive = int(decisive.sum())
    if n_decisive:
        hits = ((p > 0.5) == (y == 1.0)) & decisive
        hit_rate = float(hits.sum() / n_decisive)
    else:
        hit_rate = float("nan")

    return OddsMetrics(
        brier=brier,
        log_loss=log_loss,
        hit_rate=hit_rate,
        n_fixtures=len(p),
        n_decisive=n_decisive,
    )
