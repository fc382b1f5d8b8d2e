"""Tests for odds evaluation metrics."""

import datetime as dt
import math

import numpy as np
import pytest

from openfootball.analysis.metrics import evaluate_odds, outcome
from openfootball.data.schemas import Fixture, Odds

DAY = dt.date(2018, 9, 1)


def odds(home, away, p, round=1):
    return Odds(round=round, date=DAY, home=home, home_expected=p, away=away, away_expected=1 - p)


def result(home, away, hg, ag, round=1):
    return Fixture(round=round, date=DAY, home=home, away=away, home_goals=hg, away_goals=ag)


class TestOutcome:
    def test_outcomes(self):
        assert outcome(result("A", "B", 2, 0)) == 1.0
        assert outcome(result("A", "B", 1, 1)) == 0.5
        assert outcome(result("A", "B", 0, 1)) == 0.0

    def test_unplayed_raises(self):
        with pytest.raises(ValueError):
            outcome(Fixture(round=1, date=DAY, home="A", away="B"))


class TestEvaluateOdds:
    @pytest.fixture
    def scored(self):
        predictions = [odds("A", "B", 0.7), odds("C", "D", 0.5), odds("E", "F", 0.2)]
        fixtures = [result("A", "B", 1, 0), result("C", "D", 2, 2), result("E", "F", 3, 1)]
        return evaluate_odds(predictions, fixtures)

    def test_brier(self, scored):
        assert scored.brier == pytest.approx((0.09 + 0.0 + 0.64) / 3)

    def test_log_loss(self, scored):
        expected = -np.mean([
            math.log(0.7),
            0.5 * math.log(0.5) + 0.5 * math.log(0.5),
            math.log(0.2),
        ])
        assert scored.log_loss == pytest.approx(expected)

    def test_hit_rate_ignores_draws_and_even_odds(self, scored):
        assert scored.n_fixtures == 3
        assert scored.n_decisive == 2
        assert scored.hit_rate == pytest.approx(0.5)

    def test_unmatched_odds_are_ignored(self):
        metrics = evaluate_odds(
            [odds("A", "B", 0.6), odds("X", "Y", 0.9)],
            [result("A", "B", 1, 0), Fixture(round=1, date=DAY, home="X", away="Y")],
        )
        assert metrics.n_fixtures == 1

    def test_nothing_to_score(self):
        metrics = evaluate_odds([], [])
        assert metrics.n_fixtures == 0
        assert math.isnan(metrics.brier)

    def test_to_dict(self, scored):
        d = scored.to_dict()
        assert d["n_fixtures"] == 3
        assert d["hit_rate"] == "50.0%"
