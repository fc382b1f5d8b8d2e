"""Elo rating replay over a season.

ELO is updated after every played fixture:
    rating_new = round(rating_old + K × (score_actual - score_expected))

where:
    score_expected = 1 / (1 + 10^((rating_opponent - rating_team) / 400))
    score_actual   = 1 (win), 0.5 (draw), 0 (loss)
                     + score_factor × (goals_for - goals_against)

The score factor is off (0) by default, giving plain Elo. Win/draw/loss
and goal counters always use the raw score; the factor only moves ratings.

Rounding is half away from zero (1516.5 -> 1517, -0.5 -> -1), so replays
reproduce exactly across platforms. Python's round() is half-to-even and is
not used for ratings.

The replay is order dependent. Both pre-game ratings are read before either
team is updated, so neither side's expected score sees the other's new rating.

Key Classes:
    TeamAccumulator - Per-team running totals, private to one replay
    EloEngine - Replays a season into Standing snapshots and frozen ratings

Usage:
    from openfootball.ratings.elo import EloEngine

    engine = EloEngine(initial_rating=1500, k=32)
    standings = engine.standings(season)
    ratings = engine.ratings(season, before_round=10)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from openfootball.config import DEFAULT_INITIAL_RATING, DEFAULT_K, DEFAULT_SCORE_FACTOR, ELO_SCALE
from openfootball.data.schemas import Fixture, Standing
from openfootball.data.season import Season
from openfootball.exceptions import MissingTeamError


def expected_score(rating: float, opponent_rating: float) -> float:
    """Logistic expected score for a team against an opponent."""
    return 1.0 / (1.0 + 10.0 ** ((opponent_rating - rating) / ELO_SCALE))


def actual_score(goals_for: int, goals_against: int, score_factor: float = 0.0) -> float:
    """Outcome score for one side: 1/0.5/0, shifted by the weighted goal difference."""
    if goals_for > goals_against:
        base = 1.0
    elif goals_for < goals_against:
        base = 0.0
    else:
        base = 0.5
    return base + score_factor * (goals_for - goals_against)


def round_half_away_from_zero(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass
class TeamAccumulator:
    """Running record for one team during a single replay."""

    rating: int
    wins: int = 0
    draws: int = 0
    losses: int = 0
    goals_for: int = 0
    goals_against: int = 0

    def record(self, goals_for: int, goals_against: int, new_rating: int) -> None:
        if goals_for > goals_against:
            self.wins += 1
        elif goals_for < goals_against:
            self.losses += 1
        else:
            self.draws += 1
        self.goals_for += goals_for
        self.goals_against += goals_against
        self.rating = new_rating

    def snapshot(self, team: str, fixture: Fixture) -> Standing:
        return Standing(
            team=team,
            date=fixture.date,
            round=fixture.round,
            wins=self.wins,
            draws=self.draws,
            losses=self.losses,
            goals_for=self.goals_for,
            goals_against=self.goals_against,
            rating=self.rating,
        )


class EloEngine:
    """Replays fixtures in order, maintaining one accumulator per team."""

    def __init__(
        self,
        initial_rating: int = DEFAULT_INITIAL_RATING,
        k: float = DEFAULT_K,
        score_factor: float = DEFAULT_SCORE_FACTOR,
        baseline: Optional[Mapping[str, int]] = None,
    ):
        """Initialize engine.

        Args:
            initial_rating: Starting rating for every team not in ``baseline``
            k: Sensitivity of the rating to each result
            score_factor: Goal-difference weighting; 0 disables it
            baseline: Optional per-team starting ratings (e.g. carried over
                from a previous season)
        """
        self.initial_rating = int(initial_rating)
        self.k = float(k)
        self.score_factor = float(score_factor)
        self.baseline = dict(baseline or {})

    def __repr__(self) -> str:
        return (
            f"EloEngine(initial_rating={self.initial_rating}, k={self.k}, "
            f"score_factor={self.score_factor})"
        )

    # -------------------------------------------------------------------------
    # Replay
    # -------------------------------------------------------------------------

    def new_accumulators(self, teams: Iterable[str]) -> Dict[str, TeamAccumulator]:
        """Fresh accumulators for ``teams``, owned by the caller's replay."""
        return {
            team: TeamAccumulator(rating=int(self.baseline.get(team, self.initial_rating)))
            for team in teams
        }

    def replay(
        self,
        fixtures: Iterable[Fixture],
        accumulators: Dict[str, TeamAccumulator],
    ) -> Iterator[Tuple[Fixture, Standing, Standing]]:
        """Apply played fixtures in order, yielding post-update snapshots.

        Unplayed fixtures are skipped without touching any accumulator.

        Yields:
            (fixture, home_standing, away_standing) per played fixture.

        Raises:
            MissingTeamError: A fixture names a team with no accumulator.
        """
        for fixture in fixtures:
            if not fixture.played:
                continue

            home = _lookup(accumulators, fixture.home)
            away = _lookup(accumulators, fixture.away)

            # Read both ratings before mutating either side
            home_rating = home.rating
            away_rating = away.rating
            home_expected = expected_score(home_rating, away_rating)
            away_expected = 1.0 - home_expected

            home_new = self._updated_rating(
                home_rating, home_expected, fixture.home_goals, fixture.away_goals
            )
            away_new = self._updated_rating(
                away_rating, away_expected, fixture.away_goals, fixture.home_goals
            )

            home.record(fixture.home_goals, fixture.away_goals, home_new)
            away.record(fixture.away_goals, fixture.home_goals, away_new)

            yield fixture, home.snapshot(fixture.home, fixture), away.snapshot(fixture.away, fixture)

    def _updated_rating(self, rating: int, expected: float, goals_for: int, goals_against: int) -> int:
        actual = actual_score(goals_for, goals_against, self.score_factor)
        return round_half_away_from_zero(rating + self.k * (actual - expected))

    # -------------------------------------------------------------------------
    # Season-level entry points
    # -------------------------------------------------------------------------

    def standings(self, season: Season) -> List[Standing]:
        """Full replay of ``season``.

        Returns:
            Two standings per played fixture (home, then away), fixtures in
            season order. No grouping or sorting is applied.
        """
        accumulators = self.new_accumulators(season.teams())
        standings: List[Standing] = []
        for _, home_standing, away_standing in self.replay(season.fixtures, accumulators):
            standings.append(home_standing)
            standings.append(away_standing)
        return standings

    def ratings(self, season: Season, before_round: Optional[int] = None) -> Dict[str, int]:
        """Ratings after replaying fixtures strictly before ``before_round``.

        Args:
            season: Season to replay
            before_round: Only rounds below this are replayed; None replays all

        Returns:
            Mapping of team name to rating, for every team in the season.
        """
        accumulators = self.new_accumulators(season.teams())
        fixtures = season.fixtures
        if before_round is not None:
            fixtures = [f for f in fixtures if f.round < before_round]
        for _ in self.replay(fixtures, accumulators):
            pass
        return {team: acc.rating for team, acc in accumulators.items()}


def _lookup(accumulators: Dict[str, TeamAccumulator], team: str) -> TeamAccumulator:
    try:
        return accumulators[team]
    except KeyError:
        raise MissingTeamError(team) from None
