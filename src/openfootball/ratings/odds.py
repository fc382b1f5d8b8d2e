"""Win-probability odds for a round.

Replays every fixture in rounds strictly before the target round, freezes
the resulting ratings, and evaluates the expected-score split for every
fixture scheduled in the target round. Whether a target fixture has already
been played makes no difference: its own result never feeds its odds.

Usage:
    from openfootball.ratings import EloEngine, OddsCalculator

    calculator = OddsCalculator(EloEngine(k=32))
    odds = calculator.odds(season, round_number=38)
"""

from __future__ import annotations

from typing import Dict, List, Optional

from openfootball.data.schemas import Fixture, Odds
from openfootball.data.season import Season
from openfootball.exceptions import MissingTeamError
from openfootball.ratings.elo import EloEngine, expected_score


class OddsCalculator:
    """Odds for a target round from ratings frozen before it."""

    def __init__(self, engine: Optional[EloEngine] = None):
        self.engine = engine or EloEngine()

    def odds(self, season: Season, round_number: int) -> List[Odds]:
        """Odds for every fixture in ``round_number``, in season order.

        Returns an empty list when the round has no fixtures.
        """
        ratings = self.engine.ratings(season, before_round=round_number)
        return [
            odds_for_fixture(fixture, ratings)
            for fixture in season.fixtures
            if fixture.round == round_number
        ]


def odds_for_fixture(fixture: Fixture, ratings: Dict[str, int]) -> Odds:
    """Evaluate one fixture against frozen ratings."""
    try:
        home_rating = ratings[fixture.home]
        away_rating = ratings[fixture.away]
    except KeyError as e:
        raise MissingTeamError(e.args[0]) from None

    home_expected = expected_score(home_rating, away_rating)
    return Odds(
        round=fixture.round,
        date=fixture.date,
        home=fixture.home,
        home_expected=home_expected,
        away=fixture.away,
        away_expected=1.0 - home_expected,
    )
