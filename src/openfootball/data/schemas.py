"""Pydantic schemas for season data.

Defines the flat records that flow out of the parser and the rating replay.
All records are frozen: they are created once and never mutated.

Models:
    Fixture - One scheduled or completed match
    Standing - One team's accumulated record and rating after a played fixture
    Odds - Expected-score split for one fixture

Usage:
    from openfootball.data.schemas import Fixture

    fixture = Fixture(round=1, date=date(2018, 8, 10), home="Arsenal", away="Chelsea")
    print(fixture.played)
"""

from __future__ import annotations

import datetime as dt
import json
from typing import Iterable, Optional

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, model_validator

from openfootball.config import POINTS_FOR_DRAW, POINTS_FOR_WIN


class Fixture(BaseModel):
    """A match between two named teams, played or unplayed."""

    model_config = ConfigDict(frozen=True)

    round: int = Field(ge=0)
    date: dt.date
    home: str = Field(min_length=1)
    away: str = Field(min_length=1)
    home_goals: Optional[int] = Field(None, ge=0)
    away_goals: Optional[int] = Field(None, ge=0)

    @model_validator(mode="after")
    def _score_is_whole_or_absent(self) -> "Fixture":
        if (self.home_goals is None) != (self.away_goals is None):
            raise ValueError("home_goals and away_goals must both be set or both be None")
        return self

    @property
    def played(self) -> bool:
        """True when the final score is known."""
        return self.home_goals is not None

    def involves(self, team: str) -> bool:
        return team in (self.home, self.away)

    def goals_for(self, team: str) -> int:
        """Goals scored by ``team`` in this fixture.

        Raises:
            ValueError: If the fixture is unplayed or the team did not take part.
        """
        if not self.played:
            raise ValueError(f"{self.home} v {self.away} has not been played")
        if team == self.home:
            return self.home_goals
        if team == self.away:
            return self.away_goals
        raise ValueError(f"{team} did not play in {self.home} v {self.away}")

    def __str__(self) -> str:
        score = f"{self.home_goals}-{self.away_goals}" if self.played else "-"
        return f"{self.home} {score} {self.away}"


class Standing(BaseModel):
    """A team's record and rating immediately after one played fixture."""

    model_config = ConfigDict(frozen=True)

    team: str
    date: dt.date
    round: int = Field(ge=0)
    wins: int = Field(0, ge=0)
    draws: int = Field(0, ge=0)
    losses: int = Field(0, ge=0)
    goals_for: int = Field(0, ge=0)
    goals_against: int = Field(0, ge=0)
    rating: int

    @property
    def played(self) -> int:
        return self.wins + self.draws + self.losses

    @property
    def points(self) -> int:
        return self.wins * POINTS_FOR_WIN + self.draws * POINTS_FOR_DRAW

    @property
    def goal_difference(self) -> int:
        return self.goals_for - self.goals_against


class Odds(BaseModel):
    """Expected-score split for a fixture, from ratings frozen before its round."""

    model_config = ConfigDict(frozen=True)

    round: int = Field(ge=0)
    date: dt.date
    home: str
    home_expected: float = Field(ge=0.0, le=1.0)
    away: str
    away_expected: float = Field(ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _expected_scores_sum_to_one(self) -> "Odds":
        if abs(self.home_expected + self.away_expected - 1.0) > 1e-9:
            raise ValueError(
                f"expected scores must sum to 1, got {self.home_expected} + {self.away_expected}"
            )
        return self

    @property
    def favourite(self) -> Optional[str]:
        """Team with the higher expected score, or None for an even split."""
        if self.home_expected > self.away_expected:
            return self.home
        if self.away_expected > self.home_expected:
            return self.away
        return None


def records_to_frame(records: Iterable[BaseModel]) -> pd.DataFrame:
    """Flatten records into a DataFrame, one row per record, field order preserved.

    Args:
        records: Fixture, Standing or Odds instances (one kind per call)

    Returns:
        DataFrame suitable for ``to_csv`` / ``to_json``. Empty input yields an
        empty DataFrame with no columns.
    """
    rows = [record.model_dump() for record in records]
    return pd.DataFrame(rows)


def records_to_json(records: Iterable[BaseModel], indent: Optional[int] = 2) -> str:
    """Serialize records as a JSON array (dates as ISO strings)."""
    return json.dumps([record.model_dump(mode="json") for record in records], indent=indent)
