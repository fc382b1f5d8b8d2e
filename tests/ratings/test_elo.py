"""Tests for the Elo replay engine."""

import datetime as dt

import pytest

from openfootball.data.schemas import Fixture
from openfootball.data.season import Season
from openfootball.exceptions import MissingTeamError
from openfootball.ratings.elo import (
    EloEngine,
    TeamAccumulator,
    actual_score,
    expected_score,
    round_half_away_from_zero,
)

DAY = dt.date(2018, 8, 11)


def make_season(*fixtures: Fixture) -> Season:
    return Season(name="Test", fixtures=tuple(fixtures), year=2018)


def played(home, away, home_goals, away_goals, round=1):
    return Fixture(round=round, date=DAY, home=home, away=away, home_goals=home_goals, away_goals=away_goals)


class TestFormulas:
    def test_equal_ratings_expect_half(self):
        assert expected_score(1500, 1500) == 0.5

    def test_expected_scores_are_complementary(self):
        assert expected_score(1600, 1400) + expected_score(1400, 1600) == pytest.approx(1.0)

    def test_200_point_gap(self):
        assert expected_score(1600, 1400) == pytest.approx(0.7597, abs=1e-4)

    @pytest.mark.parametrize("goals_for,goals_against,expected", [
        (2, 1, 1.0),
        (1, 1, 0.5),
        (0, 3, 0.0),
    ])
    def test_actual_score_without_margin(self, goals_for, goals_against, expected):
        assert actual_score(goals_for, goals_against) == expected

    def test_actual_score_with_margin(self):
        assert actual_score(3, 0, 0.1) == pytest.approx(1.3)
        assert actual_score(0, 3, 0.1) == pytest.approx(-0.3)
        assert actual_score(2, 2, 0.1) == 0.5

    @pytest.mark.parametrize("value,expected", [
        (1516.5, 1517),
        (2.5, 3),
        (-2.5, -3),
        (1.4, 1),
        (1483.26, 1483),
        (0.0, 0),
    ])
    def test_rounding_is_half_away_from_zero(self, value, expected):
        assert round_half_away_from_zero(value) == expected


class TestTeamAccumulator:
    def test_record_updates_counters_and_rating(self):
        acc = TeamAccumulator(rating=1500)
        acc.record(2, 1, 1516)
        acc.record(0, 0, 1514)
        acc.record(1, 3, 1500)
        assert (acc.wins, acc.draws, acc.losses) == (1, 1, 1)
        assert (acc.goals_for, acc.goals_against) == (3, 4)
        assert acc.rating == 1500


class TestStandings:
    def test_single_win_from_equal_ratings(self):
        season = make_season(played("Team A", "Team B", 2, 1))
        home, away = EloEngine(initial_rating=1500, k=32).standings(season)

        assert home.team == "Team A"
        assert (home.wins, home.draws, home.losses) == (1, 0, 0)
        assert home.rating == 1516
        assert away.team == "Team B"
        assert (away.wins, away.draws, away.losses) == (0, 0, 1)
        assert away.rating == 1484

    def test_both_sides_use_pre_game_ratings(self):
        """An upset between 1600 and 1400 moves both sides by the same amount."""
        engine = EloEngine(k=32, baseline={"A": 1600, "B": 1400})
        home, away = engine.standings(make_season(played("A", "B", 0, 1)))

        # 32 × 0.7597 = 24.31 either way; a sequential update would not be symmetric
        assert home.rating == 1576
        assert away.rating == 1424

    def test_draw_between_equals_leaves_ratings(self):
        home, away = EloEngine().standings(make_season(played("A", "B", 1, 1)))
        assert home.rating == away.rating == 1500
        assert home.draws == away.draws == 1

    def test_margin_factor_only_moves_ratings(self):
        engine = EloEngine(k=32, score_factor=0.1)
        home, away = engine.standings(make_season(played("A", "B", 3, 0)))
        assert home.rating == 1526  # 1500 + 32 × (1.3 - 0.5) = 1525.6
        assert away.rating == 1474  # 1500 + 32 × (-0.3 - 0.5) = 1474.4
        assert (home.wins, home.goals_for, home.goals_against) == (1, 3, 0)
        assert (away.losses, away.goals_for, away.goals_against) == (1, 0, 3)

    def test_sample_season_ratings(self, sample_season):
        standings = EloEngine(initial_rating=1500, k=32).standings(sample_season)
        final = {s.team: s.rating for s in standings}
        assert final == {
            "Manchester United": 1516,
            "Leicester City": 1501,
            "Newcastle United": 1484,
            "Tottenham Hotspur": 1531,
            "AFC Bournemouth": 1516,
            "Cardiff City": 1484,
            "Fulham": 1485,
            "Wolverhampton Wanderers": 1483,
        }

    def test_two_standings_per_played_fixture(self, sample_season):
        standings = EloEngine().standings(sample_season)
        assert len(sample_season.fixtures) >= len(sample_season.played()) == len(standings) // 2
        assert len(standings) == 12

    def test_standings_interleave_home_and_away(self, sample_season):
        standings = EloEngine().standings(sample_season)
        expected = []
        for fixture in sample_season.played():
            expected.extend([fixture.home, fixture.away])
        assert [s.team for s in standings] == expected

    def test_standings_tagged_with_fixture_date_and_round(self, sample_season):
        standings = EloEngine().standings(sample_season)
        assert standings[0].date == dt.date(2018, 8, 10)
        assert standings[0].round == 1
        assert standings[-1].date == dt.date(2018, 8, 19)
        assert standings[-1].round == 2

    def test_cumulative_counters(self, sample_season):
        standings = EloEngine().standings(sample_season)
        spurs = [s for s in standings if s.team == "Tottenham Hotspur"][-1]
        assert (spurs.wins, spurs.draws, spurs.losses) == (2, 0, 0)
        assert (spurs.goals_for, spurs.goals_against) == (5, 2)

    def test_replay_is_deterministic(self, sample_season):
        engine = EloEngine(k=20, score_factor=0.05)
        first = engine.standings(sample_season)
        second = engine.standings(sample_season)
        assert first == second
        assert [s.model_dump_json() for s in first] == [s.model_dump_json() for s in second]

    def test_unplayed_only_season_has_no_standings(self):
        season = make_season(Fixture(round=1, date=DAY, home="A", away="B"))
        assert EloEngine().standings(season) == []


class TestRatings:
    def test_ratings_cover_every_team(self, sample_season):
        ratings = EloEngine().ratings(sample_season)
        assert set(ratings) == set(sample_season.teams())

    def test_ratings_before_round(self, sample_season):
        ratings = EloEngine().ratings(sample_season, before_round=2)
        assert ratings["Tottenham Hotspur"] == 1516
        assert ratings["Fulham"] == 1500  # first plays in round 2

    def test_ratings_before_first_round_are_initial(self, sample_season):
        ratings = EloEngine(initial_rating=1400).ratings(sample_season, before_round=1)
        assert set(ratings.values()) == {1400}


class TestMissingTeam:
    def test_unregistered_team_is_fatal(self):
        engine = EloEngine()
        accumulators = engine.new_accumulators(["A"])
        with pytest.raises(MissingTeamError, match="'B'"):
            list(engine.replay([played("A", "B", 1, 0)], accumulators))
