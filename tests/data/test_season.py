"""Tests for Season assembly."""

import datetime as dt

import pytest

from openfootball.data.season import Season
from openfootball.exceptions import ParseError


class TestFromPath:
    def test_premier_league_sample(self, sample_season):
        assert sample_season.name == "English Premier League 2018/19"
        assert sample_season.year == 2018
        assert len(sample_season.fixtures) == 8
        assert len(sample_season.played()) == 6

    def test_fixtures_keep_file_order(self, sample_season):
        homes = [f.home for f in sample_season.fixtures]
        assert homes == [
            "Manchester United", "Newcastle United", "AFC Bournemouth",
            "Cardiff City", "Tottenham Hotspur", "Leicester City",
            "Manchester United", "Fulham",
        ]

    def test_context_carries_forward(self, sample_season):
        fixtures = sample_season.fixtures
        # Two fixtures share the Aug/11 marker
        assert fixtures[1].date == fixtures[2].date == dt.date(2018, 8, 11)
        assert [f.round for f in fixtures] == [1, 1, 1, 2, 2, 2, 20, 20]

    def test_january_date_rolls_into_next_year(self, sample_season):
        assert sample_season.fixtures[-1].date == dt.date(2019, 1, 1)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Season.from_path(tmp_path / "missing.txt")

    def test_malformed_file_raises_with_line(self, malformed_path):
        with pytest.raises(ParseError) as exc_info:
            Season.from_path(malformed_path)
        assert exc_info.value.line == "???"
        assert exc_info.value.line_number == 6


class TestFromText:
    def test_minimal_season(self):
        season = Season.from_text(
            "# Test League 2018/19\n"
            "Matchday 1\n"
            "[Sat Aug/11]\n"
            "Team A 2-1 Team B\n"
        )
        assert season.name == "Test League 2018/19"
        assert len(season.fixtures) == 1
        fixture = season.fixtures[0]
        assert fixture.round == 1
        assert fixture.date == dt.date(2018, 8, 11)
        assert (fixture.home_goals, fixture.away_goals) == (2, 1)

    def test_name_override(self):
        season = Season.from_text("# Test League 2018/19\n", name="My League")
        assert season.name == "My League"

    def test_fixture_before_any_date_uses_placeholder(self):
        season = Season.from_text("# Test League 2018/19\nMatchday 1\nTeam A 1-1 Team B\n")
        assert season.fixtures[0].date == dt.date.today()

    def test_fixture_before_any_round_is_round_zero(self):
        season = Season.from_text("# Test League 2018/19\n[Sat Aug/11]\nTeam A 1-1 Team B\n")
        assert season.fixtures[0].round == 0

    def test_parse_failure_returns_no_season(self):
        with pytest.raises(ParseError, match=r"\?\?\?"):
            Season.from_text("# Test League 2018/19\nTeam A 1-0 Team B\n???\n")

    def test_empty_text(self):
        season = Season.from_text("")
        assert season.name == ""
        assert season.fixtures == ()


class TestQueries:
    def test_teams_in_first_seen_order(self, sample_season):
        assert sample_season.teams() == [
            "Manchester United", "Leicester City", "Newcastle United", "Tottenham Hotspur",
            "AFC Bournemouth", "Cardiff City", "Fulham", "Wolverhampton Wanderers",
        ]

    def test_rounds(self, sample_season):
        assert sample_season.rounds() == [1, 2, 20]

    def test_fixtures_in_round(self, sample_season):
        unplayed = sample_season.fixtures_in_round(20)
        assert len(unplayed) == 2
        assert not any(f.played for f in unplayed)

    def test_to_frame(self, sample_season):
        df = sample_season.to_frame()
        assert list(df.columns) == ["round", "date", "home", "away", "home_goals", "away_goals"]
        assert len(df) == 8
