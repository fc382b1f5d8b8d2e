"""CLI smoke tests for the scripts.

These are minimal tests that verify:
1. Script runs without crashing
2. Exit code is 0 (or 1 on bad input)
3. Output exists and has the expected shape

Correctness of the numbers is covered by the library tests.
"""

import json
import subprocess
import sys
from pathlib import Path

import pytest

# Project root for PYTHONPATH
PROJECT_ROOT = Path(__file__).parent.parent
SCRIPTS_DIR = PROJECT_ROOT / "scripts"
FIXTURES_DIR = Path(__file__).parent / "fixtures"
SAMPLE = str(FIXTURES_DIR / "pl.txt")
MALFORMED = str(FIXTURES_DIR / "malformed.txt")


def run_script(script_path: Path, args: list = None) -> subprocess.CompletedProcess:
    """Run a script with PYTHONPATH set to src."""
    env = {
        "PYTHONPATH": str(PROJECT_ROOT / "src"),
    }

    cmd = [sys.executable, str(script_path)]
    if args:
        cmd.extend(args)

    return subprocess.run(
        cmd,
        capture_output=True,
        text=True,
        env={**subprocess.os.environ, **env},
        cwd=str(PROJECT_ROOT),
        timeout=120,
    )


class TestStandingsCLI:
    script = SCRIPTS_DIR / "ratings" / "standings_cli.py"

    def test_csv_output(self):
        result = run_script(self.script, [SAMPLE])
        assert result.returncode == 0, result.stderr
        lines = result.stdout.strip().splitlines()
        assert lines[0] == "team,date,round,wins,draws,losses,goals_for,goals_against,rating"
        assert len(lines) == 13
        assert lines[1] == "Manchester United,2018-08-10,1,1,0,0,2,1,1516"

    def test_json_output_with_k(self):
        result = run_script(self.script, [SAMPLE, "-k", "16", "--format", "json"])
        assert result.returncode == 0, result.stderr
        rows = json.loads(result.stdout)
        assert rows[0]["rating"] == 1508

    def test_table_output(self):
        result = run_script(self.script, [SAMPLE, "--table"])
        assert result.returncode == 0, result.stderr
        assert result.stdout.splitlines()[1].startswith("1,Tottenham Hotspur")

    def test_malformed_input_exits_one(self):
        result = run_script(self.script, [MALFORMED])
        assert result.returncode == 1
        assert "???" in result.stderr

    def test_missing_file_exits_one(self, tmp_path):
        result = run_script(self.script, [str(tmp_path / "nope.txt")])
        assert result.returncode == 1
        assert "ERROR" in result.stderr


class TestOddsCLI:
    script = SCRIPTS_DIR / "ratings" / "odds_cli.py"

    def test_csv_output(self):
        result = run_script(self.script, [SAMPLE, "--round", "20", "--format", "csv"])
        assert result.returncode == 0, result.stderr
        lines = result.stdout.strip().splitlines()
        assert lines[0] == "round,date,home,home_expected,away,away_expected"
        assert len(lines) == 3

    def test_defaults_to_next_round(self):
        result = run_script(self.script, [SAMPLE])
        assert result.returncode == 0, result.stderr
        assert "ROUND 20" in result.stdout

    def test_empty_round_exits_one(self):
        result = run_script(self.script, [SAMPLE, "--round", "7"])
        assert result.returncode == 1


class TestFixturesCLI:
    script = SCRIPTS_DIR / "ratings" / "fixtures_cli.py"

    def test_unplayed_listing(self):
        result = run_script(self.script, [SAMPLE, "--unplayed"])
        assert result.returncode == 0, result.stderr
        lines = result.stdout.strip().splitlines()
        assert len(lines) == 3
        assert lines[1].startswith("20,2019-01-01,Manchester United,Tottenham Hotspur")


class TestCLIHelpOutput:
    @pytest.mark.parametrize("script", [
        "ratings/standings_cli.py",
        "ratings/odds_cli.py",
        "ratings/fixtures_cli.py",
        "ops/pull_season.py",
        "ops/run_pipeline.py",
        "backtests/odds_backtest.py",
    ])
    def test_has_help(self, script):
        result = run_script(SCRIPTS_DIR / script, ["--help"])
        assert result.returncode == 0
        assert "usage" in result.stdout.lower()
