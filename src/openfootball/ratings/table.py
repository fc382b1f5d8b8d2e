"""League table from a standings history.

Takes the flat, fixture-ordered standings list and keeps each team's most
recent snapshot, then ranks by points, goal difference and goals scored.
Ties beyond that fall back to team name so the table is deterministic.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

import pandas as pd

from openfootball.data.schemas import Standing


def latest_standings(standings: Iterable[Standing], through_round: Optional[int] = None) -> List[Standing]:
    """Most recent standing per team, optionally ignoring rounds after ``through_round``."""
    latest: Dict[str, Standing] = {}
    for standing in standings:
        if through_round is not None and standing.round > through_round:
            continue
        latest[standing.team] = standing
    return list(latest.values())


def league_table(standings: Iterable[Standing], through_round: Optional[int] = None) -> pd.DataFrame:
    """Rank teams by their latest standing.

    Returns:
        DataFrame with position, team, played, wins, draws, losses,
        goals_for, goals_against, goal_difference, points, rating.
    """
    rows = [
        {
            "team": s.team,
            "played": s.played,
            "wins": s.wins,
            "draws": s.draws,
            "losses": s.losses,
            "goals_for": s.goals_for,
            "goals_against": s.goals_against,
            "goal_difference": s.goal_difference,
            "points": s.points,
            "rating": s.rating,
        }
        for s in latest_standings(standings, through_round)
    ]
    columns = [
        "team", "played", "wins", "draws", "losses",
        "goals_for", "goals_against", "goal_difference", "points", "rating",
    ]
    df = pd.DataFrame(rows, columns=columns)
    df = df.sort_values(
        ["points", "goal_difference", "goals_for", "team"],
        ascending=[False, False, False, True],
    ).reset_index(drop=True)
    df.insert(0, "position", range(1, len(df) + 1))
    return df


def rating_history(standings: Iterable[Standing]) -> pd.DataFrame:
    """Ratings pivoted to one column per team, indexed by round.

    When a team plays twice in a round the later snapshot wins. Rounds a
    team sat out are forward-filled from its previous rating.
    """
    df = pd.DataFrame(
        [{"round": s.round, "team": s.team, "rating": s.rating} for s in standings],
        columns=["round", "team", "rating"],
    )
    if df.empty:
        return df
    pivot = df.pivot_table(index="round", columns="team", values="rating", aggfunc="last")
    return pivot.sort_index().ffill()
