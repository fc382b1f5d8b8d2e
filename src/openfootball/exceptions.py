"""Exceptions raised by openfootball.

ParseError and FetchError describe bad or unavailable input and are meant to
be reported to the user. MissingTeamError means a replay was handed fixtures
that were never registered, which is a bug rather than a data problem.
"""

from __future__ import annotations

from typing import Optional


class ParseError(ValueError):
    """A season file line that matches none of the recognized shapes."""

    def __init__(self, line: str, line_number: Optional[int] = None, reason: str = "unrecognized line"):
        self.line = line
        self.line_number = line_number
        self.reason = reason
        location = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{location}{reason}: {line!r}")


class MissingTeamError(RuntimeError):
    """Raised when a replay meets a team it has no accumulator for."""

    def __init__(self, team: str):
        self.team = team
        super().__init__(f"No accumulator registered for team {team!r}")


class FetchError(RuntimeError):
    """Raised when a remote season file cannot be fetched after all retries."""
