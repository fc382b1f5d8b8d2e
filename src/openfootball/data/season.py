"""Season assembly from openfootball text.

Drives the line classifier over a whole season file, carrying the parse
cursor from line to line, and collects the fixtures in file order. File
order is treated as chronological order; nothing downstream re-sorts it.

This was set up against openfootball's 2018/19 English Premier League file
(https://github.com/openfootball/england). Other leagues in the same format
should work; the calendar rule assumes an August-to-July season.

Key Classes:
    Season - Immutable name + ordered fixtures

Usage:
    from openfootball.data.season import Season

    season = Season.from_path("1-premierleague.txt")
    print(season.name, len(season.fixtures))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

import pandas as pd

from openfootball.data.parser import FixtureEvent, ParseCursor, classify_line
from openfootball.data.schemas import Fixture, records_to_frame

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Season:
    """A season of football fixtures in file order."""

    name: str
    fixtures: Tuple[Fixture, ...]
    year: Optional[int] = None

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_lines(cls, lines: Iterable[str], name: Optional[str] = None) -> "Season":
        """Assemble a season from an iterable of lines.

        Args:
            lines: Season file lines, in order
            name: Display name; defaults to the header text

        Returns:
            The assembled Season.

        Raises:
            ParseError: On the first line that matches no recognized shape.
                No partial season is returned.
        """
        cursor = ParseCursor()
        fixtures: List[Fixture] = []
        undated = 0

        for line_number, line in enumerate(lines, start=1):
            cursor.line_number = line_number
            event = classify_line(line, cursor)
            if event is None:
                continue
            if isinstance(event, FixtureEvent):
                if cursor.date is None:
                    undated += 1
                    logger.warning(
                        f"Line {line_number}: fixture before any date marker, "
                        f"using placeholder date {event.fixture.date}"
                    )
                fixtures.append(event.fixture)
            else:
                cursor.apply(event)

        season = cls(
            name=name or cursor.name or "",
            fixtures=tuple(fixtures),
            year=cursor.year,
        )
        logger.info(
            f"Parsed {season.name or 'season'}: {len(fixtures)} fixtures "
            f"({len(season.played())} played, {undated} undated)"
        )
        return season

    @classmethod
    def from_text(cls, text: str, name: Optional[str] = None) -> "Season":
        """Assemble a season from a raw text buffer."""
        return cls.from_lines(text.splitlines(), name=name)

    @classmethod
    def from_path(cls, path: Union[str, Path], name: Optional[str] = None) -> "Season":
        """Read a season from a path on the filesystem.

        I/O errors (missing file, permissions) propagate unchanged.
        """
        with open(path, encoding="utf-8") as f:
            return cls.from_lines(f, name=name)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def teams(self) -> List[str]:
        """Distinct team names in order of first appearance."""
        seen = {}
        for fixture in self.fixtures:
            seen.setdefault(fixture.home, None)
            seen.setdefault(fixture.away, None)
        return list(seen)

    def played(self) -> List[Fixture]:
        """Fixtures with a known final score."""
        return [f for f in self.fixtures if f.played]

    def rounds(self) -> List[int]:
        """Distinct round numbers, ascending."""
        return sorted({f.round for f in self.fixtures})

    def fixtures_in_round(self, round_number: int) -> List[Fixture]:
        return [f for f in self.fixtures if f.round == round_number]

    def to_frame(self) -> pd.DataFrame:
        """Fixtures as a flat DataFrame, one row per fixture."""
        return records_to_frame(self.fixtures)

    def __len__(self) -> int:
        return len(self.fixtures)
