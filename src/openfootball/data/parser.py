"""Line classifier for the openfootball season text format.

Each non-blank line of a season file is one of four shapes:

    # English Premier League 2018/19        -> HeaderEvent
    Matchday 1                              -> RoundEvent
    [Fri Aug/10]                            -> DateEvent
    Manchester United 2-1 Leicester City    -> FixtureEvent

Shapes are tried in that order and the first match wins. Anything else
raises ParseError naming the line. Context that later lines depend on
(base year, round, date) lives in an explicit ParseCursor that the caller
threads through the loop; classify_line() only reads it.

Key Functions:
    classify_line() - Map one line plus cursor to an event (or None for blanks)
    resolve_date() - Turn a month abbreviation and day into a season date

Usage:
    from openfootball.data.parser import ParseCursor, classify_line

    cursor = ParseCursor()
    for line in lines:
        event = classify_line(line, cursor)
        if event is not None:
            cursor.apply(event)
"""

from __future__ import annotations

import datetime as dt
import re
from dataclasses import dataclass
from typing import Optional, Union

from openfootball.config import DELIMITER_CHARS, MONTH_ABBREVIATIONS, SEASON_START_MONTH
from openfootball.data.schemas import Fixture
from openfootball.exceptions import ParseError

HEADER_RE = re.compile(r"^#\s+(?P<name>.+?\s+(?P<year>\d{4})/\d{2})$")
ROUND_RE = re.compile(r"^(?:matchday|round)\s+(?P<round>\d+)$", re.IGNORECASE)
DATE_RE = re.compile(r"^\[(?P<weekday>[A-Za-z]{3})\s+(?P<month>[A-Za-z]{3})/(?P<day>\d{1,2})\]$")
FIXTURE_RE = re.compile(
    r"""
    ^
    (?P<home>.+?)
    \s+
    (?P<home_goals>\d+)?
    -
    (?P<away_goals>\d+)?
    \s+
    (?P<away>.+?)
    (?:\s*postponed)?
    $
    """,
    re.VERBOSE,
)


# -----------------------------------------------------------------------------
# Events
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class HeaderEvent:
    name: str
    year: int


@dataclass(frozen=True)
class RoundEvent:
    round: int


@dataclass(frozen=True)
class DateEvent:
    date: dt.date


@dataclass(frozen=True)
class FixtureEvent:
    fixture: Fixture


LineEvent = Union[HeaderEvent, RoundEvent, DateEvent, FixtureEvent]


@dataclass
class ParseCursor:
    """Running parse context, carried from one line to the next.

    Each field keeps its value until a later marker of the same kind
    overwrites it. ``date`` stays None until the first date marker.
    """

    name: Optional[str] = None
    year: Optional[int] = None
    round: int = 0
    date: Optional[dt.date] = None
    line_number: Optional[int] = None

    def apply(self, event: LineEvent) -> None:
        """Fold a context event into the cursor. Fixture events leave it untouched."""
        if isinstance(event, HeaderEvent):
            self.name = event.name
            self.year = event.year
        elif isinstance(event, RoundEvent):
            self.round = event.round
        elif isinstance(event, DateEvent):
            self.date = event.date


# -----------------------------------------------------------------------------
# Classification
# -----------------------------------------------------------------------------

def is_ignorable(line: str) -> bool:
    """True for blank lines and decorative separators like ``=====``."""
    return all(ch in DELIMITER_CHARS or ch.isspace() for ch in line)


def resolve_date(base_year: int, month_abbrev: str, day: int) -> dt.date:
    """Resolve a month/day inside a season that starts in ``base_year``.

    Aug-Dec fall in the base year, Jan-Jul in the following one.

    Raises:
        ValueError: Unknown month abbreviation or a day outside the month.
    """
    month = MONTH_ABBREVIATIONS.get(month_abbrev.lower())
    if month is None:
        raise ValueError(f"unknown month {month_abbrev!r}")
    year = base_year if month >= SEASON_START_MONTH else base_year + 1
    return dt.date(year, month, day)


def classify_line(line: str, cursor: ParseCursor) -> Optional[LineEvent]:
    """Classify one line of a season file.

    Args:
        line: Raw line; surrounding whitespace is ignored
        cursor: Current parse context (read only here)

    Returns:
        The event for the line, or None for blank/separator lines.

    Raises:
        ParseError: The line matches no shape, has a half-known score, or
            carries a date that cannot be resolved.
    """
    text = line.strip()
    if is_ignorable(text):
        return None

    match = HEADER_RE.match(text)
    if match:
        return HeaderEvent(name=match.group("name"), year=int(match.group("year")))

    match = ROUND_RE.match(text)
    if match:
        return RoundEvent(round=int(match.group("round")))

    match = DATE_RE.match(text)
    if match:
        if cursor.year is None:
            raise ParseError(text, cursor.line_number, "date marker before season header")
        try:
            date = resolve_date(cursor.year, match.group("month"), int(match.group("day")))
        except ValueError as e:
            raise ParseError(text, cursor.line_number, f"invalid date ({e})") from e
        return DateEvent(date=date)

    match = FIXTURE_RE.match(text)
    if match:
        return FixtureEvent(fixture=_fixture_from_match(match, text, cursor))

    raise ParseError(text, cursor.line_number)


def _fixture_from_match(match: re.Match, text: str, cursor: ParseCursor) -> Fixture:
    home_goals = match.group("home_goals")
    away_goals = match.group("away_goals")
    if (home_goals is None) != (away_goals is None):
        raise ParseError(text, cursor.line_number, "score has only one side")

    return Fixture(
        round=cursor.round,
        # Placeholder for fixtures listed before any date marker
        date=cursor.date or dt.date.today(),
        home=match.group("home").strip(),
        away=match.group("away").strip(),
        home_goals=int(home_goals) if home_goals is not None else None,
        away_goals=int(away_goals) if away_goals is not None else None,
    )
