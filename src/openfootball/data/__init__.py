"""Data module - parsing, season assembly, schemas, and remote source.

Public API:
    Season - Parsed season (name + ordered fixtures)
    load_season - Load a season from a path or URL
    OpenFootballClient - HTTP client for raw openfootball files
    classify_line, ParseCursor - Line-level parser
    Fixture, Standing, Odds - Pydantic records
"""

from openfootball.data.schemas import Fixture, Odds, Standing, records_to_frame, records_to_json
from openfootball.data.parser import (
    DateEvent,
    FixtureEvent,
    HeaderEvent,
    LineEvent,
    ParseCursor,
    RoundEvent,
    classify_line,
)
from openfootball.data.season import Season
from openfootball.data.api_client import OpenFootballClient
from openfootball.data.loader import load_season

__all__ = [
    "Fixture",
    "Odds",
    "Standing",
    "records_to_frame",
    "records_to_json",
    "DateEvent",
    "FixtureEvent",
    "HeaderEvent",
    "LineEvent",
    "ParseCursor",
    "RoundEvent",
    "classify_line",
    "Season",
    "OpenFootballClient",
    "load_season",
]
