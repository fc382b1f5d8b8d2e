"""Load a season from a local path or a URL."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from openfootball.data.api_client import OpenFootballClient
from openfootball.data.season import Season


def is_url(source: Union[str, Path]) -> bool:
    return isinstance(source, str) and source.startswith(("http://", "https://"))


def load_season(
    source: Union[str, Path],
    name: Optional[str] = None,
    client: Optional[OpenFootballClient] = None,
) -> Season:
    """Load a season from ``source``.

    Args:
        source: Filesystem path, or an http(s) URL of a raw season file
        name: Optional display name overriding the header
        client: HTTP client to use for URLs (a fresh one by default)

    Raises:
        ParseError: The text is not a valid season file.
        FetchError: A URL could not be fetched.
        OSError: A local file could not be read.
    """
    if is_url(source):
        client = client or OpenFootballClient()
        return Season.from_text(client.get_text(str(source)), name=name)
    return Season.from_path(source, name=name)
