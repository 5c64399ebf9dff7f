"""Date extraction from post filenames."""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path

from ..exceptions import DateParseError

POST_DATE_FORMAT = "%Y-%m-%d"

# The date prefix ends at this hyphen: YYYY-MM-DD-rest
_DATE_HYPHENS = 3


def _date_prefix_end(basename: str) -> int | None:
    """Return the index of the hyphen that closes the date prefix, if any."""
    count = 0
    for i, char in enumerate(basename):
        if char == "-":
            count += 1
            if count == _DATE_HYPHENS:
                return i
    return None


def split_post_filename(path: Path | str) -> tuple[date, str]:
    """Split a post filename into its date and its name.

    ``2024-03-05-hello-world.md`` gives ``(date(2024, 3, 5), "hello-world")``.

    Args:
        path: Path (or bare filename) of the post.

    Returns:
        Tuple of (publication date, filename remainder without extension).

    Raises:
        DateParseError: If the filename does not start with a valid date.
    """
    filename = Path(path)
    basename = filename.name
    end = _date_prefix_end(basename)

    if end is None:
        raise DateParseError(
            f"{basename!r} does not match the YYYY-MM-DD-name.md pattern"
        )

    date_str = basename[:end]
    try:
        post_date = datetime.strptime(date_str, POST_DATE_FORMAT).date()
    except ValueError as e:
        raise DateParseError(f"{date_str!r} is not a valid date: {e}") from e

    stem = filename.stem
    return post_date, stem[end + 1 :]


def extract_date_from_filename(path: Path | str) -> date:
    """Extract the publication date from a post filename.

    The part of the basename before the third hyphen is parsed as YYYY-MM-DD.
    Hyphens in the rest of the name are ignored.

    Args:
        path: Path (or bare filename) of the post.

    Returns:
        The publication date.

    Raises:
        DateParseError: If there are fewer than three hyphens or the prefix is not a calendar date.
    """
    post_date, _ = split_post_filename(path)
    return post_date
