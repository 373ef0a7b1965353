from typing import Any, Dict, List, Tuple
from datetime import datetime
from dateutil import parser as date_parser

from ..core.exceptions import ValidationError

# Checked in this order; the first missing field is the one reported
MOVIE_TEXT_FIELDS: List[Tuple[str, str]] = [
    ("title", "Title"),
    ("description", "Description"),
    ("releaseDate", "ReleaseDate"),
]

GENRE_LIST_ERROR = "Genre field is required and should be an array"
INVALID_RELEASE_DATE = "Invalid release date"

# Missing month and day fall back to January 1st
DEFAULT_DATE = datetime(2000, 1, 1)
OTHER_DEFAULT_DATE = datetime(2001, 2, 2)


def is_filled(value: Any) -> bool:
    """
    True when value is a string that is not blank after trimming
    """
    return isinstance(value, str) and value.strip() != ""


def _as_payload(payload: Any) -> Dict[str, Any]:
    return payload if isinstance(payload, dict) else {}


def parse_release_date(value: str) -> datetime:
    """
    Parse a release date leniently and truncate it to the calendar date

    Args:
        value: Date string such as "2023-01-01", "2023-01-01T10:00:00Z", "May 8, 2021" or "2023"

    Returns:
        Naive datetime at midnight of the parsed date

    Raises:
        ValidationError: 422 when the value is not a date
    """
    try:
        parsed = date_parser.parse(value, default=DEFAULT_DATE)
        other_year = date_parser.parse(value, default=OTHER_DEFAULT_DATE).year
    except (ValueError, OverflowError):
        raise ValidationError(INVALID_RELEASE_DATE, 422)
    # The year followed the default, so the input had no date part
    if parsed.year != other_year:
        raise ValidationError(INVALID_RELEASE_DATE, 422)
    return datetime(parsed.year, parsed.month, parsed.day)


def validate_genre(payload: Any) -> Dict[str, str]:
    """
    Check a genre payload before it is persisted

    Returns:
        The validated fields

    Raises:
        ValidationError: 400 when name is missing or blank
    """
    name = _as_payload(payload).get("name")
    if not is_filled(name):
        raise ValidationError("Name field is required")
    return {"name": name}


def validate_movie(payload: Any) -> Dict[str, Any]:
    """
    Check a movie payload before it is persisted.

    Text fields are checked first, then the genre list, then the release date
    format, so a payload with several problems reports the earliest one.

    Returns:
        The validated fields with releaseDate as a datetime

    Raises:
        ValidationError: 400 for a missing field or genre list, 422 for an unparseable date
    """
    data = _as_payload(payload)

    for key, label in MOVIE_TEXT_FIELDS:
        if not is_filled(data.get(key)):
            raise ValidationError(f"{label} field is required")

    genre = data.get("genre")
    if not isinstance(genre, list) or len(genre) == 0 or not all(is_filled(g) for g in genre):
        raise ValidationError(GENRE_LIST_ERROR)

    return {
        "title": data["title"],
        "description": data["description"],
        "releaseDate": parse_release_date(data["releaseDate"]),
        "genre": list(genre),
    }
