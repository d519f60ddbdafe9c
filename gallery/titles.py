"""
Turning album slugs (``YYYYMMDD_Title``) into display titles.
"""

from datetime import date, datetime
from typing import NamedTuple

INDEX_TITLE = "Fotoboek"
TITLE_SEPARATOR = " — "


class ParsedSlug(NamedTuple):
    display_title: str
    year: str


def _parse_date(date_part: str) -> date | None:
    if len(date_part) != 8 or not date_part.isdigit():  # noqa: PLR2004
        return None
    try:
        return datetime.strptime(date_part, "%Y%m%d").date()  # noqa: DTZ007
    except ValueError:
        return None


def format_date(day: date, include_year: bool) -> str:
    # "Sun 1 Jan 2023": day of month is not zero padded
    text = f"{day:%a} {day.day} {day:%b}"
    if include_year:
        text = f"{text} {day.year}"
    return text


def parse_slug(slug: str, include_year: bool = True) -> ParsedSlug:
    """
    Split a slug into a display title and a grouping year.

    The year is always the first four characters, valid or not. When the
    first eight characters are a calendar date the title becomes
    "<weekday> <day> <month>[ <year>] — <rest>"; otherwise the slug itself
    is the title.
    """
    year = slug[:4]
    day = _parse_date(slug[:8])
    if day is None:
        return ParsedSlug(display_title=slug, year=year)
    display_title = format_date(day, include_year) + TITLE_SEPARATOR + slug[8:]
    return ParsedSlug(display_title=display_title, year=year)


def slug_from_prefix(prefix: str, root_prefix: str) -> str:
    """Strip the root (e.g. ``photos/``) and the trailing slash off a prefix."""
    slug = prefix[len(root_prefix):] if prefix.startswith(root_prefix) else prefix
    return slug.strip("/")


def page_title(slug: str = "") -> str:
    """Heading for a gallery page: the index title, or the album's dated title."""
    if not slug:
        return INDEX_TITLE
    return parse_slug(slug, include_year=True).display_title
