import pytest

from gallery.titles import INDEX_TITLE, page_title, parse_slug, slug_from_prefix

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def test_parse_slug_with_year() -> None:
    parsed = parse_slug("20230101_NewYear", include_year=True)
    assert parsed.year == "2023"
    assert parsed.display_title == "Sun 1 Jan 2023 — _NewYear"


def test_parse_slug_without_year() -> None:
    parsed = parse_slug("20220704_Independence", include_year=False)
    assert parsed.year == "2022"
    assert parsed.display_title == "Mon 4 Jul — _Independence"


def test_day_of_month_is_not_zero_padded() -> None:
    assert parse_slug("20230815_Camping").display_title.startswith("Tue 15 Aug 2023")
    assert parse_slug("20231205X").display_title == "Tue 5 Dec 2023 — X"


@pytest.mark.parametrize(
    "slug",
    ["20000229_Leap", "19991231_Party", "20240101", "20250630_a_b_c"],
)
def test_valid_dates_start_with_weekday(slug: str) -> None:
    parsed = parse_slug(slug)
    assert parsed.year == slug[:4]
    assert parsed.display_title.split(" ")[0] in WEEKDAYS


@pytest.mark.parametrize(
    "slug",
    [
        "BADDATE_Party",
        "2023ab01_Trip",
        "20231301_Month13",
        "20230230_Feb30",
        "2023-1-1_Dashes",
        "2023",
        "",
    ],
)
def test_malformed_dates_fall_back_to_slug(slug: str) -> None:
    parsed = parse_slug(slug)
    assert parsed.display_title == slug
    assert parsed.year == slug[:4]


def test_baddate_scenario() -> None:
    parsed = parse_slug("BADDATE_Party")
    assert parsed.display_title == "BADDATE_Party"
    assert parsed.year == "BADD"


def test_slug_from_prefix() -> None:
    assert slug_from_prefix("photos/20230101_NewYear/", "photos/") == "20230101_NewYear"
    assert slug_from_prefix("photos/a/b/", "photos/") == "a/b"


def test_page_title() -> None:
    assert page_title() == INDEX_TITLE
    assert page_title("20230101_NewYear") == "Sun 1 Jan 2023 — _NewYear"
    assert page_title("Holiday") == "Holiday"
