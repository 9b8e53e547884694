from datetime import date

import pytest

from utils.date_helpers import (
    format_display_date,
    friendly_range,
    month_range,
    parse_date,
    parse_display_date,
)


def test_parse_date_variants():
    assert parse_date("2024-06-05") == date(2024, 6, 5)
    assert parse_date("2024/06/05") == date(2024, 6, 5)
    assert parse_date("") is None
    assert parse_date("June 5") is None


def test_month_range():
    assert month_range("2024-02") == ("2024-02-01", "2024-02-29")
    assert month_range("2023-12") == ("2023-12-01", "2023-12-31")


def test_month_range_rejects_bad_month():
    with pytest.raises(ValueError):
        month_range("2024-13")


def test_friendly_range():
    assert friendly_range("2024-06-01", "2024-06-30") == "June 2024"
    assert friendly_range("2024-06-01", "2024-07-15") == "Jun 01 - Jul 15, 2024"
    assert friendly_range("bad", "2024-06-30") == ""


@pytest.mark.parametrize("fmt_key, expected", [
    ("MM/DD/YYYY", "06/05/2024"),
    ("DD/MM/YYYY", "05/06/2024"),
    ("YYYY-MM-DD", "2024-06-05"),
    ("DD.MM.YYYY", "05.06.2024"),
    ("MMM D, YYYY", "Jun 05, 2024"),
])
def test_format_display_date(fmt_key, expected):
    assert format_display_date("2024-06-05", fmt_key) == expected
    assert parse_display_date(expected, fmt_key) == date(2024, 6, 5)


def test_format_display_date_passes_through_garbage():
    assert format_display_date("not a date") == "not a date"


def test_parse_display_date_falls_back_to_iso():
    assert parse_display_date("2024-06-05", "MM/DD/YYYY") == date(2024, 6, 5)
    assert parse_display_date("", "MM/DD/YYYY") is None
    assert parse_display_date("31/31/2024", "MM/DD/YYYY") is None
