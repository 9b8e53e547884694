import pytest

from utils.validation import is_hex_color, validate_amount, validate_color


@pytest.mark.parametrize("raw, expected", [
    ("12.50", 12.5),
    (" $1,234 ", 1234.0),
    (7, 7.0),
])
def test_validate_amount_accepts_positive_numbers(raw, expected):
    assert validate_amount(raw) == expected


@pytest.mark.parametrize("raw", ["nan", "inf", "-inf", "0", "-3", 0, float("nan")])
def test_validate_amount_rejects_non_finite_and_non_positive(raw):
    with pytest.raises(ValueError, match="positive"):
        validate_amount(raw)


@pytest.mark.parametrize("raw", ["", "abc", None])
def test_validate_amount_rejects_garbage(raw):
    with pytest.raises(ValueError, match="Invalid amount"):
        validate_amount(raw)


@pytest.mark.parametrize("raw, expected", [
    ("#FF9800", "#FF9800"),
    ("ff9800", "#ff9800"),
    ("#abc", "#abc"),
    ("  #123456 ", "#123456"),
])
def test_validate_color_accepts_hex(raw, expected):
    assert validate_color(raw) == expected


@pytest.mark.parametrize("raw", ["blue", "#blue", "#12345", "#1234567", "", None])
def test_validate_color_rejects_everything_else(raw):
    with pytest.raises(ValueError, match="Invalid color"):
        validate_color(raw)


def test_is_hex_color():
    assert is_hex_color("#fff")
    assert not is_hex_color("fff")
    assert not is_hex_color(None)
