from utils.currency import format_budget_status, format_currency


def test_format_currency():
    assert format_currency(0) == "$0.00"
    assert format_currency(1234.5) == "$1,234.50"
    assert format_currency(-12) == "-$12.00"


def test_format_budget_status():
    assert format_budget_status(25) == "$25.00 left"
    assert format_budget_status(0) == "$0.00 left"
    assert format_budget_status(-3.5) == "$3.50 over"
