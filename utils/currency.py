def format_currency(amount: float, symbol: str = "$") -> str:
    """Format a float as currency string, e.g. '$1,234.56' or '-$12.00'."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_budget_status(remaining: float, symbol: str = "$") -> str:
    """'$12.00 left' when under the limit, '$3.50 over' when past it."""
    if remaining < 0:
        return f"{format_currency(-remaining, symbol)} over"
    return f"{format_currency(remaining, symbol)} left"
