"""Input checks shared by the forms and services. Raise ValueError with a
message fit for the form's inline error label."""
import math
import re

_HEX_COLOR = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def validate_amount(raw) -> float:
    """Parse an expense amount; must be a finite number above zero."""
    if isinstance(raw, str):
        raw = raw.strip().replace(",", "").lstrip("$")
    try:
        amount = float(raw)
    except (TypeError, ValueError):
        raise ValueError("Invalid amount.")
    if not math.isfinite(amount) or amount <= 0:
        raise ValueError("Amount must be a positive number.")
    return amount


def is_hex_color(value: str) -> bool:
    return isinstance(value, str) and bool(_HEX_COLOR.match(value))


def validate_color(raw: str) -> str:
    """Return '#rgb' or '#rrggbb'; a missing '#' is added."""
    color = (raw or "").strip()
    if color and not color.startswith("#"):
        color = "#" + color
    if not is_hex_color(color):
        raise ValueError("Invalid color.")
    return color
