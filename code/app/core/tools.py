import math
from typing import Optional

from .config import COVERAGE_CURRENCY

NBSP = "\u00a0"
OSVC_BADGE = "OSVČ"


def format_amount(value: float) -> str:
    """Czech number formatting: non-breaking space groups, decimal comma, at most 3 decimals."""
    text = f"{abs(value):,.3f}".rstrip("0").rstrip(".")
    whole, _, frac = text.partition(".")
    out = whole.replace(",", NBSP)
    if frac:
        out += "," + frac
    if value < 0 and out != "0":
        out = "-" + out
    return out


def format_currency(value: float, per_day: bool = False, currency: str = COVERAGE_CURRENCY) -> str:
    suffix = f"{currency}/den" if per_day else currency
    return f"{format_amount(value)} {suffix}"


def pension_label(index: int) -> str:
    return f"Invalidní důchod {index + 1}. stupně"


def invalidity_label(index: int) -> str:
    return f"Invalidita {index + 1}. stupně"


def share_caption(share_pct: Optional[int]) -> str:
    if share_pct is None:
        return "– čisté mzdy"
    return f"{share_pct}% čisté mzdy"


def parse_amount(text: str) -> float:
    """Lenient numeric field parsing; anything unusable becomes 0."""
    try:
        value = float(str(text).strip() or 0)
    except ValueError:
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return value


def field_text(value: float) -> str:
    """Plain text for an editable numeric field; parse_amount reads it back unchanged."""
    return str(int(value)) if float(value).is_integer() else str(value)
