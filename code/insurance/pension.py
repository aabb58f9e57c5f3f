from typing import Optional, Sequence, Tuple

from .utils import round_half_up, safe_div

# Share of net income the state invalidity pension pays out, per severity grade.
DEFAULT_PENSION_RATIOS = (0.286, 0.3358, 0.4961)


def default_pension_levels(income: float) -> Tuple[int, int, int]:
    return tuple(round_half_up(income * ratio) for ratio in DEFAULT_PENSION_RATIOS)


def pension_share(level: float, income: float) -> Optional[int]:
    """Pension level as a whole percentage of net income, or None for zero income."""
    ratio = safe_div(level, income)
    if ratio is None:
        return None
    return round_half_up(ratio * 100)


def pension_shares(levels: Sequence[float], income: float) -> Tuple[Optional[int], ...]:
    return tuple(pension_share(level, income) for level in levels)
